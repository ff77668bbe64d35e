from typing import Any, Dict, Optional

from bella.errors import DuplicateDeclaration, UnboundVariable


class Environment:
    """The binding store for one program execution.

    A single flat mapping from identifier to value. There is no nesting:
    blocks share the mapping, and a function call works on the caller's
    mapping between a ``snapshot()`` and a ``restore()``.
    """
    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self.values: Dict[str, Any] = dict(values) if values else {}

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

    def lookup(self, name: str) -> Any:
        try:
            return self.values[name]
        except KeyError:
            raise UnboundVariable(f'Unknown variable: {name}') from None

    def declare(self, name: str, value: Any):
        if name in self.values:
            raise DuplicateDeclaration(f'Variable already declared: {name}')
        self.values[name] = value

    def assign(self, name: str, value: Any):
        if name not in self.values:
            raise UnboundVariable(f'Unknown variable: {name}')
        self.values[name] = value

    def bind(self, name: str, value: Any):
        # Parameters shadow whatever the caller has under the same name
        self.values[name] = value

    def snapshot(self) -> Dict[str, Any]:
        return dict(self.values)

    def restore(self, snapshot: Dict[str, Any]):
        self.values = dict(snapshot)
