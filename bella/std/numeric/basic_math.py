import math


class BasicMath:
    """Double-precision math that answers NaN or an infinity instead of raising."""

    def sin(self, x: float) -> float:
        try:
            return math.sin(x)
        except ValueError:
            return math.nan

    def cos(self, x: float) -> float:
        try:
            return math.cos(x)
        except ValueError:
            return math.nan

    def sqrt(self, x: float) -> float:
        if math.isnan(x) or x < 0:
            return math.nan
        return math.sqrt(x)

    def exp(self, x: float) -> float:
        try:
            return math.exp(x)
        except OverflowError:
            return math.inf

    def ln(self, x: float) -> float:
        if math.isnan(x) or x < 0:
            return math.nan
        if x == 0:
            return -math.inf
        return math.log(x)

    def hypot(self, *coordinates: float) -> float:
        return math.hypot(*coordinates)
