from pathlib import Path

from bella.interpreter import run_file

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_while_loop():
    assert run_file(str(EXAMPLES / 'program_4.bella')) == [10]
