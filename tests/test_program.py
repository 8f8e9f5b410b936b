import pytest

from cairozero.program import (
    Program,
    ProgramLoadError,
    load_cairo_zero_program,
    load_cairo_zero_program_from_json,
)

CONTENT = """
{
    "data": ["0x0000001", "0x0000002", "0x0000003", "0x0000004"],
    "main_scope": "__main__",
    "identifiers": {
        "__main__.main": {"decorators": [], "pc": 0, "type": "function"},
        "__main__.fib": {"decorators": [], "pc": 4, "type": "function"}
    }
}
"""


def test_load_cairo_zero_program():
    program = load_cairo_zero_program_from_json(CONTENT)
    assert program == Program(
        bytecode=[1, 2, 3, 4],
        entrypoints={"main": 0, "fib": 4},
        labels={},
        builtins=[],
    )


def test_load_labels_and_builtins():
    document = {
        "data": ["0x10"],
        "main_scope": "__main__",
        "builtins": ["output", "range_check"],
        "identifiers": {
            "__main__.__start__": {"pc": 0, "type": "label"},
            "__main__.__end__": {"pc": 4, "type": "label"},
            "__main__.main": {"pc": 6, "type": "function"},
            "__main__.main.SIZEOF_LOCALS": {"type": "const", "value": 0},
        },
    }
    program = load_cairo_zero_program(document)
    assert program.labels == {"__start__": 0, "__end__": 4}
    assert program.entrypoints == {"main": 6}
    assert program.builtins == ["output", "range_check"]
    assert program.bytecode == [16]


def test_bad_bytecode_reports_position():
    document = {"data": ["0x1", "nonsense"], "main_scope": "__main__", "identifiers": {}}
    with pytest.raises(ProgramLoadError, match="at position 1"):
        load_cairo_zero_program(document)


def test_invalid_json():
    with pytest.raises(ProgramLoadError):
        load_cairo_zero_program_from_json("{not json")


def test_json_must_be_object():
    with pytest.raises(ProgramLoadError):
        load_cairo_zero_program_from_json("[1, 2]")