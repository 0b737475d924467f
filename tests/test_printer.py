import math

import pytest

from callisp.printer import display
from callisp.reader.parser import parse
from callisp.types.equality import values_equal
from callisp.types.lisp_type import LispType
from callisp.types.symbol import Symbol
from callisp.types.unspecified import Unspecified


@pytest.mark.parametrize(
    "value,expected",
    [
        (42, "42"),
        (-7, "-7"),
        (2.0, "2.0"),
        (0.25, "0.25"),
        (1e20, "1e+20"),
        (math.inf, "+inf.0"),
        (-math.inf, "-inf.0"),
        (math.nan, "+nan.0"),
        (True, "true"),
        (False, "false"),
        ("hi", '"hi"'),
        ('say "x"\n', '"say \\"x\\"\\n"'),
        (Symbol("foo"), "foo"),
        ([], "()"),
        ([1, [Symbol("a"), "b"], 2.5], '(1 (a "b") 2.5)'),
        (LispType.INT, "#<type Int>"),
        (Unspecified, ""),
    ]
)
def test_display(value, expected):
    assert display(value) == expected


def test_display_functions(run):
    assert display(run("+")) == "#<builtin +>"
    assert display(run("(lambda (x y) x)")) == "#<lambda (x y)>"
    assert display(run("(list + 1)")) == "(#<builtin +> 1)"


def test_division_results_read_back(run):
    for source in ("(/ 1 0)", "(/ -1 0)", "(/ 0 0)"):
        value = run(source)
        assert values_equal(parse(display(value)), value)
