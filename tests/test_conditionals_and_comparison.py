import pytest

from blisp.builtin.form_builtin import if_builtin
from blisp.types.values import LispError, SExpr, QExpr


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(> 2 1)", 1),
        ("(> 1 2)", 0),
        ("(>= 2 2)", 1),
        ("(< 1 2)", 1),
        ("(< 2 2)", 0),
        ("(<= 2 2)", 1),
        ("(<= 3 2)", 0),
        ("(== 1 1)", 1),
        ("(== 1 2)", 0),
        ('(== "a" "a")', 1),
        ('(== 1 "1")', 0),
        ("(== [1 2] [1 2])", 1),
        ("(== [1 2] [2 1])", 0),
        ("(== [1 [2]] [1 [2]])", 1),
        ("(== [] [])", 1),
        ("(== + +)", 1),
        ("(== + -)", 0),
        ("(== (\\ [x] [x]) (\\ [x] [x]))", 1),
        ("(== (\\ [x] [x]) (\\ [y] [y]))", 0),
        ("(! 0)", 1),
        ("(! 5)", 0),
        ("(! [])", 1),
        ("(! [1])", 0),
        ("(! +)", 0),
    ],
)
def test_comparisons(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,message",
    [
        ("(> 1 2 3)", "Function > expected 2 args but got 3"),
        ("(< 1 [2])", "Function < argument 2 expected Number but got Q-Expression"),
        ('(>= "a" 1)', "Function >= argument 1 expected Number but got String"),
        ("(== 1 2 3)", "Function == expected 2 args but got 3"),
        ("(! 1 2)", "Function ! expected 1 args but got 2"),
    ],
)
def test_comparison_errors(run, source, message):
    assert run(source) == LispError(message)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if 0 [1] [2])", 2),
        ("(if 1 [1] [2])", 1),
        ("(if 1 [1])", 1),
        ("(if 0 [1])", SExpr()),
        ("(if [] [1] [2])", 2),
        ("(if [0] [1] [2])", 1),
        ("(if + [1] [2])", 1),
        ("(if (> 3 2) [+ 1 1] [undefined])", 2),
        ("(if (< 3 2) [undefined] [* 2 3])", 6),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_short_circuits_on_error_condition(run):
    assert run("(if (/ 1 0) [1] [2])") == LispError("division by zero")


def test_if_builtin_returns_error_condition_unevaluated(env):
    args = QExpr([LispError("boom"), QExpr([1]), QExpr([2])])
    assert if_builtin(env, args) == LispError("boom")


@pytest.mark.parametrize(
    "source,message",
    [
        ("(if 1 2)", "Function if argument 2 expected Q-Expression but got Number"),
        ("(if 0 [1] 2)", "Function if argument 3 expected Q-Expression but got Number"),
        ("(if 1 [1] [2] [3])", "Function if expected 3 args but got 4"),
    ],
)
def test_if_errors(run, source, message):
    assert run(source) == LispError(message)


def test_if_with_too_few_args(env):
    assert if_builtin(env, QExpr([1])) == LispError("Function if expected 2 args but got 1")
