import pytest

from blisp.types.symbol import Symbol
from blisp.types.values import LispError, SExpr, QExpr


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(head [1 2 3])", 1),
        ("(tail [1 2 3])", 3),
        ("(tail [7])", 7),
        ("(tail [1 [2 3]])", QExpr([2, 3])),
        ("(head [[1 2] 3])", QExpr([1, 2])),
        ("(array 1 2 3)", QExpr([1, 2, 3])),
        ("(array [1])", QExpr([QExpr([1])])),
        ("(concat [1] [2 3] [])", QExpr([1, 2, 3])),
        ("(concat [a])", QExpr([Symbol("a")])),
        ("(eval [+ 1 2])", 3),
        ("(eval (array + 1 2))", 3),
        ("(eval (head [[+ 1 2] 5]))", 3),
        ("(eval [])", SExpr()),
    ],
)
def test_list_builtins(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,message",
    [
        ("(head [])", "Function head passed empty Q-Expression"),
        ("(tail [])", "Function tail passed empty Q-Expression"),
        ("(head 1)", "Function head argument 1 expected Q-Expression but got Number"),
        ("(tail [1] [2])", "Function tail expected 1 args but got 2"),
        ("(concat [1] 2)", "Function concat argument 2 expected Q-Expression but got Number"),
        ("(eval 1)", "Function eval argument 1 expected Q-Expression but got Number"),
        ("(eval [1] [2])", "Function eval expected 1 args but got 2"),
        ("(eval [undefined])", "undefined symbol: undefined"),
    ],
)
def test_list_builtin_errors(run, source, message):
    assert run(source) == LispError(message)


def test_tail_returns_last_element_not_rest(run):
    assert run("(tail [1 2 3])") == 3
    assert run("(tail [1 2 3])") != QExpr([2, 3])


def test_qexpr_contents_are_not_evaluated(run):
    assert run("[+ undefined (/ 1 0)]") == QExpr(
        [Symbol("+"), Symbol("undefined"), SExpr([Symbol("/"), 1, 0])]
    )


def test_list_results_do_not_alias_bindings(env, run):
    run("(def [xs] [1 2 3])")
    first = run("xs")
    first.append(4)
    assert run("xs") == QExpr([1, 2, 3])
