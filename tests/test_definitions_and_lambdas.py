import pytest

from blisp.types.lambda_fn import Lambda
from blisp.types.symbol import Symbol
from blisp.types.values import LispError, SExpr, QExpr


def test_def_binds_and_returns_empty_sexpr(env, run):
    assert run("(def [x] 5)") == SExpr()
    assert run("x") == 5
    assert env.get(Symbol("x")) == 5


def test_def_binds_several_names_positionally(run):
    run("(def [a b c] 1 [2] \"three\")")
    assert run("a") == 1
    assert run("b") == QExpr([2])
    assert run("c") == "three"


def test_def_stores_a_copy(run):
    run("(def [xs] [1 2])")
    run("(def [ys] xs)")
    run("(def [xs] (concat xs [3]))")
    assert run("ys") == QExpr([1, 2])
    assert run("xs") == QExpr([1, 2, 3])


@pytest.mark.parametrize(
    "source,message",
    [
        ("(def [x] 1 2)", "Function def expected 2 args but got 3"),
        ("(def [x y] 1)", "Function def expected 3 args but got 2"),
        ("(def [1] 2)", "Function def cannot define non-symbol Number"),
        ("(def 1 2)", "Function def argument 1 expected Q-Expression but got Number"),
        ("(\\ [x] 1)", "Function \\ argument 2 expected Q-Expression but got Number"),
        ("(\\ [x 1] [x])", "Function \\ cannot take non-symbol parameter Number"),
        ("(\\ [x])", "Function \\ expected 2 args but got 1"),
    ],
)
def test_definition_errors(run, source, message):
    assert run(source) == LispError(message)


def test_def_with_no_values_is_an_arity_error(env):
    from blisp.builtin.form_builtin import define
    assert define(env, QExpr([QExpr([Symbol("x")])])) == LispError(
        "Function def expected at least 2 args but got 1"
    )


def test_lambda_application(run):
    assert run("((\\ [x y] [+ x y]) 3 4)") == 7


def test_lambda_arity_is_strict(run):
    assert run("((\\ [x y] [+ x y]) 3)") == LispError("Function lambda expected 2 args but got 1")
    assert run("((\\ [x] [x]) 1 2)") == LispError("Function lambda expected 1 args but got 2")


def test_lambda_builtin_builds_a_closure(env, run):
    fn = run("\\ [x y] [+ x y]")
    assert isinstance(fn, Lambda)
    assert fn.formals == QExpr([Symbol("x"), Symbol("y")])
    assert fn.body == QExpr([Symbol("+"), Symbol("x"), Symbol("y")])
    assert fn.env.outer is env


def test_named_function(run):
    run("(def [add-mul] (\\ [x y] [+ x (* x y)]))")
    assert run("(add-mul 10 20)") == 210
    assert run("(add-mul 1 2)") == 3


def test_closure_sees_enclosing_scope(run):
    run("(def [n] 10)")
    run("(def [add-n] (\\ [x] [+ x n]))")
    assert run("(add-n 5)") == 15


def test_closures_returned_from_closures(run):
    run("(def [make-adder] (\\ [a] [\\ [b] [+ a b]]))")
    run("(def [add2] (make-adder 2))")
    run("(def [add10] (make-adder 10))")
    assert run("(add2 3)") == 5
    assert run("(add10 3)") == 13
    assert run("((make-adder 7) 1)") == 8


def test_parameters_do_not_leak_into_the_caller(run):
    run("(def [f] (\\ [secret] [secret]))")
    assert run("(f 1)") == 1
    assert run("secret") == LispError("undefined symbol: secret")


def test_def_inside_a_closure_binds_globally(run):
    run("(def [set-g] (\\ [v] [def [g] v]))")
    run("(set-g 9)")
    assert run("g") == 9


def test_recursion(run):
    run("(def [fact] (\\ [n] [if (== n 0) [1] [* n (fact (- n 1))]]))")
    assert run("(fact 5)") == 120
    assert run("(fact 0)") == 1


def test_calls_do_not_mutate_the_stored_closure(env, run):
    run("(def [id] (\\ [x] [x]))")
    run("(id 1)")
    stored = env.vars[Symbol("id")]
    assert Symbol("x") not in stored.env.vars


def test_errors_inside_bodies_propagate(run):
    run("(def [safe-div] (\\ [a b] [/ a b]))")
    assert run("(safe-div 1 0)") == LispError("division by zero")
    assert run("(+ 1 (safe-div 4 0))") == LispError("division by zero")
