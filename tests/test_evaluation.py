import pytest

from sprig import errors
from sprig.evaluation.evaluator import evaluate
from sprig.reader.parser import parse, parse_all
from sprig.types.collections import HashMap, Vector
from sprig.types.environment import Environment
from sprig.types.function import Function
from sprig.types.nil import Nil
from sprig.types.symbol import Keyword, Symbol


def run(source, env):
    result = Nil
    for expr in parse_all(source):
        result = evaluate(expr, env)
    return result


# -----------------------------------------------------
# Structural evaluation
# -----------------------------------------------------

@pytest.mark.parametrize("value", [0, 1, -1, 2**63 - 1, -(2**63)])
def test_numbers_evaluate_to_themselves(value):
    assert evaluate(value, Environment.new_root()) == value


@pytest.mark.parametrize("value", [Nil, True, False, "text", Keyword("k")])
def test_self_evaluating_atoms(env, value):
    assert evaluate(value, env) == value


def test_symbol_lookup(env):
    env.set("x", 42)
    assert evaluate(Symbol("x"), env) == 42
    with pytest.raises(errors.UnboundSymbol, match="symbol not found: z"):
        evaluate(Symbol("z"), env)


def test_vector_elements_are_evaluated(env):
    result = run("[1 (+ 1 1) (* 3 1)]", env)
    assert isinstance(result, Vector)
    assert result == [1, 2, 3]


def test_map_values_are_evaluated_but_keys_are_not(env):
    result = run("{:a (+ 1 2) b (list 1)}", env)
    assert isinstance(result, HashMap)
    assert result.keys() == [Keyword("a"), Symbol("b")]
    assert result.values() == [3, [1]]


def test_empty_list_evaluates_to_empty_list(env):
    assert run("()", env) == []


def test_functions_evaluate_to_themselves(env):
    fn = run("(fn* (x) x)", env)
    assert evaluate(fn, env) is fn


# -----------------------------------------------------
# def!
# -----------------------------------------------------

def test_def_binds_and_returns_value(env):
    assert evaluate(parse("(def! x 5)"), env) == 5
    assert evaluate(parse("x"), env) == 5


def test_def_binds_in_current_scope_only(env):
    run("(let* (a 1) (def! inner 2))", env)
    with pytest.raises(errors.UnboundSymbol):
        run("inner", env)


@pytest.mark.parametrize(
    "source, error",
    [
        ("(def! x)", errors.ArityError),
        ("(def! x 1 2)", errors.ArityError),
        ('(def! "x" 1)', errors.SprigTypeError),
        ("(def! x undefined-thing)", errors.UnboundSymbol),
    ]
)
def test_def_errors(env, source, error):
    with pytest.raises(error):
        run(source, env)


def test_failed_def_leaves_binding_untouched(env):
    run("(def! x 1)", env)
    with pytest.raises(errors.DivisionByZero):
        run("(def! x (/ 1 0))", env)
    assert run("x", env) == 1


# -----------------------------------------------------
# let*
# -----------------------------------------------------

def test_let_sees_earlier_siblings(env):
    assert evaluate(parse("(let* (x 2 y (+ x 1)) (* x y))"), env) == 6


def test_let_accepts_vector_bindings(env):
    assert run("(let* [a 1 b 2] (+ a b))", env) == 3


def test_let_shadows_without_touching_outer(env):
    run("(def! x 10)", env)
    assert run("(let* (x 1) x)", env) == 1
    assert run("x", env) == 10


def test_let_init_cannot_see_itself(env):
    with pytest.raises(errors.UnboundSymbol):
        run("(let* (self (list self)) self)", env)


def test_let_bindings_do_not_leak(env):
    run("(let* (a 1) a)", env)
    with pytest.raises(errors.UnboundSymbol):
        run("a", env)


@pytest.mark.parametrize(
    "source, error",
    [
        ("(let* (a 1))", errors.ArityError),
        ("(let* (a 1) a a)", errors.ArityError),
        ("(let* (a) a)", errors.InvalidSpecialForm),
        ("(let* (a 1 b) a)", errors.InvalidSpecialForm),
        ("(let* a a)", errors.InvalidSpecialForm),
        ("(let* (1 2) 3)", errors.SprigTypeError),
    ]
)
def test_let_errors(env, source, error):
    with pytest.raises(error):
        run(source, env)


# -----------------------------------------------------
# do
# -----------------------------------------------------

def test_do_returns_last_value(env):
    assert run("(do (def! a 1) (def! b 2) (+ a b))", env) == 3


def test_do_stops_at_first_failure(env):
    with pytest.raises(errors.UnboundSymbol):
        run("(do (def! a 1) missing (def! b 2))", env)
    assert run("a", env) == 1
    with pytest.raises(errors.UnboundSymbol):
        run("b", env)


def test_do_requires_an_operand(env):
    with pytest.raises(errors.ArityError):
        run("(do)", env)


# -----------------------------------------------------
# if
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(if true 1 2)", 1),
        ("(if false 1 2)", 2),
        ("(if nil 1 2)", 2),
        ("(if 0 1 2)", 1),
        ('(if "" 1 2)', 1),
        ("(if () 1 2)", 1),
        ("(if [] 1 2)", 1),
        ("(if :k 1 2)", 1),
        ("(if false 1)", Nil),
        ("(if true 1)", 1),
    ]
)
def test_if_truthiness(env, source, expected):
    assert run(source, env) == expected


def test_if_only_evaluates_taken_branch(env):
    assert run("(if true 1 (undefined))", env) == 1
    assert run("(if false (undefined) 2)", env) == 2


@pytest.mark.parametrize("source", ["(if true)", "(if true 1 2 3)"])
def test_if_arity(env, source):
    with pytest.raises(errors.ArityError):
        run(source, env)


# -----------------------------------------------------
# fn* and application
# -----------------------------------------------------

def test_fn_creates_closure(env):
    fn = run("(fn* (a b) (+ a b))", env)
    assert isinstance(fn, Function)
    assert fn.env is env
    assert fn.variadic is False
    assert run("((fn* (a b) (+ a b)) 2 3)", env) == 5


def test_fn_variadic_collects_rest(env):
    result = evaluate(parse("((fn* (a & rest) (list a rest)) 1 2 3)"), env)
    assert result == [1, [2, 3]]
    assert not isinstance(result[1], Vector)


def test_fn_variadic_with_no_surplus_binds_empty_list(env):
    assert run("((fn* (a & rest) rest) 1)", env) == []
    assert run("((fn* (& all) (count all)) 1 2 3)", env) == 3


def test_fn_vector_params(env):
    assert run("((fn* [x y] (- x y)) 10 4)", env) == 6


def test_missing_fixed_arguments_bind_to_nil(env):
    assert run("((fn* (a b) b) 1)", env) is Nil
    assert run("((fn* (a b & r) (list a b r)) 1)", env) == [1, Nil, []]


def test_surplus_arguments_are_ignored(env):
    assert run("((fn* (a) a) 1 2 3)", env) == 1


def test_arguments_evaluated_in_caller_scope(env):
    run("(def! x 100)", env)
    assert run("(let* (x 1) ((fn* (y) y) x))", env) == 1


@pytest.mark.parametrize(
    "source, error",
    [
        ("(fn* (a))", errors.ArityError),
        ("(fn* (a) a a)", errors.ArityError),
        ("(fn* a a)", errors.InvalidSpecialForm),
        ("(fn* (1) 1)", errors.SprigTypeError),
        ("(fn* (a &) a)", errors.InvalidSpecialForm),
        ("(fn* (& a b) a)", errors.InvalidSpecialForm),
        ("(fn* (a & b c) a)", errors.InvalidSpecialForm),
        ("(fn* (& &) 1)", errors.InvalidSpecialForm),
        ('(fn* (a & "b") a)', errors.SprigTypeError),
    ]
)
def test_fn_errors(env, source, error):
    with pytest.raises(error):
        run(source, env)


@pytest.mark.parametrize("source", ["(1 2)", '("f" 1)', "(nil)", "(:k 1)", "([1] 2)"])
def test_applying_non_function_fails(env, source):
    with pytest.raises(errors.NotAFunction, match="not a function"):
        run(source, env)


def test_argument_failure_short_circuits(env):
    with pytest.raises(errors.UnboundSymbol):
        run("(list (def! first-arg 1) missing (def! third-arg 3))", env)
    assert run("first-arg", env) == 1
    with pytest.raises(errors.UnboundSymbol):
        run("third-arg", env)


def test_head_expression_is_evaluated(env):
    assert run("((if true + -) 5 3)", env) == 8
    assert run("((if false + -) 5 3)", env) == 2


def test_special_form_names_are_not_callable_values(env):
    with pytest.raises(errors.UnboundSymbol):
        run("(list if)", env)


# -----------------------------------------------------
# quote
# -----------------------------------------------------

def test_quote_returns_form_unevaluated(env):
    assert run("'(a b (c))", env) == [Symbol("a"), Symbol("b"), [Symbol("c")]]
    assert run("(quote x)", env) == Symbol("x")


def test_quote_arity(env):
    with pytest.raises(errors.ArityError):
        run("(quote a b)", env)


def test_errors_share_eval_base(env):
    with pytest.raises(errors.EvalError):
        run("(undefined)", env)
