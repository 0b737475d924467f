import pytest

from callisp.errors import (
    CallispArityError,
    CallispTypeError,
    CallispUndefinedIdentifier,
)
from callisp.evaluation.evaluator import evaluate
from callisp.types.arity import Exactly
from callisp.types.function import Builtin, Closure
from callisp.types.lisp_type import LispType
from callisp.types.symbol import Symbol
from callisp.types.unspecified import Unspecified


@pytest.fixture
def calls(env):
    """Bind (record x): appends x to the returned log and returns x."""
    log = []

    def record(_, args):
        log.append(args[0])
        return args[0]

    env.bind(Symbol("record"), Builtin("record", Exactly(1), record))
    return log


# -----------------------------------------------------
# Self-evaluation and lookup
# -----------------------------------------------------

@pytest.mark.parametrize("value", [1, -7, 3.5, "hello", True, False, LispType.INT, Unspecified])
def test_self_evaluating(env, value):
    assert evaluate(value, env) is value


def test_function_values_evaluate_to_themselves(env):
    plus = env.lookup(Symbol("+"))
    assert evaluate(plus, env) is plus


def test_symbol_lookup(env):
    env.bind(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42


def test_undefined_symbol(run):
    with pytest.raises(CallispUndefinedIdentifier) as exc:
        run("(+ 1 undefined-thing)")
    assert exc.value.name == Symbol("undefined-thing")


def test_empty_list_is_not_applicable(run):
    with pytest.raises(CallispTypeError):
        run("()")


def test_applying_a_non_function(run):
    with pytest.raises(CallispTypeError):
        run("(1 2 3)")
    with pytest.raises(CallispTypeError):
        run('("f" 1)')


def test_special_form_names_are_not_values(run):
    with pytest.raises(CallispUndefinedIdentifier):
        run("if")


# -----------------------------------------------------
# Application
# -----------------------------------------------------

def test_simple_application(run):
    assert run("(+ 1 2)") == 3


def test_nested_application(run):
    assert run("(+ (* 2 3) (- 10 4))") == 12


def test_head_expression_is_evaluated(run):
    assert run("((lambda (a b) (+ a b)) 2 3)") == 5
    assert run("((eval '+) 4 5)") == 9


def test_arguments_evaluated_left_to_right(run, calls):
    run("(list (record 1) (record 2) (record 3))")
    assert calls == [1, 2, 3]


def test_first_error_stops_argument_evaluation(run, calls):
    with pytest.raises(CallispUndefinedIdentifier):
        run("(list (record 1) missing (record 3))")
    assert calls == [1]


def test_lambda_evaluates_to_closure(run):
    fn = run("(lambda (x y) x)")
    assert isinstance(fn, Closure)
    assert fn.params == (Symbol("x"), Symbol("y"))
    assert fn.arity == Exactly(2)


def test_lambda_alias(run):
    assert run("((λ (x) (* x x)) 7)") == 49


def test_zero_parameter_closure(run):
    assert run("((lambda () 42))") == 42
    run("(define answer (lambda () 42))")
    assert run("(answer)") == 42


def test_closure_body_is_shared_not_copied(run):
    fn = run("(lambda (x) (+ x 1))")
    body = fn.body
    run("(define inc (lambda (x) (+ x 1)))")
    assert run("(inc 1)") == 2
    assert fn.body is body


# -----------------------------------------------------
# Scoping
# -----------------------------------------------------

def test_shadowing_does_not_leak(run):
    run("(define x 1)")
    assert run("((lambda (x) x) 2)") == 2
    assert run("x") == 1


def test_define_inside_closure_is_local(run, env):
    run("(define f (lambda (y) (if (define z y) z z)))")
    assert run("(f 5)") == 5
    with pytest.raises(CallispUndefinedIdentifier):
        run("z")
    assert env.depth == 1


def test_free_variables_resolve_at_call_time(run):
    run("(define show (lambda () later))")
    run("(define later 99)")
    assert run("(show)") == 99


def test_callee_sees_caller_bindings(run):
    run("(define get-n (lambda () n))")
    assert run("((lambda (n) (get-n)) 7)") == 7


def test_recursion_through_global_binding(run):
    run("(define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))")
    assert run("(fact 10)") == 3628800


def test_scope_popped_after_error(run, env):
    run("(define bad (lambda (x) (+ x missing)))")
    with pytest.raises(CallispUndefinedIdentifier):
        run("(bad 1)")
    assert env.depth == 1
    with pytest.raises(CallispUndefinedIdentifier):
        run("x")


# -----------------------------------------------------
# Arity
# -----------------------------------------------------

@pytest.mark.parametrize("call", ["(f 1)", "(f 1 2 3)"])
def test_closure_arity_checked_before_body(run, calls, env, call):
    run("(define f (lambda (a b) (record a)))")
    with pytest.raises(CallispArityError) as exc:
        run(call)
    assert calls == []
    assert exc.value.expected == Exactly(2)
    assert env.depth == 1


def test_builtin_arity_checked_before_call(run):
    with pytest.raises(CallispArityError) as exc:
        run("(count '(1) '(2))")
    assert exc.value.got == 2


def test_arguments_evaluated_before_arity_check(run, calls):
    run("(define f (lambda (a) a))")
    with pytest.raises(CallispArityError):
        run("(f (record 1) (record 2))")
    assert calls == [1, 2]
