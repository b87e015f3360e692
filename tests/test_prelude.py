import logging

import pytest

from urlisp.builtin.base_env import base_environment
from urlisp.builtin.prelude import PRELUDE, load_prelude, standard_environment
from urlisp.errors import UrLispBootstrapError, UrLispSyntaxError, UrLispTypeError
from urlisp.types.callables import Callable, LabelledFunction
from urlisp.types.environment import Environment
from urlisp.types.lisp_list import LispList, NIL
from urlisp.types.symbol import Symbol, T

S = Symbol
L = LispList.of


def test_every_definition_is_bound(std_env):
    for name, _ in PRELUDE:
        assert isinstance(std_env.lookup(S(name)), Callable)


def test_standard_environment_extends_primitives(std_env):
    assert set(std_env.vars) == {S(name) for name, _ in PRELUDE}
    assert std_env.lookup(S("car")) is std_env.outer.lookup(S("car"))


def test_each_call_builds_a_new_environment():
    a = standard_environment()
    b = standard_environment()
    assert a is not b
    assert a.bound_names() == b.bound_names()


def test_standard_environment_over_given_base():
    base = base_environment()
    env = standard_environment(base)
    assert env.outer is base


def test_bound_names_innermost_first(std_env):
    names = std_env.bound_names()
    assert names[:3] == ["nullp", "not", "and"]
    assert "cond" in names
    assert len(names) == len(set(names))


def test_recursive_definitions_are_labelled(std_env):
    for name in ("append", "pair", "assoc", "evalcond", "evallist", "eval"):
        fn = std_env.lookup(S(name))
        assert isinstance(fn, LabelledFunction)
        assert fn.label == S(name)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(nullp '())", T),
        ("(nullp '(a))", NIL),
        ("(nullp 'a)", NIL),
        ("(not 't)", NIL),
        ("(not '())", T),
        ("(and 't 't)", T),
        ("(and 't '())", NIL),
        ("(and '() 't)", NIL),
        ("(append '(a b) '(c d))", L(S("a"), S("b"), S("c"), S("d"))),
        ("(append '() '(c))", L(S("c"))),
        ("(ge 3 2)", T),
        ("(ge 2 2)", T),
        ("(ge 1 2)", NIL),
        ("(lt 2 3)", T),
        ("(lt 3 3)", NIL),
        ("(gt 3 2)", T),
        ("(gt 2 3)", NIL),
        ("(pair '(x y) '(a b))", L(L(S("x"), S("a")), L(S("y"), S("b")))),
        ("(pair '() '())", NIL),
        ("(assoc 'y '((x a) (y b)))", S("b")),
        ("(assoc 'z '((x a)))", NIL),
    ]
)
def test_derived_utilities(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(eval 'x '((x a) (y b)))", S("a")),
        ("(eval ''x '())", S("x")),
        ("(eval '(atom 'a) '())", T),
        ("(eval '(eq 'a 'a) '())", T),
        ("(eval '(car (cdr x)) '((x (a b c))))", S("b")),
        ("(eval '(cdr x) '((x (a b c))))", L(S("b"), S("c"))),
        ("(eval '(cons x '(b)) '((x a)))", L(S("a"), S("b"))),
        ("(eval '(cond ((eq 'a 'b) 'first) ('t 'second)) '())", S("second")),
        ("(eval '((lambda (x y) (cons x (cdr y))) 'a '(b c d)) '())", L(S("a"), S("c"), S("d"))),
        ("(eval '(f '(b c)) '((f (lambda (x) (cons 'a x)))))", L(S("a"), S("b"), S("c"))),
        (
            "(eval '((label firstatom (lambda (x) (cond ((atom x) x) ('t (firstatom (car x)))))) y)"
            " '((y ((a b) (c d)))))",
            S("a"),
        ),
    ]
)
def test_self_hosted_eval(run, source, expected):
    assert run(source) == expected


def test_bootstrap_parse_failure_is_reported():
    with pytest.raises(UrLispBootstrapError) as excinfo:
        load_prelude(Environment(base_environment()), (("broken", "(lambda (x"),))
    err = excinfo.value
    assert err.name == "broken"
    assert isinstance(err.__cause__, UrLispSyntaxError)
    assert "broken" in str(err)


def test_bootstrap_evaluation_failure_is_reported():
    env = Environment(base_environment())
    prelude = (("ok", "(lambda (x) x)"), ("bad", "(car '())"))
    with pytest.raises(UrLispBootstrapError) as excinfo:
        load_prelude(env, prelude)
    assert excinfo.value.name == "bad"
    assert isinstance(excinfo.value.cause, UrLispTypeError)
    # Definitions before the failure were bound in order
    assert env.find(S("ok")) is env


def test_bootstrap_logs_each_definition(caplog):
    caplog.set_level(logging.DEBUG, logger="urlisp.builtin.prelude")
    standard_environment()
    assert "prelude: bound eval to #<labelled_function eval>" in caplog.text
