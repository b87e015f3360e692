"""Standard library bootstrap.

Each prelude entry is parsed and evaluated in the environment under
construction and bound under its name, in order, so later definitions can use
earlier ones. The last entries are a universal evaluator written in UrLisp
itself, taking its environment as an association list:

    (eval '(car (cdr x)) '((x (a b c))))  =>  b

A failure here is an engine defect, never a user error.
"""

from __future__ import annotations

import logging
from typing import Optional

from urlisp.builtin.base_env import base_environment
from urlisp.errors import UrLispBootstrapError, UrLispError
from urlisp.evaluation.evaluator import evaluate
from urlisp.reader.parser import parse_one
from urlisp.types.environment import Environment
from urlisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


PRELUDE: tuple[tuple[str, str], ...] = (
    ("nullp", "(lambda (x) (eq x '()))"),
    ("not", "(lambda (x) (cond (x '()) ('t 't)))"),
    ("and", """
        (lambda (x y)
          (cond (x (cond (y 't) ('t '())))
                ('t '())))"""),
    ("append", """
        (label append
          (lambda (x y)
            (cond
              ((nullp x) y)
              ('t (cons (car x) (append (cdr x) y))))))"""),
    ("ge", "(lambda (x y) (le y x))"),
    ("lt", "(lambda (x y) (and (le x y) (not (ge x y))))"),
    ("gt", "(lambda (x y) (lt y x))"),
    ("pair", """
        (label pair
          (lambda (x y)
            (cond
              ((and (nullp x) (nullp y)) '())
              ((and (not (atom x)) (not (atom y)))
               (cons (cons (car x) (cons (car y) '()))
                     (pair (cdr x) (cdr y)))))))"""),
    ("assoc", """
        (label assoc
          (lambda (x y)
            (cond
              ((nullp y) '())
              ((eq (car (car y)) x) (car (cdr (car y))))
              ('t (assoc x (cdr y))))))"""),
    ("evalcond", """
        (label evalcond
          (lambda (lst a)
            (cond
              ((eval (car (car lst)) a) (eval (car (cdr (car lst))) a))
              ('t (evalcond (cdr lst) a)))))"""),
    ("evallist", """
        (label evallist
          (lambda (lst a)
            (cond
              ((nullp lst) '())
              ('t (cons (eval (car lst) a)
                        (evallist (cdr lst) a))))))"""),
    ("eval", """
        (label eval
          (lambda (e a)
            (cond
              ((atom e) (assoc e a))
              ((atom (car e))
               (cond
                 ((eq (car e) 'quote) (car (cdr e)))
                 ((eq (car e) 'atom) (atom (eval (car (cdr e)) a)))
                 ((eq (car e) 'eq) (eq (eval (car (cdr e)) a)
                                       (eval (car (cdr (cdr e))) a)))
                 ((eq (car e) 'car) (car (eval (car (cdr e)) a)))
                 ((eq (car e) 'cdr) (cdr (eval (car (cdr e)) a)))
                 ((eq (car e) 'cons) (cons (eval (car (cdr e)) a)
                                           (eval (car (cdr (cdr e))) a)))
                 ((eq (car e) 'cond) (evalcond (cdr e) a))
                 ('t (eval (cons (assoc (car e) a) (cdr e)) a))))
              ((eq (car (car e)) 'label)
               (eval (cons (car (cdr (cdr (car e)))) (cdr e))
                     (cons (cons (car (cdr (car e))) (cons (car e) '())) a)))
              ((eq (car (car e)) 'lambda)
               (eval (car (cdr (cdr (car e))))
                     (append (pair (car (cdr (car e))) (evallist (cdr e) a))
                             a))))))"""),
)


def load_prelude(env: Environment, prelude=PRELUDE) -> Environment:
    """Parse, evaluate and bind each (name, source) pair of `prelude` into `env`."""
    for name, source in prelude:
        try:
            expr, _ = parse_one(source)
            value = evaluate(expr, env)
        except UrLispError as err:
            logger.error("prelude definition %r failed: %s", name, err)
            raise UrLispBootstrapError(name, err) from err
        env.define(Symbol(name), value)
        logger.debug("prelude: bound %s to %s", name, value)
    return env


def standard_environment(base: Optional[Environment] = None) -> Environment:
    """Build a fresh standard environment over `base` (a new primitive one by default).

    Each call returns a new environment; callers that want to share one should
    build it once and pass it around explicitly.
    """
    if base is None:
        base = base_environment()
    return load_prelude(Environment(outer=base))
