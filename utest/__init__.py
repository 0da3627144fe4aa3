# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Minimal assertions for `.ut.py` test scripts.
Failures print to stderr as they occur; a failing script exits with status 1.
'''

import atexit as _atexit
import inspect as _inspect
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import print_exception as _print_exception
from typing import Any, Callable, TypeVar


__all__ = ['utest', 'utest_call', 'utest_exc', 'utest_val', 'utest_val_ne']


_test_count = 0
_failures = 0


_C = TypeVar('_C', bound=Callable)
def utest_call(fn:_C) -> _C:
  'Decorator that calls a test function as soon as it is defined.'
  fn()
  return fn


def utest(exp:Any, fn:Callable, *args:Any, **kwargs:Any) -> None:
  'Fail unless `fn(*args, **kwargs)` returns a value equal to `exp`.'
  _count()
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    _fail(fn, f'value {exp!r}', args, kwargs, exc=exc)
  else:
    if exp != ret: _fail(fn, f'value {exp!r}', args, kwargs, ret=ret)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, **kwargs:Any) -> None:
  '''
  Fail unless `fn(*args, **kwargs)` raises an exception matching `exp_exc`.
  A type matches instances; an exception instance matches on type and args.
  '''
  _count()
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    if not _exc_matches(exp_exc, exc): _fail(fn, f'exception {exp_exc!r}', args, kwargs, exc=exc)
  else:
    _fail(fn, f'exception {exp_exc!r}', args, kwargs, ret=ret)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  _count()
  if exp_val != act_val: _fail(desc, f'value {exp_val!r}', ret=act_val)


def utest_val_ne(exp_val:Any, act_val:Any, desc='<value>') -> None:
  _count()
  if exp_val == act_val: _fail(desc, f'a value different from {exp_val!r}', ret=act_val)


_missing = object()

def _fail(subj:Any, expected:str, args:tuple[Any,...]=(), kwargs:dict[str,Any]={}, ret:Any=_missing,
 exc:Exception|None=None) -> None:
  global _failures
  _failures += 1
  info = _inspect.getframeinfo(_inspect.stack()[2].frame) # The test line that called the assertion.
  path = _rel_path(info.filename)
  name = getattr(subj, '__qualname__', None) or repr(subj)
  _errL(f'\n{path}:{info.lineno}: utest failure: {name}')
  for i, arg in enumerate(args): _errL(f'  arg {i} = {arg!r}')
  for key, val in kwargs.items(): _errL(f'  arg {key} = {val!r}')
  _errL(f'  expected {expected}')
  if ret is not _missing: _errL(f'  returned: {ret!r}')
  if exc is not None:
    _errL(f'  raised: {exc!r}')
    _print_exception(exc, file=_stderr)


def _exc_matches(exp:Any, act:Exception) -> bool:
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _count() -> None:
  global _test_count
  _test_count += 1


def _errL(*items:Any) -> None: print(*items, sep='', file=_stderr)


@_atexit.register
def _report() -> None:
  from os import _exit
  if _failures:
    _errL(f'\nutest ran: {_test_count}; failed: {_failures}')
    _stderr.flush()
    _exit(1) # SystemExit raised in an atexit handler does not change the exit status.
