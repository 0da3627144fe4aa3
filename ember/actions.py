# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Actions are side effects that run in the browser in response to an event such as `onclick`.
Each action compiles to a JavaScript statement; the statements for one event are joined into an inline handler.
'''

from dataclasses import dataclass
from typing import Callable, Iterable, Protocol, runtime_checkable, Union

from .markup import repr_lim


@runtime_checkable
class Action(Protocol):

  def compile(self) -> str: ...


ActionsArg = Union[Iterable[Action],Callable[[],Iterable[Action]]]


@dataclass(frozen=True)
class CustomAction:
  'Arbitrary JavaScript, emitted verbatim.'
  code:str

  def compile(self) -> str: return self.code


@dataclass(frozen=True)
class ShowAlert:
  'Show a browser alert with a message.'
  message:str

  def compile(self) -> str:
    msg = self.message.replace('\\', '\\\\').replace("'", "\\'")
    return f"alert('{msg}')"


def actions_from(actions:ActionsArg) -> tuple[Action,...]:
  '''
  Normalize an actions argument: either an iterable of actions,
  or a zero-argument callable returning one, which is called exactly once.
  '''
  if callable(actions) and not isinstance(actions, Iterable):
    actions = actions()
  if isinstance(actions, (str, bytes)) or not isinstance(actions, Iterable):
    raise TypeError(f'actions must be an iterable of `Action`; received: {repr_lim(actions)}')
  result = tuple(actions)
  for a in result:
    if not isinstance(a, Action): raise TypeError(f'Invalid action: {type(a)!r}; value: {repr_lim(a)}')
  return result
