# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Copy-returning fluent modifiers shared by all element types that carry an attribute bag.
'''

from copy import copy
from typing import Any, Iterator, Self

from .actions import actions_from, ActionsArg
from .attributes import Attrs
from .semantics import Edge, margin_class, SpacingAmount


class Modifiers:
  '''
  Mixin for element value types.
  Elements store their state in `__slots__`; `_copy` clones the receiver and sets fields on the clone,
  so a modifier never mutates the value it is called on.
  Equality and repr are derived from the slot values.
  '''

  __slots__ = ('attributes',)

  attributes:Attrs


  def _copy(self, **changes:Any) -> Self:
    c = copy(self)
    for k, v in changes.items():
      setattr(c, k, v)
    return c


  def _slot_items(self) -> Iterator[tuple[str,Any]]:
    for cls in reversed(type(self).__mro__):
      for name in getattr(cls, '__slots__', ()):
        yield (name, getattr(self, name))


  def __eq__(self, other:Any) -> bool:
    if type(self) is not type(other): return NotImplemented
    return list(self._slot_items()) == list(other._slot_items())

  __hash__ = None # type: ignore[assignment]


  def __repr__(self) -> str:
    fields = ', '.join(f'{k}={v!r}' for k, v in self._slot_items() if not (k == 'attributes' and not v))
    return f'{type(self).__name__}({fields})'


  def cl(self, *classes:str|None) -> Self:
    '`cl` is shorthand for appending to the `class` attribute. None values are skipped.'
    return self._copy(attributes=self.attributes.with_classes(*classes))

  def id(self, id:str) -> Self:
    return self._copy(attributes=self.attributes.with_id(id))

  def style(self, **styles:Any) -> Self:
    return self._copy(attributes=self.attributes.with_style(**styles))

  def attr(self, name:str, value:Any) -> Self:
    return self._copy(attributes=self.attributes.with_attr(name, value))

  def aria(self, name:str, value:str|None) -> Self:
    return self._copy(attributes=self.attributes.with_aria(name, value))

  def data(self, name:str, value:Any) -> Self:
    return self._copy(attributes=self.attributes.with_attr(f'data-{name}', value))

  def static_attr(self, name:str) -> Self:
    return self._copy(attributes=self.attributes.with_static(name))


  def on(self, event:str, actions:ActionsArg) -> Self:
    'Register actions to run for `event`, e.g. "onclick".'
    return self._copy(attributes=self.attributes.with_event(event, actions_from(actions)))

  def on_click(self, actions:ActionsArg) -> Self:
    return self.on('onclick', actions)


  def margin(self, edge:Edge, amount:SpacingAmount) -> Self:
    return self.cl(margin_class(edge, amount))


  def frame(self, *, width:int|str|None=None, height:int|str|None=None) -> Self:
    '''
    Set an explicit width and/or height as inline styles.
    Integers are interpreted as pixels; strings are used verbatim, e.g. "50%".
    '''
    styles:dict[str,str] = {}
    if width is not None: styles['width'] = _css_length(width)
    if height is not None: styles['height'] = _css_length(height)
    if not styles: return self
    return self.style(**styles)


def _css_length(val:int|str) -> str:
  if isinstance(val, bool): raise TypeError(f'invalid CSS length: {val!r}')
  if isinstance(val, int): return f'{val}px'
  if isinstance(val, str): return val
  raise TypeError(f'invalid CSS length: {val!r}')
