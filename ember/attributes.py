# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The attribute bag attached to every element: an immutable value holding CSS classes, inline styles,
custom attributes and event handlers, serialized in a fixed order.
'''

from dataclasses import dataclass, replace
from typing import Any, Iterable, TYPE_CHECKING


if TYPE_CHECKING:
  from .actions import Action


AttrItem = tuple[str,str|None] # A value of None denotes a bare attribute, e.g. `disabled`.
StyleItem = tuple[str,str]
EventItem = tuple[str,tuple['Action',...]]


@dataclass(frozen=True)
class Attrs:
  '''
  Classes are kept in insertion order with duplicates suppressed.
  Styles are unique by property; setting an existing property replaces its value in place.
  Custom attributes allow duplicates, e.g. repeated `data-` attributes.
  All mutators return a modified copy.
  '''

  id:str = ''
  classes:tuple[str,...] = ()
  styles:tuple[StyleItem,...] = ()
  custom:tuple[AttrItem,...] = ()
  events:tuple[EventItem,...] = ()

  def __bool__(self) -> bool:
    return bool(self.id or self.classes or self.styles or self.custom or any(actions for _, actions in self.events))

  def __str__(self) -> str: return self.render()


  def with_id(self, id:str) -> 'Attrs':
    return replace(self, id=id)


  def with_classes(self, *classes:str|None) -> 'Attrs':
    'Append classes, skipping None and empty names and names that are already present.'
    added:list[str] = []
    for cl in classes:
      if not cl: continue
      for name in cl.split():
        if name not in self.classes and name not in added: added.append(name)
    if not added: return self
    return replace(self, classes=self.classes + tuple(added))


  def with_style(self, **styles:Any) -> 'Attrs':
    'Set inline styles. Underscores in keyword names are translated to dashes.'
    items = list(self.styles)
    for k, v in styles.items():
      prop = k.replace('_', '-')
      val = str(v)
      for i, (existing, _) in enumerate(items):
        if existing == prop:
          items[i] = (prop, val)
          break
      else:
        items.append((prop, val))
    return replace(self, styles=tuple(items))


  def with_attr(self, name:str, value:Any) -> 'Attrs':
    'Append a custom attribute. Class, style and id have dedicated collections and are rejected here.'
    if name in _dedicated_attr_names:
      raise ValueError(f'use the dedicated mutator for the {name!r} attribute')
    return replace(self, custom=self.custom + ((name, str(value)),))


  def with_aria(self, name:str, value:str|None) -> 'Attrs':
    'Append an `aria-` attribute. A None value means no attribute, and the bag is returned unchanged.'
    if value is None: return self
    return self.with_attr(f'aria-{name}', value)


  def with_static(self, name:str) -> 'Attrs':
    'Append a bare attribute that has no value, e.g. `disabled`.'
    return replace(self, custom=self.custom + ((name, None),))


  def with_event(self, name:str, actions:Iterable['Action']) -> 'Attrs':
    'Add actions to the handler for event `name`. Actions for an existing event are appended to it.'
    actions = tuple(actions)
    if any(n == name for n, _ in self.events):
      return replace(self, events=tuple((n, a + actions if n == name else a) for n, a in self.events))
    return replace(self, events=self.events + ((name, actions),))


  def items(self) -> Iterable[AttrItem]:
    'Yield (name, value) pairs in serialization order.'
    if self.id: yield ('id', self.id)
    if self.classes: yield ('class', ' '.join(self.classes))
    if self.styles: yield ('style', cssi(self.styles))
    yield from self.custom
    for name, actions in self.events:
      if actions: yield (name, '; '.join(a.compile() for a in actions))


  def render(self) -> str:
    'Return a string that is either empty or with a leading space, containing all of the formatted attributes.'
    parts:list[str] = []
    for k, v in self.items():
      if v is None: parts.append(f' {k}')
      else: parts.append(f' {k}={quote_attr_val(v)}')
    return ''.join(parts)


_dedicated_attr_names = frozenset({'class', 'id', 'style'})


def cssi(styles:Iterable[StyleItem]) -> str:
  'CSS inline value. Creates a string for use as an inline style attribute.'
  return ';'.join(f'{k}:{v}' for k, v in styles)


def quote_attr_val(text:str) -> str:
  text = text.replace('&', '&amp;') # Ampersand must be replaced first, because escapes use ampersands.
  text = text.replace('<', '&lt;')
  # Note: we do not replace ">" because it is not required and helpful to leave unescaped for inline CSS.
  text = text.replace('"', '&quot;')
  return f'"{text}"'
