# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`markup` provides the `ContentNode` protocol, the capability implemented by every renderable value,
along with the primitive content types and the normalization rule used by composite element initializers.

Content nodes render to HTML strings via `markup()`.
A node embeds its children by value; nodes never hold a reference to their parent, so trees are acyclic.
Text is emitted verbatim: this layer performs no escaping. Use `html_esc` explicitly where escaping is required.
'''

from html import escape as _escape
from typing import Any, Callable, Iterable, Mapping, Protocol, runtime_checkable, TYPE_CHECKING, Union


if TYPE_CHECKING:
  from .attributes import Attrs


@runtime_checkable
class ContentNode(Protocol):
  '''
  The capability shared by all renderable content.
  `markup` must be a deterministic function of the node's state; it can be called any number of times.
  `attributes` is the node's attribute bag, or None for nodes that cannot carry attributes.
  '''

  @property
  def attributes(self) -> Union['Attrs',None]: ...

  def markup(self) -> str: ...


# Numeric children are converted to text at construction time.
ContentLax = Union[ContentNode,str,int,float]
ContentBuilder = Callable[[], Union[ContentLax,Iterable[ContentLax]]]
ContentArg = Union[ContentLax,ContentBuilder]


class Text(str):
  '''
  A string that is also a content node.
  Plain `str` children are wrapped in `Text` during normalization so that every stored child is a `ContentNode`.
  '''

  __slots__ = ()

  def __repr__(self) -> str: return f'Text({str.__repr__(self)})'

  @property
  def attributes(self) -> None: return None

  def markup(self) -> str: return str(self)


class EmptyElement:
  'The explicit empty content sentinel. It renders to the empty string.'

  __slots__ = ()

  def __repr__(self) -> str: return 'EmptyElement()'

  def __eq__(self, other:Any) -> bool: return isinstance(other, EmptyElement)

  def __hash__(self) -> int: return hash(EmptyElement)

  @property
  def attributes(self) -> None: return None

  def markup(self) -> str: return ''


class Group:
  '''
  An ordered collection of content rendered one after another, with no wrapping tag.
  This is how several values produced by a single builder are collapsed into one child.
  '''

  __slots__ = ('children',)

  children:tuple[ContentNode,...]

  def __init__(self, *children:ContentLax) -> None:
    self.children = tuple(content_node(c) for c in children)

  def __repr__(self) -> str: return f'Group{self.children!r}'

  def __eq__(self, other:Any) -> bool:
    return isinstance(other, Group) and self.children == other.children

  def __hash__(self) -> int: return hash(self.children)

  def __iter__(self): return iter(self.children)

  def __len__(self) -> int: return len(self.children)

  @property
  def attributes(self) -> None: return None

  def markup(self) -> str:
    return ''.join(c.markup() for c in self.children)


def content_node(child:ContentLax) -> ContentNode:
  'Convert a single lax child value to a content node, or raise TypeError.'
  if isinstance(child, type): raise TypeError(f'Invalid child type: expected a content value, received class {child!r}')
  if isinstance(child, (str, int, float)) and not isinstance(child, ContentNode):
    if isinstance(child, bool): raise TypeError(f'Invalid child type: {type(child)!r}; value: {child!r}')
    return Text(child if isinstance(child, str) else str(child))
  if isinstance(child, ContentNode): return child
  raise TypeError(f'Invalid child type: {type(child)!r}; value: {repr_lim(child)}')


def content_from(*children:ContentArg) -> ContentNode:
  '''
  Normalize the construction arguments of a composite element into its single stored child.
  * No arguments: the `EmptyElement` sentinel.
  * A single content value: the value itself (strings and numbers are wrapped as `Text`).
  * A single zero-argument callable: the builder is called exactly once, here;
    it may return one value or an iterable of values.
    A node class counts as a builder: `Span(EmptyElement)` holds an `EmptyElement` instance.
  * Multiple values: a `Group`.
  '''
  if not children: return EmptyElement()
  if len(children) > 1: return Group(*children)
  child = children[0]
  # Node classes pass the runtime protocol check, so test for classes first.
  if isinstance(child, type) or (callable(child) and not isinstance(child, ContentNode)):
    return _content_from_built(child())
  if isinstance(child, (ContentNode, str, int, float)): return content_node(child)
  raise TypeError(f'Invalid child type: {type(child)!r}; value: {repr_lim(child)}')


def _content_from_built(result:Any) -> ContentNode:
  'Normalize the value returned by a content builder. Builders may not return further builders.'
  if isinstance(result, (ContentNode, str, int, float)) and not isinstance(result, type): return content_node(result)
  if isinstance(result, Iterable) and not isinstance(result, (bytes, bytearray, Mapping, type)):
    items = tuple(result)
    if not items: return EmptyElement()
    if len(items) == 1: return content_node(items[0])
    return Group(*items)
  raise TypeError(f'Content builder returned an invalid value: {type(result)!r}; value: {repr_lim(result)}')


def markup_str(content:ContentLax) -> str:
  'Render any lax content value to a string.'
  return content_node(content).markup()


def html_esc(text:str) -> str:
  'Escape text for use as HTML element content.'
  return _escape(text, quote=False)


def html_esc_attr(text:str) -> str:
  'Escape text for use as an HTML attribute value.'
  return _escape(text, quote=True)


def repr_lim(obj:Any, limit=64) -> str:
  'Return a repr of `obj` that is at most `limit` characters long.'
  r = repr(obj)
  if limit > 2 and len(r) > limit:
    q = r[0]
    if q in '\'"': return f'{r[:limit-2]}{q}…'
    else: return f'{r[:limit-1]}…'
  return r
