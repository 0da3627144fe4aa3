# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Element types.

Every element is a value: its fluent mutators return modified copies, and `markup()` is a pure function of its state.
Composite elements accept their content through one contract (see `markup.content_from`):
no arguments, a single content value, a zero-argument builder callable, or several values.
'''

from dataclasses import dataclass
from typing import Self

from .actions import actions_from, ActionsArg
from .attributes import Attrs
from .markup import ContentArg, ContentNode, content_from
from .modifiers import Modifiers
from .semantics import (Axis, button_aria_label, button_classes, ButtonSize, ButtonType, column_width_class, Edge,
  full_width_class, icon_class, margin_class, Role, SpacingAmount)


class Section(Modifiers):
  'A block-level container.'

  __slots__ = ('content',)

  content:ContentNode

  def __init__(self, *content:ContentArg) -> None:
    self.attributes = Attrs()
    self.content = content_from(*content)

  def markup(self) -> str:
    return f'<section{self.attributes}>{self.content.markup()}</section>'


class Span(Modifiers):
  '''
  An inline subsection of another element, useful for styling just part of some text.
  With no content, a span renders as an empty tag; this is useful where styling is performed entirely by CSS.
  '''

  __slots__ = ('content',)

  content:ContentNode

  def __init__(self, *content:ContentArg) -> None:
    self.attributes = Attrs()
    self.content = content_from(*content)

  def markup(self) -> str:
    return f'<span{self.attributes}>{self.content.markup()}</span>'


# Spacer sizing modes.

@dataclass(frozen=True)
class AutoSpacing:
  'Occupy all available space.'

@dataclass(frozen=True)
class ExactSpacing:
  'A fixed size in pixels.'
  px:int

@dataclass(frozen=True)
class SemanticSpacing:
  'An adaptive margin from the spacing scale.'
  amount:SpacingAmount

SpacingMode = AutoSpacing|ExactSpacing|SemanticSpacing


class Spacer(Modifiers):
  '''
  Space between siblings, either automatic (filling the remaining space), an exact pixel size, or a semantic amount.
  The sizing mode is fixed at construction; `axis` only changes the direction.
  '''

  __slots__ = ('spacing', 'spacer_axis')

  spacing:SpacingMode
  spacer_axis:Axis

  def __init__(self, size:int|SpacingAmount|None=None) -> None:
    self.attributes = Attrs()
    self.spacer_axis = Axis.vertical
    if size is None:
      self.spacing = AutoSpacing()
    elif isinstance(size, SpacingAmount):
      self.spacing = SemanticSpacing(size)
    elif isinstance(size, int) and not isinstance(size, bool):
      if size < 0: raise ValueError(f'Spacer size must not be negative: {size}')
      self.spacing = ExactSpacing(size)
    else:
      raise TypeError(f'Spacer size must be `int` or `SpacingAmount`; received: {size!r}')


  def axis(self, axis:Axis) -> Self:
    'Configure the lateral direction of the spacer.'
    return self._copy(spacer_axis=axis)


  def markup(self) -> str:
    horizontal = (self.spacer_axis == Axis.horizontal)
    section = Section()._copy(attributes=self.attributes)
    match self.spacing:
      case AutoSpacing():
        section = section.cl(margin_class(Edge.leading if horizontal else Edge.top, 'auto'))
      case SemanticSpacing(amount):
        section = section.margin(Edge.leading if horizontal else Edge.top, amount)
      case ExactSpacing(px):
        section = section.frame(width=px) if horizontal else section.frame(height=px)
      case _: raise ValueError(f'INTERNAL ERROR: unknown spacing mode: {self.spacing!r}.')
    return section.markup()


class Button(Modifiers):
  '''
  A clickable button with a label and styling.
  With no label, a button renders with empty content; this is useful where styling is performed entirely by CSS.
  `system_image` is an icon name from https://icons.getbootstrap.com, drawn before the label.
  `actions` are run when the button is clicked.
  '''

  __slots__ = ('label', 'button_kind', 'size', 'button_role', 'system_image', 'is_disabled')

  label:ContentNode
  button_kind:ButtonType
  size:ButtonSize
  button_role:Role
  system_image:str|None
  is_disabled:bool

  def __init__(self, *label:ContentArg, system_image:str|None=None, actions:ActionsArg=()) -> None:
    if system_image is not None and not isinstance(system_image, str):
      raise TypeError(f'system_image must be `str`; received: {system_image!r}')
    self.attributes = Attrs()
    self.label = content_from(*label)
    self.button_kind = ButtonType.plain
    self.size = ButtonSize.medium
    self.button_role = Role.default
    self.system_image = system_image
    self.is_disabled = False
    if resolved_actions := actions_from(actions):
      self.attributes = self.attributes.with_event('onclick', resolved_actions)


  def button_size(self, size:ButtonSize) -> Self:
    return self._copy(size=size)

  def role(self, role:Role) -> Self:
    return self._copy(button_role=role)

  def button_type(self, button_type:ButtonType) -> Self:
    'Set the behavior of the button: `ButtonType.plain` or `ButtonType.submit`.'
    return self._copy(button_kind=button_type)

  def disabled(self, disabled:bool=True) -> Self:
    return self._copy(is_disabled=disabled)


  def width(self, count:int) -> Self:
    'Return a copy that fills its container, constrained to `count` grid columns.'
    return self.cl(full_width_class, column_width_class(count))


  def markup(self) -> str:
    attrs = (self.attributes
      .with_classes(*button_classes(self.button_role, self.size))
      .with_aria('label', button_aria_label(self.button_role)))
    if self.is_disabled:
      attrs = attrs.with_static('disabled')

    label_html = ''
    if self.system_image:
      label_html = f'<i class="{icon_class(self.system_image)}"></i> '
    label_html += self.label.markup()
    return f'<button type="{self.button_kind.html_name}"{attrs}>{label_html}</button>'
