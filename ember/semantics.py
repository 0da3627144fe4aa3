# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Styling semantics data: the enumerations used by element types and the Bootstrap class tables they map to.
'''

from enum import Enum


class Axis(Enum):
  'The lateral direction of an element such as a spacer.'
  horizontal = 'horizontal'
  vertical = 'vertical'


class ButtonSize(Enum):
  'Display size of buttons. Medium is the default and contributes no class.'
  small = 'small'
  medium = 'medium'
  large = 'large'


class ButtonType(Enum):
  'Whether a button is just clickable, or whether it submits a form.'
  plain = 'button'
  submit = 'submit'

  @property
  def html_name(self) -> str:
    'The value of the HTML `type` attribute.'
    return self.value


class Role(Enum):
  '''
  Visual role of an element.
  Every role except `default` maps to a class suffix, e.g. `btn-primary`.
  '''
  default = 'default'
  primary = 'primary'
  secondary = 'secondary'
  success = 'success'
  danger = 'danger'
  warning = 'warning'
  info = 'info'
  light = 'light'
  dark = 'dark'
  close = 'close'


class SpacingAmount(Enum):
  'Semantic spacing amounts, valued by their position in the Bootstrap spacing scale.'
  none = 0
  x_small = 1
  small = 2
  medium = 3
  large = 4
  x_large = 5


class Edge(Enum):
  'Edges to which margin utilities apply; the value is the class prefix.'
  top = 'mt'
  bottom = 'mb'
  leading = 'ms'
  trailing = 'me'
  horizontal = 'mx'
  vertical = 'my'
  all = 'm'


button_base_class = 'btn'

button_size_classes = {
  ButtonSize.small: 'btn-sm',
  ButtonSize.medium: '', # Default.
  ButtonSize.large: 'btn-lg',
}

close_aria_label = 'Close'

icon_prefix = 'bi bi-' # Bootstrap Icons font.

full_width_class = 'w-100'

max_column_count = 12


def button_classes(role:Role, size:ButtonSize) -> list[str]:
  '''
  Return the classes that style a button for the given role and size.
  This is shared by anything drawn as a button, hence the standalone function.
  '''
  classes = [button_base_class]
  if size_class := button_size_classes[size]: classes.append(size_class)
  if role != Role.default: classes.append(f'{button_base_class}-{role.value}')
  return classes


def button_aria_label(role:Role) -> str|None:
  'The accessibility label for a button role, if the role requires one.'
  return close_aria_label if role == Role.close else None


def margin_class(edge:Edge, amount:SpacingAmount|str) -> str:
  'The margin utility class for `edge`; `amount` is either a SpacingAmount or a literal suffix such as "auto".'
  suffix = amount.value if isinstance(amount, SpacingAmount) else amount
  return f'{edge.value}-{suffix}'


def column_width_class(count:int) -> str:
  if isinstance(count, bool) or not isinstance(count, int): raise TypeError(f'column count must be `int`; received: {count!r}')
  if not 1 <= count <= max_column_count:
    raise ValueError(f'column count must be between 1 and {max_column_count}; received: {count}')
  return f'col-md-{count}'


def icon_class(name:str) -> str:
  'The icon font classes for an icon name. Names are not validated.'
  return icon_prefix + name
