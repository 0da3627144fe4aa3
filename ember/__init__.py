# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
ember is a declarative component library for generating static HTML markup.
'''

from .actions import Action, actions_from, CustomAction, ShowAlert
from .attributes import Attrs
from .elements import AutoSpacing, Button, ExactSpacing, Section, SemanticSpacing, Spacer, Span
from .markup import ContentNode, content_from, EmptyElement, Group, html_esc, html_esc_attr, markup_str, Text
from .semantics import Axis, ButtonSize, ButtonType, Edge, Role, SpacingAmount
