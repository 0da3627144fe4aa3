# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from ember import AutoSpacing, Axis, ExactSpacing, SemanticSpacing, Spacer, SpacingAmount
from utest import utest, utest_call, utest_exc, utest_val, utest_val_ne


# Automatic.
utest('<section class="mt-auto"></section>', Spacer().markup)
utest('<section class="ms-auto"></section>', Spacer().axis(Axis.horizontal).markup)
utest_val_ne(Spacer().markup(), Spacer().axis(Axis.horizontal).markup(), 'axes differ')
utest('<section class="mt-auto"></section>', Spacer().axis(Axis.horizontal).axis(Axis.vertical).markup)

# Exact.
utest('<section style="height:20px"></section>', Spacer(20).markup)
utest('<section style="width:20px"></section>', Spacer(20).axis(Axis.horizontal).markup)
utest('<section style="height:0px"></section>', Spacer(0).markup)

# Semantic.
utest('<section class="mt-3"></section>', Spacer(SpacingAmount.medium).markup)
utest('<section class="ms-3"></section>', Spacer(SpacingAmount.medium).axis(Axis.horizontal).markup)
utest('<section class="mt-5"></section>', Spacer(SpacingAmount.x_large).markup)


# The sizing mode is chosen at construction and never changed by `axis`.
utest(AutoSpacing(), getattr, Spacer(), 'spacing')
utest(ExactSpacing(5), getattr, Spacer(5), 'spacing')
utest(SemanticSpacing(SpacingAmount.small), getattr, Spacer(SpacingAmount.small), 'spacing')
utest(ExactSpacing(5), getattr, Spacer(5).axis(Axis.horizontal), 'spacing')
utest(Axis.vertical, getattr, Spacer(), 'spacer_axis')


@utest_call
def test_axis_copy() -> None:
  s = Spacer(8)
  h = s.axis(Axis.horizontal)
  utest_val('<section style="height:8px"></section>', s.markup(), 'original unchanged')
  utest_val('<section style="width:8px"></section>', h.markup())


@utest_call
def test_render_is_repeatable() -> None:
  for s in [Spacer().id('gap'), Spacer(20).axis(Axis.horizontal).style(color='red'), Spacer(SpacingAmount.small).cl('x')]:
    first = s.markup()
    utest_val(first, s.markup(), f'second render of {s!r}')
    utest_val(first, s.markup(), f'third render of {s!r}')
  s = Spacer(SpacingAmount.small).cl('x')
  s.markup()
  utest_val(('x',), s.attributes.classes, 'render leaves the spacer attributes unchanged')


# Spacer attributes are carried onto the rendered section.
utest('<section id="gap" class="mt-auto"></section>', Spacer().id('gap').markup)
utest('<section class="d-none ms-2"></section>', Spacer(SpacingAmount.small).cl('d-none').axis(Axis.horizontal).markup)
utest('<section style="color:red;height:4px"></section>', Spacer(4).style(color='red').markup)


# Invalid construction.
utest_exc(TypeError, Spacer, True)
utest_exc(TypeError, Spacer, 2.5)
utest_exc(TypeError, Spacer, '5')
utest_exc(ValueError, Spacer, -1)

# An impossible sizing mode is reported loudly rather than rendered as nothing.
utest_exc(ValueError("INTERNAL ERROR: unknown spacing mode: 'bogus'."), Spacer()._copy(spacing='bogus').markup)
