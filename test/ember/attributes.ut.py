# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from ember.actions import CustomAction, ShowAlert
from ember.attributes import Attrs, cssi, quote_attr_val
from utest import utest, utest_call, utest_exc, utest_val


empty = Attrs()
utest('', empty.render)
utest('', str, empty)
utest(False, bool, empty)


# Serialization order is id, class, style, custom attributes, events; independent of mutation order.
utest(' class="c" style="color:red" title="t"',
  Attrs().with_attr('title', 't').with_style(color='red').with_classes('c').render)

utest(' id="i" class="b a" style="width:20px" data-x="1" data-x="2"',
  Attrs().with_classes('b', 'a', 'b').with_style(width='20px').with_attr('data-x', 1).with_attr('data-x', 2).with_id('i').render)


# Classes.
utest(('a', 'b'), lambda: Attrs().with_classes(None, '', 'a b').classes)
utest(('a', 'b'), lambda: Attrs().with_classes('a').with_classes('b', 'a').classes)

@utest_call
def _with_no_classes_returns_receiver() -> None:
  a = Attrs().with_classes('x')
  utest_val(True, a.with_classes() is a, 'with_classes() returns the receiver')
  utest_val(True, a.with_classes('x') is a, 'with_classes(existing) returns the receiver')


# Styles.
utest('width:3px;height:2px', lambda: cssi(Attrs().with_style(width='1px').with_style(height='2px').with_style(width='3px').styles))
utest(' style="font-size:1em"', Attrs().with_style(font_size='1em').render)
utest('a:1;b:2', cssi, [('a', '1'), ('b', '2')])


# Custom, aria and static attributes.
utest(' aria-label="Close"', Attrs().with_aria('label', 'Close').render)
utest_val(empty, empty.with_aria('label', None), 'None aria value adds nothing')
utest(' disabled', Attrs().with_static('disabled').render)
utest(' title="x" disabled', Attrs().with_attr('title', 'x').with_static('disabled').render)
utest_exc(ValueError, Attrs().with_attr, 'class', 'x')
utest_exc(ValueError, Attrs().with_attr, 'style', 'x')
utest_exc(ValueError, Attrs().with_attr, 'id', 'x')


# Escaping.
utest(' title="a &quot;b&quot; &lt;c> &amp; d"', Attrs().with_attr('title', 'a "b" <c> & d').render)
utest('"x"', quote_attr_val, 'x')
utest('"&amp;&lt;&quot;"', quote_attr_val, '&<"')


# Events.
utest(''' onclick="alert('hi'); go()"''', Attrs().with_event('onclick', [ShowAlert('hi'), CustomAction('go()')]).render)
utest('', Attrs().with_event('onclick', []).render)
utest(False, bool, Attrs().with_event('onclick', []))
utest(True, bool, Attrs().with_event('onclick', [CustomAction('go()')]))
utest(' class="c" onclick="go()"', Attrs().with_event('onclick', [CustomAction('go()')]).with_classes('c').render)

# Repeated registrations for one event share a single attribute, keeping first-registration position.
utest(' onclick="a(); b()"',
  Attrs().with_event('onclick', [CustomAction('a()')]).with_event('onclick', [CustomAction('b()')]).render)
utest(' onclick="a(); c()" onmouseover="b()"',
  Attrs().with_event('onclick', [CustomAction('a()')]).with_event('onmouseover', [CustomAction('b()')])
  .with_event('onclick', [CustomAction('c()')]).render)
utest(' onclick="a()"', Attrs().with_event('onclick', []).with_event('onclick', [CustomAction('a()')]).render)


# Mutators never modify the receiver.
base = Attrs()
base.with_classes('x')
base.with_style(width='1px')
base.with_attr('title', 't')
base.with_static('hidden')
base.with_id('i')
utest_val(Attrs(), base, 'receiver unchanged')
utest('', base.render)
