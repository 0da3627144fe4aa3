# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from ember.actions import Action, actions_from, CustomAction, ShowAlert
from utest import utest, utest_call, utest_exc, utest_val


utest("alert('Hello')", ShowAlert('Hello').compile)
utest("alert('it\\'s')", ShowAlert("it's").compile)
utest('go()', CustomAction('go()').compile)
utest(True, isinstance, ShowAlert('x'), Action)
utest(False, isinstance, 'go()', Action)

go = CustomAction('go()')
utest((go,), actions_from, [go])
utest((), actions_from, ())
utest((go, go), actions_from, lambda: [go, go])


@utest_call
def test_builder_called_once() -> None:
  calls = 0
  def build():
    nonlocal calls
    calls += 1
    return [go]
  utest_val((go,), actions_from(build))
  utest_val(1, calls, 'actions builder is called once')


utest_exc(TypeError, actions_from, 'go()')
utest_exc(TypeError, actions_from, [1])
utest_exc(TypeError, actions_from, 5)
utest_exc(TypeError, actions_from, lambda: None)
