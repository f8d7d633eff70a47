# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from climb.buffer import Buffer
from utest import utest, utest_call, utest_exc, utest_seq, utest_val


@utest_call
def test_peek() -> None:
  b = Buffer([1, 2, 3])
  utest(1, b.peek)
  utest(1, b.peek)
  utest_val(True, bool(b), 'nonempty buffer')
  utest(1, next, b)
  utest(2, b.peek)
  utest_seq([2, 3], list, b)
  utest_val(False, bool(b), 'exhausted buffer')
  utest(None, b.peek, default=None)
  utest_exc(StopIteration, b.peek)
  utest_exc(StopIteration, next, b)


@utest_call
def test_bool_keeps_element() -> None:
  b = Buffer(range(3))
  utest_val(True, bool(b), 'bool peeks')
  utest_seq([0, 1, 2], list, b)


@utest_call
def test_lazy() -> None:
  consumed:list[int] = []
  def gen():
    for i in range(3):
      consumed.append(i)
      yield i
  b = Buffer(gen())
  utest_val([], consumed, 'nothing consumed before peek')
  utest(0, b.peek)
  utest_val([0], consumed, 'peek consumes one element from the source')
