# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from enum import Enum

from climb.pair import get_syntax_slc, Pair, Source
from utest import utest, utest_exc


class Rule(Enum):
  plus = 0


utest('2-3:plus', str, Pair('plus', slice(2, 3)))
utest('0-1:plus', str, Pair(Rule.plus, slice(0, 1)))
utest(2, lambda: Pair('plus', slice(2, 3)).pos)
utest(3, lambda: Pair('plus', slice(2, 3)).end)

utest(slice(1, 2), get_syntax_slc, slice(1, 2))
utest(slice(1, 2), get_syntax_slc, Pair('plus', slice(1, 2)))


source = Source('src', 'a +\nb * c\n')

utest('a', source.__getitem__, Pair('name', slice(0, 1)))
utest('+', source.__getitem__, 2)
utest('a +', source.__getitem__, slice(0, 3))

utest(0, source.get_line_index, 0)
utest(1, source.get_line_index, 6)
utest(4, source.get_line_start, 6)
utest(10, source.get_line_end, 6)
utest_exc(IndexError, source.get_line_index, 11)

utest('src:2:1-2: msg\n| b * c\n  ~\n', source.diagnostic, (Pair('name', slice(4, 5)), 'msg'))
utest('src:2:3-4: bad\n| b * c\n    ~\n', source.diagnostic, (slice(6, 7), 'bad'))
utest('src:1:1-5: span\n| a +\n  ~~~~\n', source.diagnostic, (slice(0, 5), 'span')) # Underlined on the first line only.
utest('src:1:1-2: one\n| a +\n  ~\nsrc:2:1-2: two\n| b * c\n  ~\n',
  source.diagnostic, (slice(0, 1), 'one'), (slice(4, 5), 'two'))
