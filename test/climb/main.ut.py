# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from subprocess import run
from sys import executable

from utest import utest, utest_call, utest_val


def climb_cmd(*args:str, input:str='') -> tuple[int,str,str]:
  'Run the command line calculator; return the exit status, stdout and stderr.'
  c = run([executable, '-m', 'climb', *args], input=input, capture_output=True, text=True)
  return (c.returncode, c.stdout, c.stderr)


utest((0, '7\n', ''), climb_cmd, '1 + 2 * 3')
utest((0, '7\n512\n', ''), climb_cmd, '1 + 2 * 3', '2 ^ 3 ^ 2')
utest((0, "('+', '1', ('*', '2', '3'))\n", ''), climb_cmd, '-tree', '1 + 2 * 3')

# Every argument is evaluated before the failing status is returned.
utest((1, '7\n', 'arg0:1:3-4: calc error: division by zero.\n| 1 / 0\n    ~\n'), climb_cmd, '1 / 0', '1 + 2 * 3')

utest((0, '3\n2.5\n', ''), climb_cmd, input='1 + 2\n\n5 / 2\n')
utest((1, '', '<stdin>:2:3-4: climb error: infix operator must be followed by a primary expression.\n| 1 +\n    ~\n'),
  climb_cmd, input='\n1 +\n') # Blank lines are skipped but still counted.


@utest_call
def test_stdin_error_then_valid() -> None:
  status, out, err = climb_cmd(input='2 ^ 1100 / 3\n1 + 1\n')
  utest_val(1, status, 'exit status after an error line')
  utest_val('2\n', out, 'valid line after the error is evaluated')
  utest_val(True, err.startswith('<stdin>:1:10-11: calc error: '), f'overflow diagnostic: {err!r}')
  utest_val(True, err.endswith('.\n| 2 ^ 1100 / 3\n           ~\n'), f'overflow diagnostic source line: {err!r}')


@utest_call
def test_dbg() -> None:
  utest((0, '3\n', "calc: 0-1:num: '1'\ncalc: 2-3:plus: '+'\ncalc: 4-5:num: '2'\nclimb: 2-3:plus: reducing at precedence 1.\n"),
    climb_cmd, '-dbg', '1 + 2')

  status, out, err = climb_cmd('-dbg', '1 + 2 * 3')
  utest_val((0, '7\n'), (status, out), 'dbg result')
  utest_val([
      'climb: 6-7:times: absorbing into right side at precedence 2.',
      'climb: 6-7:times: reducing at precedence 2.',
      'climb: 2-3:plus: reducing at precedence 1.',
    ],
    [line for line in err.splitlines() if line.startswith('climb: ')],
    'climber trace')
