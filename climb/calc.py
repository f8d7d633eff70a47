# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
An arithmetic calculator built on PrecClimber.

Parsing happens in two steps:
the lexer produces a flat stream of pairs,
and `parse` nests each parenthesized sub-expression into an 'expr' pair whose `inner` pairs alternate primary and operator.
Evaluation then climbs each 'expr' pair; the primary callback recurses into nested 'expr' pairs.
'''

from typing import Any, Callable, TypeVar

from . import ClimbError, Left, PrecClimber, Right
from .buffer import Buffer
from .io import errL
from .lex import Lexer
from .pair import Pair, Source


_T = TypeVar('_T')

Num = int|float


class CalcError(ClimbError):
  error_prefix = 'calc'


class ExcessPair(CalcError):
  'Raised when an expression is followed by a pair that is not an operator.'


lexer = Lexer(patterns=dict(
  spaces    = r'\s+',
  num       = r'\d+(?:\.\d+)?(?:[eE][+-]?\d+)?',
  plus      = r'\+',
  minus     = r'-',
  times     = r'\*',
  divide    = r'/',
  modulo    = r'%',
  power     = r'\^',
  paren_o   = r'\(',
  paren_c   = r'\)',
))


calc_groups = (
  Left('plus', 'minus'),
  Left('times', 'divide', 'modulo'),
  Right('power'),
)

climber = PrecClimber(*calc_groups)
dbg_climber = PrecClimber(*calc_groups, dbg=True)


def parse(source:Source, dbg=False) -> Pair[str]:
  '''
  Lex `source` and return a single 'expr' pair.
  Each parenthesized sub-expression becomes a nested 'expr' pair spanning its parentheses.
  '''
  stack:list[tuple[Pair[str]|None,list[Pair[str]]]] = [(None, [])] # (open paren pair, inner pairs).
  for pair in lexer.lex(source, drop=('spaces',)):
    if dbg: errL(f'calc: {pair}: {source[pair]!r}')
    if pair.rule == 'invalid':
      raise CalcError('invalid token', pair)
    elif pair.rule == 'paren_o':
      stack.append((pair, []))
    elif pair.rule == 'paren_c':
      if len(stack) == 1: raise CalcError('unmatched closing parenthesis', pair)
      paren_o, inner = stack.pop()
      assert paren_o is not None
      stack[-1][1].append(Pair(rule='expr', slc=slice(paren_o.pos, pair.end), inner=tuple(inner)))
    else:
      stack[-1][1].append(pair)

  if len(stack) > 1:
    raise CalcError('unclosed parenthesis', stack[-1][0])
  _, inner = stack[0]
  if inner: slc = slice(inner[0].pos, inner[-1].end)
  else: slc = slice(len(source.text), len(source.text))
  return Pair(rule='expr', slc=slc, inner=tuple(inner))


def parse_num(text:str) -> Num:
  try: return int(text)
  except ValueError: return float(text)


def climb_expr(expr:Pair[str], primary:Callable[[Pair[str]],_T], infix:Callable[[_T,Pair[str],_T],_T], dbg=False) -> _T:
  'Climb the inner pairs of an expr pair, rejecting any pairs left over.'
  if not expr.inner: raise CalcError('empty expression', expr)
  pairs = Buffer(expr.inner)
  val = (dbg_climber if dbg else climber).climb(pairs, primary, infix)
  if pairs: raise ExcessPair('expected an operator', pairs.peek())
  return val


def expect_primary(pair:Pair[str]) -> None:
  if pair.rule not in ('num', 'expr'):
    raise CalcError('expected a number or parenthesized expression', pair)


def evaluate(source:Source, dbg=False) -> Num:
  'Evaluate the arithmetic expression in `source`.'

  def primary(pair:Pair[str]) -> Num:
    expect_primary(pair)
    if pair.rule == 'expr': return climb_expr(pair, primary, infix, dbg=dbg)
    return parse_num(source[pair])

  def infix(left:Num, op:Pair[str], right:Num) -> Num:
    try:
      match op.rule:
        case 'plus': res = left + right
        case 'minus': res = left - right
        case 'times': res = left * right
        case 'divide':
          if right == 0: raise CalcError('division by zero', op)
          res = left / right
        case 'modulo':
          if right == 0: raise CalcError('modulo by zero', op)
          res = left % right
        case 'power': res = left ** right
        case _: raise ValueError(op)
    except (OverflowError, ZeroDivisionError) as e: raise CalcError(str(e), op) from e
    #^ Large ints overflow when mixed with floats or divided; 0 ^ -1 divides by zero.
    if isinstance(res, complex): raise CalcError('complex result', op) # e.g. negative base with fractional exponent.
    return res

  return climb_expr(parse(source, dbg=dbg), primary, infix, dbg=dbg)


def tree(source:Source, dbg=False) -> Any:
  '''
  Return the structure of the expression in `source` as nested `(operator, left, right)` tuples of source text.
  Parentheses do not appear in the result; they are implied by the nesting.
  '''

  def primary(pair:Pair[str]) -> Any:
    expect_primary(pair)
    if pair.rule == 'expr': return climb_expr(pair, primary, infix, dbg=dbg)
    return source[pair]

  def infix(left:Any, op:Pair[str], right:Any) -> Any:
    return (source[op], left, right)

  return climb_expr(parse(source, dbg=dbg), primary, infix, dbg=dbg)
