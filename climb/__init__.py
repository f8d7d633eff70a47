# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Operator precedence climbing over a flat sequence of pairs.

A PrecClimber is built from an ordered list of operator groups;
every operator in a group shares one precedence level, and later groups bind tighter.
`climb` then reduces a sequence that alternates primary and operator pairs, in a manner similar to map-reduce:
primary pairs are mapped to values with the `primary` callback,
and values are combined across operator pairs with the `infix` callback.

The climber knows nothing about how pairs are produced or what values are built from them;
a primary callback typically recurses into the climber for nested (e.g. parenthesized) expressions.

Example:
  climber = PrecClimber(
    Left('plus', 'minus'),
    Left('times', 'divide'),
    Right('power'),
    rule_of=lambda token: token.kind)
  val = climber.climb(tokens, primary, infix)
'''

from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, Mapping, TypeVar, Union

from .buffer import Buffer
from .io import errL
from .pair import HasSlc, rule_str, Source


_R = TypeVar('_R', bound=Hashable) # Rule identity.
_P = TypeVar('_P') # Pair type.
_T = TypeVar('_T') # Value type.


class Assoc(Enum):
  'Operator associativity.'
  Left = 'left'
  Right = 'right'


class Operator(Generic[_R]):
  'An infix operator: a rule identity and its associativity.'

  def __init__(self, rule:_R, assoc:Assoc):
    if not isinstance(assoc, Assoc): raise TypeError(f'expected Assoc; received {assoc!r}')
    self.rule = rule
    self.assoc = assoc

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.rule!r}, {self.assoc})'

  def __eq__(self, other:Any) -> bool:
    return isinstance(other, Operator) and self.rule == other.rule and self.assoc == other.assoc

  def __hash__(self) -> int:
    return hash((self.rule, self.assoc))

  def __or__(self, other:Union['Operator[_R]','Group[_R]']) -> 'Group[_R]':
    return Group(self) | other


class Group(Generic[_R]):
  '''
  An ordered group of operators that share the same precedence level.
  Groups are combined with operators or other groups using `|`, which appends to the tail of the group.
  '''

  def __init__(self, *ops:Operator[_R]):
    for op in ops:
      if not isinstance(op, Operator): raise TypeError(f'expected Operator; received {op!r}')
    self.ops = ops

  def __repr__(self) -> str:
    return f'Group({", ".join(repr(op) for op in self.ops)})'

  def __eq__(self, other:Any) -> bool:
    return isinstance(other, Group) and self.ops == other.ops

  def __hash__(self) -> int:
    return hash(self.ops)

  def __iter__(self) -> Iterator[Operator[_R]]:
    return iter(self.ops)

  def __len__(self) -> int:
    return len(self.ops)

  def __or__(self, other:Union[Operator[_R],'Group[_R]']) -> 'Group[_R]':
    if isinstance(other, Operator): return Group(*self.ops, other)
    if isinstance(other, Group): return Group(*self.ops, *other.ops)
    return NotImplemented


class Left(Group[_R]):
  'Left-associative operator precedence group.'

  def __init__(self, *rules:_R):
    super().__init__(*(Operator(rule, Assoc.Left) for rule in rules))


class Right(Group[_R]):
  'Right-associative operator precedence group.'

  def __init__(self, *rules:_R):
    super().__init__(*(Operator(rule, Assoc.Right) for rule in rules))


def pair_rule(pair:Any) -> Any:
  'The default `rule_of` accessor: read the `rule` attribute of a pair.'
  return pair.rule


class ClimbError(Exception):
  '''
  Raised when the pair sequence does not alternate primary and operator pairs.
  These are grammar or caller mistakes rather than ordinary input errors,
  but they are raised as exceptions so that embedding code can report them.
  '''
  error_prefix = 'climb'

  def __init__(self, msg:str, pair:Any=None):
    self.msg = msg
    self.pair = pair
    super().__init__(msg, pair)

  def __str__(self) -> str:
    if self.pair is None: return self.msg
    return f'{self.msg}: {self.pair}'

  def diagnostic(self, source:Source) -> str:
    if isinstance(self.pair, HasSlc):
      return source.diagnostic((self.pair, f'{self.error_prefix} error: {self.msg}.'))
    # No position information; point at the end of the source.
    end = len(source.text)
    return source.diagnostic((slice(end, end), f'{self.error_prefix} error: {self.msg}.'))


class EmptyInput(ClimbError):
  'Raised by `climb` when the pair sequence is empty.'


class MissingOperand(ClimbError):
  'Raised by `climb` when an operator pair is not followed by a primary pair.'


class PrecClimber(Generic[_R]):
  '''
  Performs precedence climbing on pairs that start with a primary pair and then alternate operator and primary pairs.

  Each positional argument is a group of operators (or a single operator);
  the operators in the group at index `i` receive precedence `i + 1`.
  A rule may appear in only one group, unless `replace` is set, in which case the last occurrence wins.

  `rule_of` reads the rule identity of a pair without consuming it; by default it reads `pair.rule`.
  '''

  class DefinitionError(Exception):
    def __init__(self, *msgs:Any):
      super().__init__(''.join(str(msg) for msg in msgs))


  def __init__(self, *groups:Group[_R]|Operator[_R], rule_of:Callable[[Any],_R]=pair_rule, replace=False, dbg=False):
    self.groups = tuple(self._mk_group(g) for g in groups)
    self.rule_of = rule_of
    self.dbg = dbg
    ops:dict[_R,tuple[int,Assoc]] = {}
    for prec, group in enumerate(self.groups, 1):
      for op in group:
        try: existing = ops[op.rule]
        except KeyError: pass
        else:
          if not replace:
            raise PrecClimber.DefinitionError(f'operator {rule_str(op.rule)!r} is defined more than once: ',
              f'precedence {existing[0]} ({existing[1].value}) and precedence {prec} ({op.assoc.value}).')
        ops[op.rule] = (prec, op.assoc)
    self.ops:Mapping[_R,tuple[int,Assoc]] = MappingProxyType(ops)


  @staticmethod
  def _mk_group(group:Group[_R]|Operator[_R]) -> Group[_R]:
    if isinstance(group, Group): return group
    if isinstance(group, Operator): return Group(group)
    raise PrecClimber.DefinitionError(f'expected Group or Operator; received {group!r}')


  def __repr__(self) -> str:
    groups = ', '.join(repr(g) for g in self.groups)
    return f'{type(self).__name__}({groups})'


  def __contains__(self, rule:Any) -> bool:
    return rule in self.ops


  def precedence(self, rule:_R) -> int:
    return self.ops[rule][0]


  def assoc(self, rule:_R) -> Assoc:
    return self.ops[rule][1]


  def climb(self, pairs:Iterable[_P], primary:Callable[[_P],_T], infix:Callable[[_T,_P,_T],_T]) -> _T:
    '''
    Reduce `pairs` to a single value.
    `primary` is called once for each primary pair, in order;
    `infix` is called with the left value, the operator pair, and the right value for each operator reduced.

    The climb stops at the first pair whose rule is not an operator.
    If `pairs` is a Buffer, that pair and any that follow remain in it for the caller.

    Raises EmptyInput if `pairs` is empty, and MissingOperand if an operator is not followed by a primary.
    '''
    buffer = pairs if isinstance(pairs, Buffer) else Buffer(pairs)
    try: first = next(buffer)
    except StopIteration: raise EmptyInput('precedence climbing requires a non-empty sequence of pairs') from None
    return self._climb_rec(primary(first), 0, buffer, primary, infix)


  def _climb_rec(self, left:_T, min_prec:int, buffer:Buffer[_P], primary:Callable[[_P],_T],
   infix:Callable[[_T,_P,_T],_T]) -> _T:
    while True:
      try: op_pair = buffer.peek()
      except StopIteration: break
      try: prec, _assoc = self.ops[self.rule_of(op_pair)]
      except KeyError: break # Not an operator; the remainder belongs to the caller.
      if prec < min_prec: break # Lower precedence; return to the outer level.
      next(buffer)
      try: right_pair = next(buffer)
      except StopIteration:
        raise MissingOperand('infix operator must be followed by a primary expression', op_pair) from None
      right = primary(right_pair)

      while True:
        try: next_pair = buffer.peek()
        except StopIteration: break
        try: next_prec, next_assoc = self.ops[self.rule_of(next_pair)]
        except KeyError: break
        if next_prec > prec or (next_prec == prec and next_assoc == Assoc.Right):
          if self.dbg: errL(f'climb: {next_pair}: absorbing into right side at precedence {next_prec}.')
          right = self._climb_rec(right, next_prec, buffer, primary, infix)
        else:
          break

      if self.dbg: errL(f'climb: {op_pair}: reducing at precedence {prec}.')
      left = infix(left, op_pair, right)
    return left
