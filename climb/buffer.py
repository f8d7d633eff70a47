# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from enum import Enum
from typing import final, Iterable, Iterator, TypeVar, Union


_T = TypeVar('_T')


@final
class Raise(Enum):
  '''
  Singleton default value indicating that the default behavior is to raise an exception.
  For example: `def peek(self, default:RaiseOr[_T]=Raise._) -> _T: ...`
  '''
  _ = 0

RaiseOr = Union[Raise,_T]


class Buffer(Iterator[_T]):
  '''
  Iterator that buffers an iterable, providing lookahead.
  `peek()` returns the next element without consuming it.
  Passing a Buffer to `PrecClimber.climb` lets the caller see whatever the climber left unconsumed.
  '''

  def __init__(self, iterable:Iterable[_T]):
    self.iterator = iter(iterable)
    self.buffer:list[_T] = []


  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.iterator!r}, buffer={self.buffer!r})'


  def __bool__(self) -> bool:
    try: self.peek()
    except StopIteration: return False
    else: return True


  def __iter__(self) -> Iterator[_T]: return self


  def __next__(self) -> _T:
    try: return self.buffer.pop()
    except IndexError: pass
    return next(self.iterator)


  def peek(self, default:RaiseOr[_T]=Raise._) -> _T:
    try: return self.buffer[-1]
    except IndexError: pass
    try: el = next(self.iterator)
    except StopIteration:
      if isinstance(default, Raise): raise
      else: return default
    self.buffer.append(el)
    return el
