# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Pair and Source classes: the token units that a climber consumes, and the text they refer to.
'''

from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, Generic, Hashable, Protocol, runtime_checkable, TypeVar


_R = TypeVar('_R', bound=Hashable)


@runtime_checkable
class HasSlc(Protocol):
  @property
  def slc(self) -> slice: ...


Syntax = slice|HasSlc


def get_syntax_slc(syntax:Syntax) -> slice:
  return syntax if isinstance(syntax, slice) else syntax.slc


def slc_str(slc:slice) -> str: return f'{slc.start}-{slc.stop}'


def rule_str(rule:Any) -> str:
  'Enum members are shown by name; other rule identities by `str`.'
  try: return str(rule.name)
  except AttributeError: return str(rule)


@dataclass(frozen=True)
class Pair(Generic[_R]):
  '''
  A token produced by a tokenizer or parser.
  `rule` is the rule identity that a PrecClimber looks up;
  `slc` is the span of source text covered by the pair;
  `inner` holds nested pairs, e.g. the contents of a parenthesized expression.
  '''
  rule:_R
  slc:slice
  inner:tuple['Pair[_R]',...] = ()

  def __str__(self) -> str:
    return f'{slc_str(self.slc)}:{rule_str(self.rule)}'

  @property
  def pos(self) -> int: return int(self.slc.start)

  @property
  def end(self) -> int: return int(self.slc.stop)


SyntaxMsg = tuple[Syntax,str]


class Source:
  '''
  The named text that pairs refer to by slice.
  Source renders diagnostics that quote and underline the offending span.
  '''

  def __init__(self, name:str, text:str, *, line_idx_start:int=0):
    assert isinstance(text, str)
    self.name = name
    self.text = text
    self.line_idx_start = line_idx_start
    self.newline_positions:list[int] = []


  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.name!r}, text=<{type(self.text).__name__}[{len(self.text)}]>)'


  def __getitem__(self, idx:int|Syntax) -> str:
    slc = slice(idx,idx+1) if isinstance(idx, int) else get_syntax_slc(idx)
    return self.text[slc]


  def update_line_positions(self, pos:int) -> None:
    'Lazily update newline positions array up to `pos`. `pos` must be less than or equal to the text length.'
    start = self.newline_positions[-1] + 1 if self.newline_positions else 0
    for i in range(start, pos):
      if self.text[i] == '\n': self.newline_positions.append(i)


  def get_line_index(self, pos:int) -> int:
    text = self.text
    length = len(text)
    if not (0 <= pos <= length): raise IndexError(pos)
    self.update_line_positions(pos)
    if pos == length:
      newline_count = self.line_idx_start + len(self.newline_positions)
      return (newline_count - 1) if text.endswith('\n') else newline_count
      #^ Special case so that the end position does not get a line index beyond the last line.
    return self.line_idx_start + bisect_right(self.newline_positions, pos)


  def get_line_start(self, pos:int) -> int:
    'Return the character index for the start of the line containing `pos`.'
    text = self.text
    if pos == len(text) and text.endswith('\n'): pos -= 1
    return text.rfind('\n', 0, pos) + 1 # rfind returns -1 for no match, so just add one.


  def get_line_end(self, pos:int) -> int:
    '''
    Return the character index for the end of the line containing `pos`;
    a newline is considered the final character of a line.
    '''
    newline_pos = self.text.find('\n', pos)
    return len(self.text) if newline_pos == -1 else newline_pos + 1


  def diagnostic(self, *syntax_msgs:SyntaxMsg) -> str:
    return ''.join(self.diagnostic_for_syntax(syntax, msg) for syntax, msg in syntax_msgs)


  def diagnostic_for_syntax(self, syntax:Syntax, msg:str) -> str:
    slc = get_syntax_slc(syntax)
    pos = slc.start
    end = slc.stop
    line_idx = self.get_line_index(pos)
    line_pos = self.get_line_start(pos)
    line_end = self.get_line_end(pos)
    end = min(end, line_end) # Multiline spans are underlined only on their first line.
    line_str = self.text[line_pos:line_end]
    src_line = line_str[:-1] if line_str.endswith('\n') else line_str
    src_bar = '| ' if src_line else '|'

    under_chars = ['\t' if char == '\t' else ' ' for char in line_str[:(pos - line_pos)]]
    if pos >= end: under_chars.append('^')
    else: under_chars.extend('~' for _ in range(pos, end))
    underline = ''.join(under_chars)

    col = f'{pos-line_pos+1}-{end-line_pos+1}' if pos < end else str(pos-line_pos+1)
    name_colon = (self.name + ':') if self.name else ''
    msg_space = '' if (not msg or msg.startswith('\n')) else ' '
    return f'{name_colon}{line_idx+1}:{col}:{msg_space}{msg}\n{src_bar}{src_line}\n  {underline}\n'
