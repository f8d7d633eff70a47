# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Simple lexing using python regular expressions, producing pairs whose rule is the pattern name.
'''

import re
from typing import Container, Iterator, Pattern

from .pair import Pair, Source


class Lexer:
  '''
  Define a Lexer from an ordered dictionary of named regex patterns.
  Earlier patterns take priority over later ones that match at the same position.
  Text that no pattern matches is yielded as a pair with rule 'invalid'.
  Note: A zero-length match, e.g. r'^' causes an exception; otherwise the stream would never advance.
  '''

  class DefinitionError(Exception): pass

  def __init__(self, *, flags='', patterns:dict[str,str]) -> None:

    # Validate flags.
    for flag in flags:
      if flag not in 'aiLmsux':
        raise Lexer.DefinitionError(f'invalid global regex flag: {flag}')
    flags_pattern = f'(?{flags})' if flags else ''

    # Validate patterns.
    if not patterns: raise Lexer.DefinitionError('Lexer instance must define at least one pattern')
    self.patterns:dict[str,str] = {}
    for n, v in patterns.items():
      validate_name(n)
      if n == 'invalid':
        raise Lexer.DefinitionError(f'{n!r} pattern name collides with the invalid token name')
      if not isinstance(v, str):
        raise Lexer.DefinitionError(f'{n!r} pattern value must be a string; found {v!r}')
      pattern = f'{flags_pattern}(?P<{n}>{v})'
      try: r = re.compile(pattern) # Compile each expression by itself to improve error clarity.
      except re.error as e:
        raise Lexer.DefinitionError(f'{n!r} pattern is invalid: {pattern}') from e
      for group_name in r.groupindex:
        if group_name in patterns and group_name != n:
          raise Lexer.DefinitionError(f'{n!r} pattern contains a conflicting capture group name: {group_name!r}')
      self.patterns[n] = pattern

    self.kinds = frozenset(self.patterns)
    self.regex:Pattern = re.compile('|'.join(self.patterns.values()))


  def _lex_one(self, source:Source, pos:int, end:int) -> Pair[str]:
    m = self.regex.search(source.text, pos, end)
    if not m:
      return Pair(rule='invalid', slc=slice(pos, end))
    p, e = m.span()
    if pos < p:
      return Pair(rule='invalid', slc=slice(pos, p))
    if p == e:
      raise Lexer.DefinitionError(f'Zero-length patterns are disallowed.\n  kind: {m.lastgroup}; match: {m}')
    kind = m.lastgroup
    assert isinstance(kind, str)
    return Pair(rule=kind, slc=slice(p, e))


  def lex(self, source:Source, pos:int=0, end:int|None=None, drop:Container[str]=()) -> Iterator[Pair[str]]:
    if not isinstance(source, Source): raise TypeError(source)
    if end is None: end = len(source.text)
    return self._lex(source, pos=pos, end=end, drop=drop)


  def _lex(self, source:Source, pos:int, end:int, drop:Container[str]) -> Iterator[Pair[str]]:
    while pos < end:
      pair = self._lex_one(source, pos=pos, end=end)
      pos = pair.end
      if pair.rule not in drop:
        yield pair


def validate_name(name:str) -> str:
  if not valid_name_re.fullmatch(name):
    raise Lexer.DefinitionError(f'invalid name: {name!r}')
  return name


valid_name_re = re.compile(r'[A-Za-z_]\w*')
