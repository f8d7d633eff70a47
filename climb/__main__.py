#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from sys import stdin
from typing import Iterator

from . import ClimbError
from .calc import evaluate, tree
from .io import errZ, outL
from .pair import Source


def main() -> None:
  arg_parser = ArgumentParser(prog='climb', description='Evaluate arithmetic expressions using precedence climbing.')
  arg_parser.add_argument('exprs', nargs='*', help='expressions to evaluate; if omitted, each line of stdin is evaluated.')
  arg_parser.add_argument('-tree', action='store_true', help='print the expression structure instead of its value.')
  arg_parser.add_argument('-dbg', action='store_true', help='print lexed pairs and operator reductions to stderr.')
  args = arg_parser.parse_args()

  ok = True
  for source in (arg_sources(args.exprs) if args.exprs else stdin_sources()):
    try:
      res = tree(source, dbg=args.dbg) if args.tree else evaluate(source, dbg=args.dbg)
    except ClimbError as e:
      errZ(e.diagnostic(source))
      ok = False
    else:
      outL(res)

  exit(0 if ok else 1)


def arg_sources(exprs:list[str]) -> Iterator[Source]:
  for i, expr in enumerate(exprs):
    yield Source(f'arg{i}', expr)


def stdin_sources() -> Iterator[Source]:
  for i, line in enumerate(stdin):
    if line.strip():
      yield Source('<stdin>', line, line_idx_start=i)


if __name__ == '__main__': main()
