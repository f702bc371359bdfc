#!/usr/bin/env python3

"""
Main entry point: Build a NFA from the command line and simulate it on some words.
"""
import argparse
import sys
from typing import List, Optional, Tuple

import better_exchook

from nfasim.automaton import NonDeterministicAutomaton, EPSILON
from nfasim.errors import AutomatonError, DefinitionError, NoStartStateError
from nfasim.graph import get_unreachable_states


def split_names(names: str) -> List[str]:
  return [name for name in names.split(',') if name]


def parse_transition(transition: str) -> Tuple[str, str, List[str]]:
  """
  :param transition: of the form `from:symbol:to1,to2,...`
  :raises: DefinitionError
  """
  parts = transition.split(':')
  if len(parts) != 3 or not all(parts):
    raise DefinitionError('transition', transition, 'expected the form from:symbol:to[,to...]')
  from_name, symbol, to_names = parts
  return from_name, symbol, to_names.split(',')


def make_nfa(args: argparse.Namespace) -> NonDeterministicAutomaton:
  """
  :raises: AutomatonError
  """
  nfa = NonDeterministicAutomaton(epsilon=args.epsilon)
  for symbol in args.sigma:
    if not nfa.add_sigma(symbol):
      raise DefinitionError('symbol', symbol, 'symbols must be single chars')
  for name in args.states:
    if not nfa.add_state(name):
      raise DefinitionError('state', name, 'state already exists')
  if args.start is not None and not nfa.set_start(args.start):
    raise DefinitionError('start state', args.start, 'unknown state')
  for name in args.final:
    if not nfa.set_final(name):
      raise DefinitionError('final state', name, 'unknown state')
  for transition in args.transitions:
    from_name, symbol, to_names = parse_transition(transition)
    if not nfa.add_transition(from_name, to_names, symbol):
      raise DefinitionError('transition', transition, 'unknown state or symbol')
  return nfa


def make_arg_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(description='Simulate a NFA with epsilon transitions.')
  parser.add_argument('words', nargs='*', help='Words to simulate the automaton on')
  parser.add_argument('--states', type=split_names, default=[], help='Comma separated state names')
  parser.add_argument('--sigma', type=split_names, default=[], help='Comma separated alphabet symbols')
  parser.add_argument('--start', default=None, help='Start state')
  parser.add_argument('--final', type=split_names, default=[], help='Comma separated final states')
  parser.add_argument(
    '--transition', '-t', dest='transitions', action='append', default=[],
    help='Transition of the form from:symbol:to[,to...], can be repeated')
  parser.add_argument('--epsilon', default=EPSILON, help='Symbol used for epsilon transitions')
  parser.add_argument('--show', default=False, action='store_true', help='Print the transition table.')
  parser.add_argument(
    '--check', default=False, action='store_true', help='Report unreachable states and whether the NFA is a DFA.')
  parser.add_argument(
    '--verbose', dest='verbose', action='store_true', help='Print full stacktrace for all automaton errors.')
  return parser


def main(argv: Optional[List[str]] = None):
  """
  Main entry point.
  """
  better_exchook.install()
  args = make_arg_parser().parse_args(argv)

  try:
    nfa = make_nfa(args)
    if len(args.words) >= 1 and nfa.start_state is None:
      raise NoStartStateError()
  except AutomatonError as ae:
    if args.verbose:
      raise ae
    else:
      print('Error: %s' % ae)
      sys.exit(1)

  if args.show:
    print(nfa)
  if args.check:
    unreachable = get_unreachable_states(nfa)
    print('Unreachable states: %s' % (', '.join(unreachable) if unreachable else '(none)'))
    print('Is DFA: %s' % ('yes' if nfa.is_dfa() else 'no'))

  for word in args.words:
    print('%r: %s, max copies %i' % (
      word, 'accepted' if nfa.accepts(word) else 'rejected', nfa.max_copies(word)))


if __name__ == '__main__':
  main()
