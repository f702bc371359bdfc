from typing import List, Dict, Set, FrozenSet, Optional, Iterator, Iterable

from nfasim.errors import NoStartStateError
from nfasim.state import NFAState

"""
Default symbol for epsilon transitions. It is part of every alphabet.
"""
EPSILON = 'e'


class NonDeterministicAutomaton:
  """
  A NFA with epsilon transitions.

  The automaton is built incrementally by name (`add_state`, `add_transition`, ...).
  Builder methods report rejected definitions by returning False and leave the automaton unchanged.
  """

  def __init__(self, epsilon: str = EPSILON):
    self.epsilon = epsilon
    # dicts as insertion ordered sets, so that rendering is reproducible
    self._sigma: Dict[str, None] = {epsilon: None}
    self._states: Dict[str, NFAState] = {}
    self._final_states: Dict[NFAState, None] = {}
    self.start_state: Optional[NFAState] = None

  @property
  def states(self) -> List[NFAState]:
    return list(self._states.values())

  @property
  def final_states(self) -> Set[NFAState]:
    return set(self._final_states)

  def add_state(self, name: str) -> bool:
    if name in self._states:
      return False
    self._states[name] = NFAState(name)
    return True

  def set_start(self, name: str) -> bool:
    state = self.get_state(name)
    if state is None:
      return False
    self.start_state = state
    return True

  def set_final(self, name: str) -> bool:
    state = self.get_state(name)
    if state is None:
      return False
    self._final_states[state] = None
    return True

  def add_sigma(self, symbol: str) -> bool:
    """
    :returns: False if `symbol` is not a single char, as words are read char by char
    """
    if len(symbol) != 1:
      return False
    self._sigma[symbol] = None
    return True

  def get_sigma(self) -> Set[str]:
    """
    :returns: the alphabet, including the epsilon symbol
    """
    return set(self._sigma)

  def get_state(self, name: str) -> Optional[NFAState]:
    return self._states.get(name)

  def is_final(self, name: str) -> bool:
    state = self.get_state(name)
    return state is not None and state in self._final_states

  def is_start(self, name: str) -> bool:
    state = self.get_state(name)
    return state is not None and state is self.start_state

  def add_transition(self, from_name: str, to_names: Iterable[str], symbol: str) -> bool:
    """
    Adds an edge `from_name` -> `to_name` on `symbol` for every name in `to_names`.
    Nothing is added unless the source, all destinations and the symbol are known.
    """
    from_state = self.get_state(from_name)
    if from_state is None or symbol not in self._sigma:
      return False
    to_names = list(to_names)
    if any(to_name not in self._states for to_name in to_names):
      return False
    for to_name in to_names:
      from_state.add_transition(symbol, self._states[to_name])
    return True

  def get_to_state(self, state: NFAState, symbol: str) -> Set[NFAState]:
    return set(state.get_next_states(symbol))

  def e_closure(self, state: NFAState) -> Set[NFAState]:
    """
    Gets all states reachable from `state` only using epsilon transitions, including `state` itself.
    """
    state_set = set()
    to_add = [state]
    while len(to_add) >= 1:
      state = to_add.pop()
      assert isinstance(state, NFAState)
      if state in state_set:
        continue
      state_set.add(state)
      to_add.extend(state.get_next_states(self.epsilon))
    return state_set

  def _get_initial_frontier(self) -> FrozenSet[NFAState]:
    if self.start_state is None:
      raise NoStartStateError()
    return frozenset(self.e_closure(self.start_state))

  def _get_next_frontier(self, frontier: Iterable[NFAState], char: str) -> FrozenSet[NFAState]:
    """
    Does a single real move on `char` from all states in `frontier`, followed by the epsilon closure.
    """
    if char == self.epsilon:
      return frozenset()
    return frozenset(
      closed for state in frontier for next_state in state.get_next_states(char)
      for closed in self.e_closure(next_state))

  def iter_frontiers(self, word: str) -> Iterator[FrozenSet[NFAState]]:
    """
    Simulates the automaton on `word`.

    :returns: all sets of active states, starting with the epsilon closure of the start state,
      followed by one frontier per consumed char.
    :raises: NoStartStateError, already when called
    """
    return self._iter_next_frontiers(self._get_initial_frontier(), word)

  def _iter_next_frontiers(self, frontier: FrozenSet[NFAState], word: str) -> Iterator[FrozenSet[NFAState]]:
    yield frontier
    for char in word:
      frontier = self._get_next_frontier(frontier, char)
      yield frontier

  def accepts(self, word: str) -> bool:
    frontier = None
    for frontier in self.iter_frontiers(word):
      pass
    assert frontier is not None
    return any(state in self._final_states for state in frontier)

  def max_copies(self, word: str) -> int:
    """
    :returns: the maximum number of states active at the same time while reading `word`
    """
    return max(len(frontier) for frontier in self.iter_frontiers(word))

  def is_dfa(self) -> bool:
    """
    Whether this automaton is also deterministic:
    no epsilon transitions, and at most one next state for every state and symbol.
    """
    for state in self._states.values():
      if self.epsilon in state.get_symbols():
        return False
      if any(len(to_states) > 1 for to_states in state.transitions.values()):
        return False
    return True

  def _get_table_symbols(self) -> List[str]:
    # epsilon column is last
    return [symbol for symbol in self._sigma if symbol != self.epsilon] + [self.epsilon]

  def _format_state_set(self, states: Iterable[NFAState]) -> str:
    states = set(states)
    return '{%s}' % ','.join(state.name for state in self._states.values() if state in states)

  def __str__(self):
    symbols = self._get_table_symbols()
    lines = [
      'Q = { %s }' % ' '.join(self._states),
      'Sigma = { %s }' % ' '.join(symbols[:-1]),
      'delta =',
      '\t\t' + '\t'.join(symbols)]
    for name, state in self._states.items():
      lines.append('\t%s\t%s' % (
        name, '\t'.join(self._format_state_set(state.get_next_states(symbol)) for symbol in symbols)))
    lines.append('q0 = %s' % (self.start_state.name if self.start_state is not None else ''))
    lines.append('F = { %s }' % ' '.join(state.name for state in self._final_states))
    return '\n'.join(lines) + '\n'

  def __repr__(self):
    return 'NonDeterministicAutomaton[states=%r, start=%r]' % (
      list(self._states), None if self.start_state is None else self.start_state.name)
