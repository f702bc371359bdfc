from typing import Dict, Set, FrozenSet


class NFAState:
  """
  A named state of a NFA, storing its outgoing transitions.
  States hash by identity, names are only unique within the automaton that owns them.
  """

  def __init__(self, name: str):
    self._name = name
    self.transitions: Dict[str, Set['NFAState']] = {}

  @property
  def name(self) -> str:
    return self._name

  def add_transition(self, symbol: str, to_state: 'NFAState'):
    self.transitions.setdefault(symbol, set()).add(to_state)

  def get_next_states(self, symbol: str) -> FrozenSet['NFAState']:
    """
    :returns: all states directly reachable on `symbol`, empty if there is no such transition
    """
    return frozenset(self.transitions.get(symbol, ()))

  def get_symbols(self) -> Set[str]:
    return {symbol for symbol, to_states in self.transitions.items() if len(to_states) >= 1}

  def __repr__(self):
    return 'NFAState[%r]' % self._name

  def __str__(self):
    return self._name
