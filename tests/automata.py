from nfasim.automaton import NonDeterministicAutomaton, EPSILON


def make_nfa(states, sigma, start, final, transitions, epsilon=EPSILON):
  """
  :param list[str] states:
  :param str sigma:
  :param str|None start:
  :param list[str] final:
  :param list[tuple[str,str,list[str]]] transitions: (from, symbol, to_names)
  :rtype: NonDeterministicAutomaton
  """
  nfa = NonDeterministicAutomaton(epsilon=epsilon)
  for symbol in sigma:
    assert nfa.add_sigma(symbol)
  for name in states:
    assert nfa.add_state(name)
  if start is not None:
    assert nfa.set_start(start)
  for name in final:
    assert nfa.set_final(name)
  for from_name, symbol, to_names in transitions:
    assert nfa.add_transition(from_name, to_names, symbol)
  return nfa


def names(states):
  return {state.name for state in states}


def make_ends_with_ab_nfa():
  # (a|b)*ab with an epsilon detour through q3
  return make_nfa(
    ['q0', 'q1', 'q2', 'q3'], 'ab', 'q0', ['q2'], [
      ('q0', 'a', ['q0', 'q1']), ('q0', 'b', ['q0']), ('q1', 'b', ['q3']), ('q3', 'e', ['q2'])])
