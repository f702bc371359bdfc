from __future__ import annotations

from typing import List

import networkx as nx

from nfasim.automaton import NonDeterministicAutomaton


def make_transition_graph(nfa: NonDeterministicAutomaton) -> nx.MultiDiGraph:
  """
  :returns: graph with one node per state name and one edge per transition, labeled with its `symbol`.
  """
  graph = nx.MultiDiGraph()
  final_states = nfa.final_states
  for state in nfa.states:
    graph.add_node(state.name, start=state is nfa.start_state, final=state in final_states)
  for state in nfa.states:
    for symbol, to_states in state.transitions.items():
      for to_state in to_states:
        graph.add_edge(state.name, to_state.name, symbol=symbol)
  return graph


def get_unreachable_states(nfa: NonDeterministicAutomaton) -> List[str]:
  """
  :returns: names of all states that no path from the start state leads to, in insertion order.
    Without a start state, all states are unreachable.
  """
  graph = make_transition_graph(nfa)
  if nfa.start_state is None:
    reachable = set()
  else:
    reachable = nx.descendants(graph, nfa.start_state.name) | {nfa.start_state.name}
  return [state.name for state in nfa.states if state.name not in reachable]
