import networkx as nx
from pathlib import Path
from dataclasses import dataclass

from misnfa.automaton import DFA, MISNFA


@dataclass(frozen=True)
class AutomatonStats:
    number_of_states: int
    number_of_transitions: int
    set_of_labels: frozenset


def _edges(automaton: MISNFA | DFA):
    if isinstance(automaton, DFA):
        for (source, symbol), target in automaton.transitions.items():
            yield source, symbol, target
        return
    for (source, symbol), targets in automaton.transitions.items():
        for target in targets:
            yield source, symbol, target


def _start_states(automaton: MISNFA | DFA) -> frozenset[int]:
    if isinstance(automaton, DFA):
        return frozenset({automaton.initial_state})
    return automaton.initial_states


def automaton_to_networkx(automaton: MISNFA | DFA) -> nx.MultiDiGraph:
    graph = nx.MultiDiGraph()
    start_states = _start_states(automaton)
    for state in sorted(automaton.states | start_states):
        graph.add_node(
            state,
            is_start=state in start_states,
            is_final=state in automaton.final_states,
        )
    for source, symbol, target in _edges(automaton):
        graph.add_edge(source, target, label=symbol)
    return graph


def get_statistics(automaton: MISNFA | DFA) -> AutomatonStats:
    edges = list(_edges(automaton))
    number_of_states = len(automaton.states)
    number_of_transitions = len(edges)
    set_of_labels = frozenset(symbol for _, symbol, _ in edges)
    return AutomatonStats(number_of_states, number_of_transitions, set_of_labels)


def save_automaton_as_dot(automaton: MISNFA | DFA, path: Path):
    pdg = nx.drawing.nx_pydot.to_pydot(automaton_to_networkx(automaton))
    pdg.write_raw(path)
