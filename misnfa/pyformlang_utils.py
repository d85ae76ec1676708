from pyformlang.finite_automaton import (
    DeterministicFiniteAutomaton,
    EpsilonNFA,
    NondeterministicFiniteAutomaton as NFA,
    State,
    Symbol,
)

from misnfa.automaton import DFA, MISNFA


def misnfa_to_pyformlang(nfa: MISNFA) -> NFA:
    result = NFA()
    for (source, symbol), targets in nfa.transitions.items():
        for target in targets:
            result.add_transition(State(source), Symbol(symbol), State(target))
    for state in nfa.initial_states:
        result.add_start_state(State(state))
    for state in nfa.final_states:
        result.add_final_state(State(state))
    return result


def dfa_to_pyformlang(dfa: DFA) -> DeterministicFiniteAutomaton:
    result = DeterministicFiniteAutomaton()
    for (source, symbol), target in dfa.transitions.items():
        result.add_transition(State(source), Symbol(symbol), State(target))
    result.add_start_state(State(dfa.initial_state))
    for state in dfa.final_states:
        result.add_final_state(State(state))
    return result


def misnfa_from_pyformlang(automaton: EpsilonNFA) -> MISNFA:
    nfa: NFA = automaton.remove_epsilon_transitions()
    graph = nfa.to_networkx()

    start_values = {state.value for state in nfa.start_states}
    final_values = {state.value for state in nfa.final_states}
    all_values = {state.value for state in nfa.states} | start_values | final_values
    states_indices = {
        value: i for (i, value) in enumerate(sorted(all_values, key=str))
    }

    transitions: dict[tuple[int, object], set[int]] = {}
    for u, v, label in graph.edges(data="label"):
        if label is None:
            continue
        transitions.setdefault((states_indices[u], label), set()).add(
            states_indices[v]
        )

    return MISNFA(
        states=states_indices.values(),
        alphabet={symbol.value for symbol in nfa.symbols},
        transitions=transitions,
        initial_states={states_indices[value] for value in start_values},
        final_states={states_indices[value] for value in final_values},
    )
