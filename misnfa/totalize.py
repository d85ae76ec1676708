import logging

from misnfa.automaton import DFA, State, Symbol

logger = logging.getLogger(__name__)


def totalize(dfa: DFA) -> DFA:
    """Complete the transition function with a non-final sink state.

    An already total DFA is returned as is.
    """
    if dfa.is_total():
        return dfa

    sink = max(dfa.states | {dfa.initial_state}) + 1
    states = dfa.states | {sink}

    transitions: dict[tuple[State, Symbol], State] = dict(dfa.transitions)
    for state in states:
        for symbol in dfa.alphabet:
            transitions.setdefault((state, symbol), sink)

    logger.debug(
        "Added sink state %d, %d transitions were missing",
        sink,
        len(transitions) - len(dfa.transitions),
    )
    return DFA(
        states=states,
        alphabet=dfa.alphabet,
        transitions=transitions,
        initial_state=dfa.initial_state,
        final_states=dfa.final_states,
    )
