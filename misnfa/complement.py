import logging

from misnfa.automaton import DFA, MISNFA, validate_misnfa
from misnfa.determinize import determinize
from misnfa.prune import prune_useless
from misnfa.totalize import totalize

logger = logging.getLogger(__name__)


def flip_final_states(dfa: DFA) -> DFA:
    return DFA(
        states=dfa.states,
        alphabet=dfa.alphabet,
        transitions=dfa.transitions,
        initial_state=dfa.initial_state,
        final_states=dfa.states - dfa.final_states,
    )


def complement(nfa: MISNFA, validate: bool = False) -> DFA:
    """Build a DFA accepting exactly the words over ``nfa.alphabet`` that
    ``nfa`` rejects.

    The DFA must be total before the final states are flipped, otherwise
    words falling off a missing transition would stay rejected.
    """
    if validate:
        validate_misnfa(nfa)

    dfa = prune_useless(flip_final_states(totalize(determinize(nfa))))

    logger.debug(
        "Complement has %d states, %d final", len(dfa.states), len(dfa.final_states)
    )
    return dfa
