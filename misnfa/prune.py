import logging
from collections import defaultdict, deque

from misnfa.automaton import DFA, State

logger = logging.getLogger(__name__)


def useful_states(dfa: DFA) -> frozenset[State]:
    predecessors: dict[State, set[State]] = defaultdict(set)
    for (source, _), target in dfa.transitions.items():
        predecessors[target].add(source)

    useful = set(dfa.final_states)
    queue = deque(dfa.final_states)
    while queue:
        state = queue.popleft()
        for source in predecessors[state]:
            if source not in useful:
                useful.add(source)
                queue.append(source)
    return frozenset(useful)


def prune_useless(dfa: DFA) -> DFA:
    """Drop every state from which no final state can be reached.

    The initial state always survives, so an automaton accepting nothing
    shrinks to a lone non-final initial state without transitions.
    """
    useful = useful_states(dfa)

    transitions = {
        (source, symbol): target
        for (source, symbol), target in dfa.transitions.items()
        if source in useful and target in useful
    }

    logger.debug(
        "Pruned %d of %d states", len(dfa.states - useful), len(dfa.states)
    )
    return DFA(
        states=useful | {dfa.initial_state},
        alphabet=dfa.alphabet,
        transitions=transitions,
        initial_state=dfa.initial_state,
        final_states=dfa.final_states & useful,
    )
