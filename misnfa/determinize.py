import logging
from collections import deque

from misnfa.automaton import DFA, MISNFA, State, Symbol

logger = logging.getLogger(__name__)


def move(nfa: MISNFA, frontier: frozenset[State], symbol: Symbol) -> frozenset[State]:
    result: set[State] = set()
    for state in frontier:
        result |= nfa.targets(state, symbol)
    return frozenset(result)


def subset_construction(nfa: MISNFA) -> tuple[DFA, list[frozenset[State]]]:
    """Determinize ``nfa`` starting from the set of all its initial states.

    Returns the DFA together with the arena of frontiers: ``frontiers[i]`` is
    the set of NFA states that DFA state ``i`` stands for. Only frontiers
    reachable from the initial one are built, so the DFA may be partial.
    """
    alphabet = sorted(nfa.alphabet)

    frontiers: list[frozenset[State]] = [nfa.initial_states]
    state_of: dict[frozenset[State], State] = {nfa.initial_states: 0}
    queue = deque([nfa.initial_states])

    transitions: dict[tuple[State, Symbol], State] = {}
    final_states: set[State] = set()

    while queue:
        frontier = queue.popleft()
        current = state_of[frontier]

        if frontier & nfa.final_states:
            final_states.add(current)

        for symbol in alphabet:
            target_frontier = move(nfa, frontier, symbol)
            if not target_frontier:
                continue
            if target_frontier not in state_of:
                state_of[target_frontier] = len(frontiers)
                frontiers.append(target_frontier)
                queue.append(target_frontier)
            transitions[(current, symbol)] = state_of[target_frontier]

    dfa = DFA(
        states=range(len(frontiers)),
        alphabet=nfa.alphabet,
        transitions=transitions,
        initial_state=0,
        final_states=final_states,
    )
    logger.debug(
        "Subset construction built %d states and %d transitions",
        len(dfa.states),
        len(dfa.transitions),
    )
    return dfa, frontiers


def determinize(nfa: MISNFA) -> DFA:
    dfa, _ = subset_construction(nfa)
    return dfa
