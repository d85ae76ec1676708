from typing import Iterable

from misnfa.automaton import DFA, Symbol


def accepts(dfa: DFA, word: Iterable[Symbol]) -> bool:
    current = dfa.initial_state
    for symbol in word:
        key = (current, symbol)
        if key not in dfa.transitions:
            return False
        current = dfa.transitions[key]
    return current in dfa.final_states
