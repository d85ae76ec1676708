from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Hashable, Iterable, Mapping

State = int
Symbol = Hashable


class MalformedAutomatonError(ValueError):
    pass


@dataclass(frozen=True)
class MISNFA:
    """Nondeterministic automaton with a set of initial states."""

    states: frozenset[State]
    alphabet: frozenset[Symbol]
    transitions: Mapping[tuple[State, Symbol], frozenset[State]]
    initial_states: frozenset[State]
    final_states: frozenset[State] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "states", frozenset(self.states))
        object.__setattr__(self, "alphabet", frozenset(self.alphabet))
        object.__setattr__(
            self,
            "transitions",
            MappingProxyType(
                {
                    key: frozenset(targets)
                    for key, targets in self.transitions.items()
                    if targets
                }
            ),
        )
        object.__setattr__(self, "initial_states", frozenset(self.initial_states))
        object.__setattr__(self, "final_states", frozenset(self.final_states))

    def __hash__(self):
        return hash(
            (
                self.states,
                self.alphabet,
                frozenset(self.transitions.items()),
                self.initial_states,
                self.final_states,
            )
        )

    def targets(self, state: State, symbol: Symbol) -> frozenset[State]:
        return self.transitions.get((state, symbol), frozenset())


@dataclass(frozen=True)
class DFA:
    states: frozenset[State]
    alphabet: frozenset[Symbol]
    transitions: Mapping[tuple[State, Symbol], State]
    initial_state: State
    final_states: frozenset[State] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "states", frozenset(self.states))
        object.__setattr__(self, "alphabet", frozenset(self.alphabet))
        object.__setattr__(
            self, "transitions", MappingProxyType(dict(self.transitions))
        )
        object.__setattr__(self, "final_states", frozenset(self.final_states))

    def __hash__(self):
        return hash(
            (
                self.states,
                self.alphabet,
                frozenset(self.transitions.items()),
                self.initial_state,
                self.final_states,
            )
        )

    def is_total(self) -> bool:
        return all(
            (state, symbol) in self.transitions
            for state in self.states
            for symbol in self.alphabet
        )


def _check_declared(kind: str, subset: frozenset[State], states: frozenset[State]):
    undeclared = subset - states
    if undeclared:
        raise MalformedAutomatonError(
            f"{kind} states {sorted(undeclared)} are not declared"
        )


def _check_transitions(
    states: frozenset[State],
    alphabet: frozenset[Symbol],
    edges: Iterable[tuple[State, Symbol, State]],
):
    for source, symbol, target in edges:
        if source not in states:
            raise MalformedAutomatonError(
                f"transition source {source!r} is not a declared state"
            )
        if target not in states:
            raise MalformedAutomatonError(
                f"transition target {target!r} is not a declared state"
            )
        if symbol not in alphabet:
            raise MalformedAutomatonError(
                f"transition symbol {symbol!r} is not in the alphabet"
            )


def validate_misnfa(nfa: MISNFA):
    _check_declared("initial", nfa.initial_states, nfa.states)
    _check_declared("final", nfa.final_states, nfa.states)
    _check_transitions(
        nfa.states,
        nfa.alphabet,
        (
            (source, symbol, target)
            for (source, symbol), targets in nfa.transitions.items()
            for target in targets
        ),
    )


def validate_dfa(dfa: DFA):
    if dfa.initial_state not in dfa.states:
        raise MalformedAutomatonError(
            f"initial state {dfa.initial_state!r} is not declared"
        )
    _check_declared("final", dfa.final_states, dfa.states)
    _check_transitions(
        dfa.states,
        dfa.alphabet,
        (
            (source, symbol, target)
            for (source, symbol), target in dfa.transitions.items()
        ),
    )


def dfa_to_misnfa(dfa: DFA) -> MISNFA:
    return MISNFA(
        states=dfa.states,
        alphabet=dfa.alphabet,
        transitions={key: {target} for key, target in dfa.transitions.items()},
        initial_states={dfa.initial_state},
        final_states=dfa.final_states,
    )
