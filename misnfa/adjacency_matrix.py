import numpy as np
import scipy as sp

from typing import Iterable

from misnfa.automaton import MISNFA, State, Symbol


class AdjacencyMatrixNFA:
    def __init__(self, nfa: MISNFA):
        referenced: set[State] = set(nfa.states | nfa.initial_states | nfa.final_states)
        for (source, _), targets in nfa.transitions.items():
            referenced.add(source)
            referenced |= targets

        self._states_indices: dict[State, int] = {
            st: i for (i, st) in enumerate(sorted(referenced))
        }
        self._states_amount: int = len(self._states_indices)
        self._start_states_indices: set[int] = set(
            self._states_indices[st] for st in nfa.initial_states
        )
        self._final_states_indices: set[int] = set(
            self._states_indices[st] for st in nfa.final_states
        )

        self._matrix_size: tuple[int, int] = (self._states_amount, self._states_amount)
        coordinates: dict[Symbol, tuple[list[int], list[int]]] = {}
        for (source, symbol), targets in nfa.transitions.items():
            rows, cols = coordinates.setdefault(symbol, ([], []))
            for target in targets:
                rows.append(self._states_indices[source])
                cols.append(self._states_indices[target])

        self._boolean_decomposition: dict[Symbol, sp.sparse.csc_matrix] = {
            symbol: sp.sparse.csc_matrix(
                (np.ones(len(rows), dtype=bool), (rows, cols)),
                shape=self._matrix_size,
                dtype=bool,
            )
            for symbol, (rows, cols) in coordinates.items()
        }

    @property
    def boolean_decomposition(self) -> dict[Symbol, sp.sparse.csc_matrix]:
        return self._boolean_decomposition

    @property
    def states_amount(self) -> int:
        return self._states_amount

    @property
    def states_indices(self) -> dict[State, int]:
        return self._states_indices

    @property
    def start_configuration(self) -> np.ndarray:
        start_config = np.zeros(self._states_amount, dtype=bool)
        for start_state_index in self._start_states_indices:
            start_config[start_state_index] = True
        return start_config

    @property
    def final_configuration(self) -> np.ndarray:
        final_config = np.zeros(self._states_amount, dtype=bool)
        for final_state_index in self._final_states_indices:
            final_config[final_state_index] = True
        return final_config

    def accepts(self, word: Iterable[Symbol]) -> bool:
        current_config = self.start_configuration

        for symbol in word:
            if symbol not in self._boolean_decomposition:
                return False
            matrix = self._boolean_decomposition[symbol]
            current_config = current_config @ matrix.toarray()
        return bool(np.any(current_config & self.final_configuration))

    def reachable_configuration(self) -> np.ndarray:
        reachable = self.start_configuration
        front = reachable
        while front.any():
            step = np.zeros(self._states_amount, dtype=bool)
            for matrix in self._boolean_decomposition.values():
                step |= front @ matrix.toarray()
            front = step & ~reachable
            reachable = reachable | front
        return reachable

    def is_empty(self) -> bool:
        return not np.any(self.reachable_configuration() & self.final_configuration)
