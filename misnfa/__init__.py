from misnfa.automaton import (
    DFA,
    MISNFA,
    MalformedAutomatonError,
    dfa_to_misnfa,
    validate_dfa,
    validate_misnfa,
)
from misnfa.adjacency_matrix import AdjacencyMatrixNFA
from misnfa.complement import complement
from misnfa.determinize import determinize, subset_construction
from misnfa.matcher import accepts
from misnfa.prune import prune_useless
from misnfa.totalize import totalize

__all__ = [
    "DFA",
    "MISNFA",
    "MalformedAutomatonError",
    "AdjacencyMatrixNFA",
    "accepts",
    "complement",
    "determinize",
    "dfa_to_misnfa",
    "prune_useless",
    "subset_construction",
    "totalize",
    "validate_dfa",
    "validate_misnfa",
]
