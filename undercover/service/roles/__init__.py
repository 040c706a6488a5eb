from .role_assigner import RoleAssigner, fisher_yates, validate_setup, validate_words
from .reveal_sequencer import RevealSequencer, RevealState

__all__ = [
    "RoleAssigner",
    "fisher_yates",
    "validate_setup",
    "validate_words",
    "RevealSequencer",
    "RevealState",
]
