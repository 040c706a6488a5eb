from .guess_judge import (
    ExactMatchJudge,
    RemoteGuessJudge,
    FallbackGuessJudge,
    build_guess_judge,
    exact_match,
)

__all__ = [
    "ExactMatchJudge",
    "RemoteGuessJudge",
    "FallbackGuessJudge",
    "build_guess_judge",
    "exact_match",
]
