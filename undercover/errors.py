"""
Game errors raised by the engine and its services
"""


class UndercoverError(Exception):
    """Base class for every error the game engine raises"""


class ConfigurationError(UndercoverError, ValueError):
    """Role counts, player names or words that cannot make a valid match"""


class JudgeUnavailableError(UndercoverError):
    """The remote guess judge could not give an answer"""


class InvalidTransitionError(UndercoverError):
    """An operation was attempted outside the state that allows it"""

    def __init__(self, operation: str, state, detail: str = ""):
        self.operation = operation
        self.state = state
        message = f"Cannot {operation} while in state {getattr(state, 'name', state)}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
