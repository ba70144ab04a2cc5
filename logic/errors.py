"""
Errors raised by the game logic.
"""


class InvalidMove(ValueError):
    """
    A move (or computer move request) was rejected.

    The game is left exactly as it was; the caller may try again.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class IllegalSelectorInvocation(RuntimeError):
    """The move selector was asked for a move on a finished board."""
