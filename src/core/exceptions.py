"""
Custom exceptions.

Every rule rejection is a GameError carrying a `code`: the value-level outcome reported back to the caller.
RepositoryError is kept outside of that hierarchy, a failing database is not a game-rule rejection.
"""


class GameError(Exception):
    """Top-level exception for anything the caller did that the game does not accept."""

    code = "GAME_ERROR"


class InvalidRequestError(GameError):
    code = "INVALID_REQUEST"


class GameStateError(GameError):
    """Data describing a game cannot be interpreted (ex. an unknown state name)."""

    code = "INVALID_GAME_STATE"


class GameNotFoundError(GameError):
    code = "INVALID_GAME_ID"


class AlreadyJoinedError(GameError):
    code = "ALREADY_JOINED"


class InvalidPlayerError(GameError):
    code = "INVALID_PLAYER_ID"


class IncorrectTurnError(GameError):
    code = "INCORRECT_TURN"


class IllegalMoveError(GameError):
    code = "ILLEGAL_MOVE"


class RepositoryError(Exception):
    """The persistence layer could not complete the request."""

    code = "REPOSITORY_UNAVAILABLE"
