"""Base Application Exception."""


class ApplicationError(Exception):
    """Base class for every application-layer error.

    `message` is exposed to clients by the HTTP error handlers.
    """

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)
