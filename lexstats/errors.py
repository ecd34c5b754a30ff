"""Exceptions raised by lexical statistics."""


class InvalidSizeError(ValueError):
    """Raised when a negative result size is requested.

    Ranking operations fail fast instead of guessing what a negative size means.
    """

    def __init__(self, size: int, context: str = ""):
        self.size = size
        self.context = context
        message = f"Invalid size: {size} (must be >= 0)"
        if context:
            message += f" in {context}"
        super().__init__(message)
