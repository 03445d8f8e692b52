"""Domain-level exceptions."""


class DataAccessError(Exception):
    """Raised when a repository operation fails at the storage level."""

    def __init__(self, message: str = "Data access failed"):
        super().__init__(message)
        self.message = message


class ControlError(Exception):
    """Raised when a user action violates an ordering rule."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
