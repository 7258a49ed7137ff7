class CollectionError(Exception):
    """Base class for errors raised by content collection operations."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(CollectionError):
    status_code = 404


class CapacityExceeded(CollectionError):
    status_code = 409


class ValidationFailure(CollectionError):
    status_code = 400
