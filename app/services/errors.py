class DomainError(Exception):
    """Base class for failures the API reports back to the caller."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    status_code = 404

    def __init__(self, resource: str, resource_id):
        super().__init__(f"{resource} with id {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class InvalidInputError(DomainError):
    status_code = 400

    def __init__(self, message="Invalid input", errors=None):
        super().__init__(message)
        self.errors = errors or []


class InvalidStateError(DomainError):
    status_code = 409


__all__ = [
    "DomainError",
    "NotFoundError",
    "InvalidInputError",
    "InvalidStateError",
]
