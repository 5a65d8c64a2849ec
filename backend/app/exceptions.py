"""Domain errors raised by services and repositories."""


class RegistryError(Exception):
    """Base class for all registry errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistryError):
    """Client-supplied data violates one or more field or cross-field rules."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = list(errors or [])

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        return f"{self.message}. Failed validations: {', '.join(self.errors)}."


class ConflictError(RegistryError):
    """Data is valid on its own but conflicts with the current store state."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = list(errors or [])

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        return f"{self.message}. Conflicts: {', '.join(self.errors)}."


class NotFoundError(RegistryError):
    """A referenced id does not resolve."""


class FatalInconsistencyError(RegistryError):
    """Persisted data references an entity that no longer resolves.

    Never caused by the client; signals a corrupted earlier write.
    """
