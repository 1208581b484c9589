from __future__ import annotations


class RouteModelError(Exception):
    """Base exception for failed route model operations."""

    default_message = "Route model operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @classmethod
    def from_cause(cls, cause: BaseException) -> "RouteModelError":
        # Keep the collaborator's message when it has one.
        return cls(str(cause) or None)


class InitializationError(RouteModelError):
    default_message = "Can't init route model"


class AddError(RouteModelError):
    default_message = "Can't add route point"


class UpdateError(RouteModelError):
    default_message = "Can't update route point"


class DeleteError(RouteModelError):
    default_message = "Can't delete route point"


class RouteApiError(Exception):
    """Raised by route API collaborators when the remote call fails."""
