"""Domain exceptions raised by the service and auth layers.

The HTTP layer translates each of these into a status code; nothing below
the routers knows about HTTP.
"""


class AccommodationServiceError(Exception):
    """Base class for all domain errors in this service."""

    pass


class AccommodationNotFoundError(AccommodationServiceError):
    """The accommodation does not exist or has been soft-deleted."""

    pass


class ForbiddenError(AccommodationServiceError):
    """The caller does not own the accommodation."""

    pass


class InvalidCapacityError(AccommodationServiceError):
    """Minimum guests exceeds maximum guests."""

    pass


class UnauthenticatedError(AccommodationServiceError):
    """Caller identity headers are missing or malformed."""

    pass


class RoleNotPermittedError(AccommodationServiceError):
    """The caller's role may not use this operation."""

    pass
