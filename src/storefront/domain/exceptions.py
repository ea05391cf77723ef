"""Domain-level exceptions.

Every failure a storefront operation can report is a subclass of
DomainException, so callers (screens, the CLI) can catch them uniformly
and never see transport-specific error shapes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input or a violated invariant; recoverable locally."""


class AuthenticationRequiredError(ValidationError):
    """The operation needs a signed-in user and there is none."""


class NotFoundError(DomainException):
    """A referenced product, entry or order does not exist in the store."""


class OutOfStockError(NotFoundError):
    """The product exists but can no longer be purchased."""


class RemoteError(DomainException):
    """The backing store failed or could not be reached.

    Any optimistic local change tied to the failed call has already been
    rolled back when this is raised.  Retrying is the caller's decision.
    """


class RemoteTimeoutError(RemoteError):
    """The backing store did not answer within the configured timeout."""
