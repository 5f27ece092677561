"""Domain-level exceptions.

Every failure that must reach the caller as an exception is a subclass of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.

Rejected products on a single add are *not* exceptions: they are reported
through the boolean / ``AddResult`` returned by the catalogue.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class BadBatchError(DomainException):
    """A batch request was rejected as a whole.

    Raised before any product of the batch is inserted, so the catalogue
    is left exactly as it was.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Bad Batch: {reason}")
        self.reason = reason
