"""Exception types raised and reported by docgate."""

from typing import Optional


class DocgateError(Exception):
    """Base class for every docgate failure."""


class AdmissionInterrupted(DocgateError):
    """A blocked ``acquire()`` was cancelled before a slot freed up.

    Always propagates to the caller: retrying silently would either break
    the rate contract or hang forever.
    """


class SubmissionError(DocgateError):
    """A submission failed after admission (reported, never retried)."""

    code = "submission_failed"

    def __init__(self, message: str, *, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def to_dict(self) -> dict:
        """Error dict in the ``{"error", "message"}`` shape."""
        return {"error": self.code, "message": self.message}


class SerializationError(SubmissionError):
    """The request payload could not be turned into JSON."""

    code = "serialization_failed"


class TransportError(SubmissionError):
    """The POST to the registration endpoint failed."""

    code = "transport_failed"

    def __init__(self, message: str, *, code: Optional[str] = None,
                 status_code: Optional[int] = None) -> None:
        super().__init__(message, code=code)
        self.status_code = status_code
