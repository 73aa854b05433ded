"""
Error kinds raised by the service layer.

Every expected failure of an operation is one of three kinds.  The
HTTP layer renders them as ``{"error": <kind>, "detail": <reason>}``
with the status code carried by the class.
"""

from fastapi import status


class PetCareError(Exception):
    """Base class for expected, caller-visible operation failures."""

    kind = "Error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.reason}


class InvalidPayload(PetCareError):
    """A required field is missing, a format check failed or a value is not unique."""

    kind = "InvalidPayload"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(PetCareError):
    """A referenced entity does not exist, or a list query matched nothing."""

    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND


class Unauthorized(PetCareError):
    """Reserved for role enforcement; no operation raises it yet."""

    kind = "Unauthorized"
    status_code = status.HTTP_403_FORBIDDEN
