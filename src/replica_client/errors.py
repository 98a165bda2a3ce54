from __future__ import annotations

from typing import List, Optional

MISSING_TOKEN_MESSAGE = "authorization token is missing, make sure you get permission first"


class ReplicaError(Exception):
    """
    Base class for every failure raised by the Replica client.
    """


class TransportError(ReplicaError):
    """The request never produced a response (DNS, connect, TLS, timeout...)."""


class ResponseReadError(ReplicaError):
    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseDecodeError(ReplicaError):
    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnauthorizedError(ReplicaError):
    status_code = 401

    def __init__(self, *, exception: str, reasons: Optional[List[str]] = None) -> None:
        self.exception = exception
        self.reasons = list(reasons or [])
        super().__init__("%s : %s" % (exception, "; ".join(self.reasons)))


class BadRequestError(ReplicaError):
    status_code = 400

    def __init__(self, *, error_code: int, error: str) -> None:
        self.error_code = error_code
        self.error = error
        super().__init__("%d : %s" % (error_code, error))


class MissingAuthorizationError(ReplicaError):
    def __init__(self) -> None:
        super().__init__(MISSING_TOKEN_MESSAGE)


class UnknownResponseError(ReplicaError):
    def __init__(self, *, status_code: int) -> None:
        super().__init__("unknown response")
        self.status_code = status_code
