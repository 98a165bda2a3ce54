from replica_client.client import ReplicaClient
from replica_client.errors import (
    BadRequestError,
    MissingAuthorizationError,
    ReplicaError,
    ResponseDecodeError,
    ResponseReadError,
    TransportError,
    UnauthorizedError,
    UnknownResponseError,
)
from replica_client.models import AuthResult, SpeechExtension, SpeechRequest, SpeechResult, Voice

__all__ = [
    "AuthResult",
    "BadRequestError",
    "MissingAuthorizationError",
    "ReplicaClient",
    "ReplicaError",
    "ResponseDecodeError",
    "ResponseReadError",
    "SpeechExtension",
    "SpeechRequest",
    "SpeechResult",
    "TransportError",
    "UnauthorizedError",
    "UnknownResponseError",
    "Voice",
]
