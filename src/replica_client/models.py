from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

# Wire field names.
CLIENT_ID = "client_id"
CLIENT_SECRET = "secret"
UUID = "uuid"
NAME = "name"
TEXT = "txt"
SPEAKER_ID = "speaker_id"
EXTENSION = "extension"
BIT_RATE = "bit_rate"
SAMPLE_RATE = "sample_rate"


class SpeechExtension(str, Enum):
    WAV = "wav"
    MP3 = "mp3"
    OGG = "ogg"
    FLAC = "flac"


@dataclass(frozen=True)
class AuthResult:
    access_token: str
    refresh_token: Optional[str] = None


@dataclass(frozen=True)
class Voice:
    uuid: str
    name: str


@dataclass(frozen=True)
class SpeechRequest:
    text: str
    speaker_id: str
    # Unknown extensions are sent as-is; the server decides.
    extension: Union[SpeechExtension, str] = SpeechExtension.WAV
    bit_rate: int = 0
    sample_rate: int = 0

    def to_params(self) -> Dict[str, str]:
        ext = self.extension.value if isinstance(self.extension, SpeechExtension) else str(self.extension)
        params: Dict[str, str] = {
            TEXT: self.text,
            SPEAKER_ID: self.speaker_id,
            EXTENSION: ext,
        }
        if self.bit_rate > 0:
            params[BIT_RATE] = str(int(self.bit_rate))
        if self.sample_rate > 0:
            params[SAMPLE_RATE] = str(int(self.sample_rate))
        return params


@dataclass(frozen=True)
class SpeechResult:
    uuid: str
    quality: str
    duration: Optional[float]
    speaker_id: str
    text: str
    bit_rate: Optional[int]
    sample_rate: Optional[int]
    extension: str
    extensions: List[str] = field(default_factory=list)
    url: str = ""
    urls: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class UnauthorizedResponse:
    exception: str
    reasons: List[str]


@dataclass(frozen=True)
class BadRequestResponse:
    error_code: int
    error: str


class MalformedBody(ValueError):
    """A JSON body whose shape does not match what the endpoint defines."""


def parse_auth(data: Dict[str, Any]) -> AuthResult:
    refresh = data.get("refresh_token")
    return AuthResult(
        access_token=_to_str(data.get("access_token")),
        refresh_token=refresh if isinstance(refresh, str) and refresh else None,
    )


def parse_voices(items: List[Any]) -> List[Voice]:
    voices: List[Voice] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedBody("voice #%d is %s, not an object" % (i, type(item).__name__))
        voices.append(Voice(uuid=_to_str(item.get(UUID)), name=_to_str(item.get(NAME))))
    return voices


def parse_speech(data: Dict[str, Any]) -> SpeechResult:
    raw_urls = data.get("urls")
    if raw_urls is None:
        raw_urls = {}
    if not isinstance(raw_urls, dict):
        raise MalformedBody("urls is %s, not an object" % type(raw_urls).__name__)
    urls: Dict[str, str] = {}
    for k, v in raw_urls.items():
        if not isinstance(v, str):
            raise MalformedBody("urls[%r] is %s, not a string" % (k, type(v).__name__))
        urls[str(k)] = v

    raw_exts = data.get("extensions") or []
    extensions = [str(e) for e in raw_exts] if isinstance(raw_exts, list) else []

    return SpeechResult(
        uuid=_to_str(data.get(UUID)),
        quality=_to_str(data.get("quality")),
        duration=_to_float(data.get("duration")),
        speaker_id=_to_str(data.get(SPEAKER_ID)),
        text=_to_str(data.get(TEXT)),
        bit_rate=_to_int(data.get(BIT_RATE)),
        sample_rate=_to_int(data.get(SAMPLE_RATE)),
        extension=_to_str(data.get(EXTENSION)),
        extensions=extensions,
        url=_to_str(data.get("url")),
        urls=urls,
    )


def parse_unauthorized(data: Dict[str, Any]) -> UnauthorizedResponse:
    reasons = data.get("reasons")
    if reasons is None:
        reasons = []
    if not isinstance(reasons, list) or not all(isinstance(r, str) for r in reasons):
        raise MalformedBody("reasons must be a list of strings")
    return UnauthorizedResponse(exception=_to_str(data.get("exception")), reasons=list(reasons))


def parse_bad_request(data: Dict[str, Any]) -> BadRequestResponse:
    code = data.get("error_code", 0)
    if not isinstance(code, int) or isinstance(code, bool):
        raise MalformedBody("error_code is %s, not an integer" % type(code).__name__)
    return BadRequestResponse(error_code=code, error=_to_str(data.get("error")))


def _to_str(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def _to_float(value: object) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _to_int(value: object) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
