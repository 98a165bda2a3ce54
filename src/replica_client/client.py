from __future__ import annotations

import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar, Union

import httpx

from replica_client.base import SpeechClient
from replica_client.config import ReplicaSettings
from replica_client.core.logging import get_logger
from replica_client.errors import (
    BadRequestError,
    MissingAuthorizationError,
    ResponseDecodeError,
    ResponseReadError,
    TransportError,
    UnauthorizedError,
    UnknownResponseError,
)
from replica_client.models import (
    CLIENT_ID,
    CLIENT_SECRET,
    AuthResult,
    MalformedBody,
    SpeechExtension,
    SpeechRequest,
    SpeechResult,
    Voice,
    parse_auth,
    parse_bad_request,
    parse_speech,
    parse_unauthorized,
    parse_voices,
)

AUTH_PATH = "/auth/"
VOICE_PATH = "/voice/"
SPEECH_PATH = "/speech/"

T = TypeVar("T")


class ReplicaClient(SpeechClient):
    """
    Synchronous client for the Replica Studios text-to-speech API.

    Call authenticate() first; the access token it stores is reused by
    list_voices() and synthesize_speech() until authenticate() runs again.
    Every call is a single request with no retries.
    """

    def __init__(
        self,
        *,
        base_url: str,
        client_id: str,
        client_secret: str,
        http_client: Optional[httpx.Client] = None,
        access_token: str = "",
        timeout_seconds: float = 30.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client_id = client_id
        self._client_secret = client_secret
        self._access_token = access_token or ""
        self._token_lock = threading.Lock()
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=float(timeout_seconds))
        self._log = get_logger(component="replica_client")

    @classmethod
    def from_settings(
        cls, settings: ReplicaSettings, *, http_client: Optional[httpx.Client] = None
    ) -> "ReplicaClient":
        return cls(
            base_url=settings.base_url,
            client_id=settings.client_id or "",
            client_secret=settings.client_secret or "",
            http_client=http_client,
            timeout_seconds=settings.timeout_seconds,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def access_token(self) -> str:
        with self._token_lock:
            return self._access_token

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ReplicaClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def authenticate(self) -> AuthResult:
        """
        POST the client credentials to /auth/ and store the returned access token.
        """
        form = {CLIENT_ID: self._client_id, CLIENT_SECRET: self._client_secret}
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Connection": "close",
        }
        resp = self._send("POST", AUTH_PATH, headers=headers, data=form)

        if resp.status_code == 200:
            result = self._decode(resp, dict, parse_auth)
            with self._token_lock:
                self._access_token = result.access_token
            self._log.info("authenticated", has_refresh_token=result.refresh_token is not None)
            return result
        if resp.status_code == 401:
            raise self._unauthorized(resp)
        raise self._unknown(resp)

    def get_voices(self) -> List[Voice]:
        """Voices available to this client, in the order the server lists them."""
        headers = self._auth_headers()
        resp = self._send("GET", VOICE_PATH, headers=headers)

        if resp.status_code == 200:
            voices = self._decode(resp, list, parse_voices)
            self._log.info("voices_listed", count=len(voices))
            return voices
        if resp.status_code == 401:
            raise self._unauthorized(resp)
        raise self._unknown(resp)

    def list_voices(self) -> Dict[str, str]:
        """Voice uuid -> display name, for every voice the server returns."""
        return {v.uuid: v.name for v in self.get_voices()}

    def get_speech(self, request: SpeechRequest) -> SpeechResult:
        headers = self._auth_headers()
        resp = self._send("GET", SPEECH_PATH, headers=headers, params=request.to_params())

        if resp.status_code == 200:
            result = self._decode(resp, dict, parse_speech)
            self._log.info("speech_ready", uuid=result.uuid, duration=result.duration, labels=sorted(result.urls))
            return result
        if resp.status_code == 400:
            bad = self._decode(resp, dict, parse_bad_request)
            self._log.warning("replica_bad_request", error_code=bad.error_code, error=bad.error)
            raise BadRequestError(error_code=bad.error_code, error=bad.error)
        if resp.status_code == 401:
            raise self._unauthorized(resp)
        raise self._unknown(resp)

    def synthesize_speech(
        self,
        text: str,
        speaker_id: str,
        bit_rate: int = 0,
        sample_rate: int = 0,
        extension: Union[SpeechExtension, str] = SpeechExtension.WAV,
    ) -> Dict[str, str]:
        """
        Request speech for `text` in the given voice and return label -> download URL.
        bit_rate / sample_rate are only sent when positive.
        """
        request = SpeechRequest(
            text=text,
            speaker_id=speaker_id,
            extension=extension,
            bit_rate=bit_rate,
            sample_rate=sample_rate,
        )
        return dict(self.get_speech(request).urls)

    def _auth_headers(self) -> Dict[str, str]:
        token = self.access_token
        if not token:
            raise MissingAuthorizationError()
        return {
            "Accept": "application/json",
            "Connection": "close",
            "Authorization": "Bearer %s" % token,
        }

    def _send(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str],
        params: Optional[Mapping[str, str]] = None,
        data: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        url = self._base_url + path
        self._log.debug("replica_request", method=method, path=path)
        try:
            with self._http.stream(method, url, headers=headers, params=params, data=data) as resp:
                try:
                    resp.read()
                except httpx.HTTPError as e:
                    raise ResponseReadError(
                        "failed to read response body: %s" % e, status_code=resp.status_code
                    ) from e
        except httpx.TransportError as e:
            raise TransportError("%s %s failed: %s" % (method, path, e)) from e
        self._log.debug("replica_response", method=method, path=path, status=resp.status_code)
        return resp

    def _decode(self, resp: httpx.Response, expected: Type[Any], parse: Callable[[Any], T]) -> T:
        """Decode the JSON body and build the typed result, or fail as a whole."""
        try:
            data = resp.json()
        except ValueError as e:
            raise ResponseDecodeError("invalid JSON body: %s" % e, status_code=resp.status_code) from e
        if not isinstance(data, expected):
            raise ResponseDecodeError(
                "expected JSON %s, got %s" % (expected.__name__, type(data).__name__),
                status_code=resp.status_code,
            )
        try:
            return parse(data)
        except MalformedBody as e:
            raise ResponseDecodeError(str(e), status_code=resp.status_code) from e

    def _unauthorized(self, resp: httpx.Response) -> UnauthorizedError:
        body = self._decode(resp, dict, parse_unauthorized)
        self._log.warning("replica_unauthorized", exception=body.exception, reasons=body.reasons)
        return UnauthorizedError(exception=body.exception, reasons=body.reasons)

    def _unknown(self, resp: httpx.Response) -> UnknownResponseError:
        self._log.warning("replica_unknown_response", status=resp.status_code)
        return UnknownResponseError(status_code=resp.status_code)
