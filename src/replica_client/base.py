from __future__ import annotations

from typing import Dict, Union

from replica_client.models import AuthResult, SpeechExtension


class SpeechClient:
    """
    Interface for a text-to-speech API client: authenticate, list voices, synthesize.
    """

    def authenticate(self) -> AuthResult:
        raise NotImplementedError

    def list_voices(self) -> Dict[str, str]:
        raise NotImplementedError

    def synthesize_speech(
        self,
        text: str,
        speaker_id: str,
        bit_rate: int = 0,
        sample_rate: int = 0,
        extension: Union[SpeechExtension, str] = SpeechExtension.WAV,
    ) -> Dict[str, str]:
        raise NotImplementedError
