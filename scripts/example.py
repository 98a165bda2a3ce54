#!/usr/bin/env python3
from __future__ import annotations

import argparse

from replica_client.client import ReplicaClient
from replica_client.config import ReplicaSettings
from replica_client.core.logging import configure_logging, get_logger
from replica_client.errors import ReplicaError
from replica_client.models import SpeechExtension


def main() -> int:
    parser = argparse.ArgumentParser(description="Authenticate, list voices and synthesize one sentence.")
    parser.add_argument("--text", default="This is just a test.", help="Text to synthesize")
    parser.add_argument(
        "--speaker-id",
        default="d6ad9af8-6361-4c44-a574-9c2b24e73dc2",
        help="Voice uuid to speak with",
    )
    parser.add_argument("--extension", default=SpeechExtension.MP3.value, help="wav, mp3, ogg or flac")
    parser.add_argument("--bit-rate", type=int, default=128)
    parser.add_argument("--sample-rate", type=int, default=44100)
    args = parser.parse_args()

    settings = ReplicaSettings()
    configure_logging(settings.log_level)
    log = get_logger(service="replica_example")

    if not settings.has_credentials:
        log.error("missing_credentials", hint="Set REPLICA_CLIENT_ID and REPLICA_CLIENT_SECRET in .env")
        return 2

    with ReplicaClient.from_settings(settings) as client:
        try:
            client.authenticate()
        except ReplicaError as e:
            log.error("auth_failed", error=type(e).__name__, detail=str(e))
            return 1
        print("Access Token : " + client.access_token)

        try:
            print(client.list_voices())
        except ReplicaError as e:
            log.error("voices_failed", error=type(e).__name__, detail=str(e))

        try:
            urls = client.synthesize_speech(
                args.text,
                args.speaker_id,
                bit_rate=args.bit_rate,
                sample_rate=args.sample_rate,
                extension=args.extension,
            )
        except ReplicaError as e:
            log.error("speech_failed", error=type(e).__name__, detail=str(e))
            return 1
        print(urls)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
