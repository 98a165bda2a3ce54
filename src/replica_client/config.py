from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _strip_quotes(s: str) -> str:
    s = (s or "").strip()
    if len(s) >= 2 and ((s[0] == s[-1]) and s[0] in ("'", '"')):
        s = s[1:-1].strip()
    return s


def _env_files() -> tuple[str, str]:
    """
    Allow running the example from subdirectories (e.g. scripts/).
    A local .env wins over the repo-root .env.
    """
    repo_root_env = str(Path(__file__).resolve().parents[2] / ".env")
    return (".env", repo_root_env)


class ReplicaSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default="https://api.replicastudios.com", alias="REPLICA_BASE_URL")
    client_id: Optional[str] = Field(default=None, alias="REPLICA_CLIENT_ID")
    client_secret: Optional[str] = Field(default=None, alias="REPLICA_CLIENT_SECRET")
    timeout_seconds: float = Field(default=30, alias="REPLICA_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="REPLICA_LOG_LEVEL")

    @field_validator("client_id", "client_secret", mode="before")
    @classmethod
    def _normalize_credential(cls, v: object) -> Optional[str]:
        if v is None:
            return None
        s = _strip_quotes(str(v))
        return s or None

    @field_validator("base_url", mode="before")
    @classmethod
    def _normalize_base_url(cls, v: object) -> str:
        return _strip_quotes(str(v)).rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> str:
        return (_strip_quotes(str(v)) or "INFO").upper()

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)
