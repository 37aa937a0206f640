import os
from dataclasses import dataclass

from .generator import Mode


DEFAULT_MODE = Mode.QUADS
DEFAULT_SIZE = 64
DEFAULT_TTL_SECONDS = 60
DEFAULT_MAX_TOKEN_LENGTH = 0
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000

# Upper bound for the CLI digit count
MAX_DIGITS = 1_000_000


@dataclass(frozen=True)
class Settings:
    mode: Mode = DEFAULT_MODE
    size: int = DEFAULT_SIZE
    ttl_seconds: int = DEFAULT_TTL_SECONDS
    max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH
    log_level: str = DEFAULT_LOG_LEVEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        settings = cls(
            mode=Mode(env.get("FACTORCAP_MODE", DEFAULT_MODE.value).lower()),
            size=int(env.get("FACTORCAP_SIZE", DEFAULT_SIZE)),
            ttl_seconds=int(env.get("FACTORCAP_TTL_SECONDS", DEFAULT_TTL_SECONDS)),
            max_token_length=int(env.get("FACTORCAP_MAX_TOKEN_LENGTH",
                                         DEFAULT_MAX_TOKEN_LENGTH)),
            log_level=env.get("FACTORCAP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            host=env.get("FACTORCAP_HOST", DEFAULT_HOST),
            port=int(env.get("FACTORCAP_PORT", DEFAULT_PORT)),
        )
        if settings.size <= 0:
            raise ValueError(f"FACTORCAP_SIZE must be positive, got {settings.size}")
        if settings.ttl_seconds <= 0:
            raise ValueError("FACTORCAP_TTL_SECONDS must be positive")
        if settings.max_token_length < 0:
            raise ValueError("FACTORCAP_MAX_TOKEN_LENGTH must not be negative")
        return settings
