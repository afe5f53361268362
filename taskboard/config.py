# taskboard/config.py

import os
from dataclasses import dataclass, field

TRUTHY = ("1", "true", "yes", "on")


def _parse_port(raw):
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None


def _split_origins(raw):
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass
class Config:
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list = field(default_factory=lambda: ["*"])
    testing: bool = False

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("HOST", "127.0.0.1"),
            port=_parse_port(env.get("PORT", 3000)),
            debug=env.get("FLASK_DEBUG", "").lower() in TRUTHY,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            cors_origins=_split_origins(env.get("CORS_ORIGINS", "*")),
        )
