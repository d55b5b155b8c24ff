import logging
import os
from typing import List, Mapping, Optional


class ServiceConfig:
    """
    Central configuration object for the node service.
    Controls binding, storage and CORS.
    """

    def __init__(
        self,
        host: str = "0.0.0.0",
        port: int = 8080,
        storage_path: Optional[str] = "nodes.json",  # None → memory only
        cors_origins: Optional[List[str]] = None,
        log_level: str = "INFO",
    ):
        self.host = host
        self.port = port
        self.storage_path = storage_path or None
        self.cors_origins = cors_origins if cors_origins is not None else ["*"]
        self.log_level = log_level.upper()

        self._validate()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        env = os.environ if environ is None else environ

        port = env.get("PORT", "8080")
        try:
            port_number = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}")

        origins = [
            o.strip()
            for o in env.get("CORS_ALLOWED_ORIGINS", "*").split(",")
            if o.strip()
        ]

        return cls(
            host=env.get("HOST", "0.0.0.0"),
            port=port_number,
            storage_path=env.get("NODES_STORAGE_PATH", "nodes.json"),
            cors_origins=origins,
            log_level=env.get("LOG_LEVEL", "INFO"),
        )

    def _validate(self):
        if not self.host:
            raise ValueError("host must be a non-empty string")

        if not 1 <= self.port <= 65535:
            raise ValueError(f"Unsupported port: {self.port}")

        if not self.cors_origins:
            raise ValueError("At least one CORS origin is required")

        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unsupported log_level: {self.log_level}")
