"""Runtime configuration, read from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

STORAGE_BACKENDS = ("memory", "json")


@dataclass(frozen=True)
class Settings:
    storage: str = "json"          # memory | json
    data_dir: Path = Path("data")  # where the JSON documents live
    log_level: str = "WARNING"
    host: str = "0.0.0.0"
    port: int = 8000
    ping_message: str = "ping"

    @staticmethod
    def from_env() -> Settings:
        storage = os.environ.get("STOCKROOM_STORAGE", "json").lower()
        if storage not in STORAGE_BACKENDS:
            raise ValueError(
                f"STOCKROOM_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, got {storage!r}"
            )
        return Settings(
            storage=storage,
            data_dir=Path(os.environ.get("STOCKROOM_DATA_DIR", "data")),
            log_level=os.environ.get("STOCKROOM_LOG_LEVEL", "WARNING").upper(),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", 8000)),
            ping_message=os.environ.get("PING_MESSAGE", "ping"),
        )
