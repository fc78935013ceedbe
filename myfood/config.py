from __future__ import annotations

import os
from pathlib import Path


class Settings:
    """Centralized configuration for the myfood client."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.api_base_url: str = os.environ.get(
            "MYFOOD_API_URL", "http://127.0.0.1:8080"
        ).rstrip("/")
        self.api_timeout: float = float(os.environ.get("MYFOOD_API_TIMEOUT", "10"))

        self.data_root: Path = Path(
            os.environ.get("MYFOOD_DATA_ROOT") or data_root_default
        ).expanduser()
        self.storage_path: Path = Path(
            os.environ.get("MYFOOD_STORAGE_PATH") or (self.data_root / "local_storage.db")
        ).expanduser()

        self.notification_key: str = os.environ.get("MYFOOD_NOTIFICATION_KEY") or "notifications"
        # Queued notifications older than this are dropped on replay.
        self.notification_ttl_ms: int = int(
            os.environ.get("MYFOOD_NOTIFICATION_TTL_MS") or "10000"
        )

        self.log_level: str = (os.environ.get("MYFOOD_LOG_LEVEL") or "WARNING").upper()


settings = Settings()
