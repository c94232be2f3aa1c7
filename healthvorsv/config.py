from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the HealthVorsv backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("HEALTHVORSV_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("HEALTHVORSV_DB_PATH") or (self.data_root / "healthvorsv.db")
        ).expanduser()
        self.busy_timeout_ms: int = int(os.environ.get("HEALTHVORSV_BUSY_TIMEOUT_MS") or "3000")

        # In production you MUST set HEALTHVORSV_JWT_SECRET. The dev secret keeps local
        # demos easy but is not safe for public deployments.
        self.jwt_secret: str = os.environ.get("HEALTHVORSV_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("HEALTHVORSV_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("HEALTHVORSV_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}

        # Calendar days (today / history buckets) are cut in this timezone.
        self.timezone: str = (os.environ.get("HEALTHVORSV_TIMEZONE") or "UTC").strip()

        self.frontend_dir: Path = Path(
            os.environ.get("HEALTHVORSV_FRONTEND_DIR") or (repo_root / "frontend" / "build")
        ).expanduser()
        self.host: str = os.environ.get("HEALTHVORSV_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("HEALTHVORSV_PORT") or "6969")
        self.log_level: str = (os.environ.get("HEALTHVORSV_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("HEALTHVORSV_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
