"""
Environment-driven settings for the stock display service.
"""

import os
from pathlib import Path
from typing import Optional

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Configuration loaded from environment variables:
    - REDIS_HOST / REDIS_PORT / REDIS_DB / REDIS_PASSWORD: cache connection
    - REDIS_URL: Celery broker and result backend
    - CACHE_ENABLED: connect to Redis on startup (default: true)
    - STOCK_CACHE_TTL: TTL for cached stock summaries in seconds (default: 60)
    - CATALOG_PATH: JSON catalog with products and inventory levels
    - PREWARM_INTERVAL_SECONDS: Celery beat interval for cache prewarming (default: 300)
    - LOG_LEVEL: root logging level (default: INFO)
    """

    def __init__(self):
        self.redis_host: str = os.getenv('REDIS_HOST', 'localhost')
        self.redis_port: int = int(os.getenv('REDIS_PORT', '6379'))
        self.redis_db: int = int(os.getenv('REDIS_DB', '0'))
        self.redis_password: Optional[str] = os.getenv('REDIS_PASSWORD') or None
        self.redis_url: str = os.getenv(
            'REDIS_URL', f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"
        )
        self.cache_enabled: bool = _env_flag('CACHE_ENABLED', 'true')
        self.stock_cache_ttl: int = int(os.getenv('STOCK_CACHE_TTL', '60'))
        self.catalog_path: Path = Path(os.getenv('CATALOG_PATH', str(DEFAULT_CATALOG_PATH)))
        self.prewarm_interval_seconds: float = float(os.getenv('PREWARM_INTERVAL_SECONDS', '300'))
        self.log_level: str = os.getenv('LOG_LEVEL', 'INFO').upper()


settings = Settings()
