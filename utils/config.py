# utils/config.py
"""
Centralized Configuration Management

Version: 1.0.0
Features:
- Support both local (.env) and Streamlit Cloud (secrets.toml)
- Singleton pattern for efficiency
- Type-safe getters with defaults
- Environment detection
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from typing import Dict, Any, Optional
from dataclasses import dataclass

# Initialize logger
logger = logging.getLogger(__name__)

DEFAULT_STORAGE_URL = "sqlite:///local_storage.db"


def is_running_on_streamlit_cloud() -> bool:
    """Detect if running on Streamlit Cloud"""
    try:
        import streamlit as st
        return hasattr(st, 'secrets') and len(st.secrets) > 0
    except Exception:
        return False


def _as_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class StorageConfig:
    """Key/value storage configuration container"""
    url: str = DEFAULT_STORAGE_URL
    pool_size: int = 5
    pool_recycle: int = 3600

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'url': self.url,
            'pool_size': self.pool_size,
            'pool_recycle': self.pool_recycle
        }


@dataclass
class MapConfig:
    """Map provider configuration container"""
    access_token: Optional[str] = None
    style: str = "mapbox://styles/mapbox/dark-v11"

    def is_configured(self) -> bool:
        return bool(self.access_token)


@dataclass
class PaymentConfig:
    """Payment provider configuration container"""
    publishable_key: Optional[str] = None

    def is_configured(self) -> bool:
        return bool(self.publishable_key)


class Config:
    """
    Centralized configuration management

    Usage:
        from utils.config import config

        # Get storage config
        storage = config.get_storage_config()

        # Get app settings
        ttl = config.get_app_setting("CACHE_TTL_SECONDS", 300)

        # Check feature flags
        if config.is_feature_enabled("EXCEL_EXPORT"):
            ...
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.is_cloud = is_running_on_streamlit_cloud()
        self._load_config()
        self._initialized = True

    def _load_config(self):
        """Load configuration based on environment"""
        if self.is_cloud:
            self._load_cloud_config()
        else:
            self._load_local_config()

        self._load_app_config()
        self._log_config_status()

    def _load_cloud_config(self):
        """Load configuration from Streamlit Cloud secrets"""
        import streamlit as st

        storage_secrets = st.secrets.get("STORAGE", {})
        self._storage_config = StorageConfig(
            url=storage_secrets.get("URL", DEFAULT_STORAGE_URL),
            pool_size=int(storage_secrets.get("POOL_SIZE", 5)),
            pool_recycle=int(storage_secrets.get("POOL_RECYCLE", 3600))
        )

        api_secrets = st.secrets.get("API", {})
        self._map_config = MapConfig(
            access_token=api_secrets.get("MAPBOX_ACCESS_TOKEN")
        )
        self._payment_config = PaymentConfig(
            publishable_key=api_secrets.get("STRIPE_PUBLISHABLE_KEY")
        )

        logger.info("☁️ Running in STREAMLIT CLOUD")

    def _load_local_config(self):
        """Load configuration from local .env file"""
        env_paths = [
            Path.cwd() / ".env",
            Path(__file__).parent.parent / ".env",
        ]

        for env_path in env_paths:
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded .env from: {env_path}")
                break

        self._storage_config = StorageConfig(
            url=os.getenv("STORAGE_URL", DEFAULT_STORAGE_URL),
            pool_size=int(os.getenv("STORAGE_POOL_SIZE", "5")),
            pool_recycle=int(os.getenv("STORAGE_POOL_RECYCLE", "3600"))
        )

        self._map_config = MapConfig(
            access_token=os.getenv("MAPBOX_ACCESS_TOKEN")
        )
        self._payment_config = PaymentConfig(
            publishable_key=os.getenv("STRIPE_PUBLISHABLE_KEY")
        )

        logger.info("💻 Running in LOCAL environment")

    def _load_app_config(self):
        """Load application-specific settings"""
        self._app_config = {
            # Cache
            "CACHE_TTL_SECONDS": int(os.getenv("CACHE_TTL_SECONDS", "300")),

            # Dashboard defaults
            "DEFAULT_DISTRICT": os.getenv("DEFAULT_DISTRICT", "alajuelita"),
            "EXPORT_FILE_PREFIX": os.getenv("EXPORT_FILE_PREFIX", "alajuelita-kpis"),

            # Simulated advisory
            "PREDICTION_DELAY_SECONDS": float(os.getenv("PREDICTION_DELAY_SECONDS", "3")),

            # Catalog validation
            "STRICT_DISTRICT_REFERENCES": _as_bool(os.getenv("STRICT_DISTRICT_REFERENCES"), False),

            # Feature flags
            "ENABLE_EXCEL_EXPORT": _as_bool(os.getenv("ENABLE_EXCEL_EXPORT"), True),
            "ENABLE_DEBUG_MODE": _as_bool(os.getenv("ENABLE_DEBUG_MODE"), False),
        }

    def _log_config_status(self):
        """Log configuration status"""
        url = self._storage_config.url.split("@")[-1]
        logger.info(f"✅ Storage: {url}")
        logger.info(f"✅ Mapbox: {'Configured' if self._map_config.is_configured() else 'Not configured'}")
        logger.info(f"✅ Stripe: {'Configured' if self._payment_config.is_configured() else 'Not configured'}")

    # ==================== PUBLIC GETTERS ====================

    def get_storage_config(self) -> StorageConfig:
        """Get key/value storage configuration"""
        return self._storage_config

    def get_map_config(self) -> MapConfig:
        """Get map provider configuration"""
        return self._map_config

    def get_api_key(self, service: str) -> Optional[str]:
        """Get API key for specific service"""
        keys = {
            "mapbox": self._map_config.access_token,
            "stripe": self._payment_config.publishable_key,
        }
        return keys.get(service)

    def get_app_setting(self, key: str, default: Any = None) -> Any:
        """Get application setting with default"""
        return self._app_config.get(key, default)

    def is_feature_enabled(self, feature: str) -> bool:
        """Check if feature is enabled"""
        key = f"ENABLE_{feature.upper()}"
        return self._app_config.get(key, True)

    # ==================== PROPERTIES ====================

    @property
    def app_config(self) -> Dict[str, Any]:
        return self._app_config.copy()


# ==================== SINGLETON INSTANCE ====================

config = Config()

IS_RUNNING_ON_CLOUD = config.is_cloud
APP_CONFIG = config.app_config

__all__ = [
    'config',
    'Config',
    'StorageConfig',
    'MapConfig',
    'PaymentConfig',
    'IS_RUNNING_ON_CLOUD',
    'APP_CONFIG',
]
