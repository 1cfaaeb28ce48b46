# utils/__init__.py
"""
Shared Utilities Package for the Alajuelita dashboard

This package contains common utilities shared across all pages:
- config: Configuration management (local + Streamlit Cloud)
- db: Storage engine management
- local_storage: Key/value store backing persisted preferences
- preferences: UserPreferences model and persistence

Feature packages:
- kpi_analytics: KPI catalog, filters, metrics, charts and export
- district_overview: District stat cards and activity trends
- ai_advisory: Canned predictions, patrol optimizer, insights and mock alert feed
- maps: Mock heatmap, marker layers and vehicle routes
- cctv: Simulated camera registry and status grid

Usage:
    from utils import config, LocalStorage, load_preferences
    from utils.kpi_analytics import load_catalog, filter_kpis
"""

# Configuration
from .config import (
    config,
    Config,
    IS_RUNNING_ON_CLOUD,
    APP_CONFIG,
)

# Database
from .db import (
    get_db_engine,
    check_db_connection,
    reset_db_engine,
    get_transaction,
    execute_query,
    execute_update,
)

# Storage
from .local_storage import LocalStorage
from .preferences import (
    PREFERENCES_KEY,
    NotificationSettings,
    UserPreferences,
    merge_preferences,
    parse_preferences,
    load_preferences,
    save_preferences,
    has_unsaved_changes,
)

__all__ = [
    # Config
    'config',
    'Config',
    'IS_RUNNING_ON_CLOUD',
    'APP_CONFIG',

    # Database
    'get_db_engine',
    'check_db_connection',
    'reset_db_engine',
    'get_transaction',
    'execute_query',
    'execute_update',

    # Storage
    'LocalStorage',
    'PREFERENCES_KEY',
    'NotificationSettings',
    'UserPreferences',
    'merge_preferences',
    'parse_preferences',
    'load_preferences',
    'save_preferences',
    'has_unsaved_changes',
]

__version__ = '1.0.0'
