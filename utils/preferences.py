# utils/preferences.py
"""
User Preferences

Closed, typed preference record persisted as a JSON blob under the
`userPreferences` storage key. Loading merges the stored blob onto the
defaults field by field; malformed or mistyped values fall back to defaults.
"""

import json
import logging
import math
from dataclasses import dataclass, field, asdict, fields
from typing import Any, Dict, Optional

from .local_storage import LocalStorage

logger = logging.getLogger(__name__)

PREFERENCES_KEY = "userPreferences"

THEMES = ('light', 'dark')
LANGUAGES = ('en', 'es')

# camelCase names used in the stored JSON blob
_NOTIFICATION_KEYS = {
    'motion_detection': 'motionDetection',
    'crime_alerts': 'crimeAlerts',
    'patrol_updates': 'patrolUpdates',
    'system_maintenance': 'systemMaintenance',
    'email_notifications': 'emailNotifications',
    'push_notifications': 'pushNotifications',
}

REFRESH_INTERVAL_RANGE = (5, 300)
MAP_ZOOM_RANGE = (1, 20)


@dataclass(frozen=True)
class NotificationSettings:
    motion_detection: bool = True
    crime_alerts: bool = True
    patrol_updates: bool = False
    system_maintenance: bool = True
    email_notifications: bool = False
    push_notifications: bool = True

    def to_dict(self) -> Dict[str, bool]:
        return {_NOTIFICATION_KEYS[k]: v for k, v in asdict(self).items()}


@dataclass(frozen=True)
class UserPreferences:
    theme: str = 'dark'
    language: str = 'en'
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    auto_refresh: bool = True
    refresh_interval: int = 30
    map_default_zoom: int = 12
    alert_sound: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'theme': self.theme,
            'language': self.language,
            'notifications': self.notifications.to_dict(),
            'autoRefresh': self.auto_refresh,
            'refreshInterval': self.refresh_interval,
            'mapDefaultZoom': self.map_default_zoom,
            'alertSound': self.alert_sound,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


# =============================================================================
# MERGE ON LOAD
# =============================================================================

def _pick_bool(raw: Dict, key: str, default: bool) -> bool:
    value = raw.get(key, default)
    return value if isinstance(value, bool) else default


def _pick_choice(raw: Dict, key: str, choices: tuple, default: str) -> str:
    value = raw.get(key, default)
    return value if value in choices else default


def _pick_int(raw: Dict, key: str, bounds: tuple, default: int) -> int:
    value = raw.get(key, default)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    value = int(value)
    low, high = bounds
    return value if low <= value <= high else default


def merge_preferences(raw: Any, base: UserPreferences = None) -> UserPreferences:
    """
    Merge a decoded JSON value onto `base` (defaults when omitted).

    Unknown keys are dropped; values of the wrong type or outside the
    allowed set keep the base value.
    """
    base = base or UserPreferences()
    if not isinstance(raw, dict):
        return base

    raw_notifications = raw.get('notifications')
    if not isinstance(raw_notifications, dict):
        raw_notifications = {}

    notifications = NotificationSettings(**{
        f.name: _pick_bool(
            raw_notifications,
            _NOTIFICATION_KEYS[f.name],
            getattr(base.notifications, f.name)
        )
        for f in fields(NotificationSettings)
    })

    return UserPreferences(
        theme=_pick_choice(raw, 'theme', THEMES, base.theme),
        language=_pick_choice(raw, 'language', LANGUAGES, base.language),
        notifications=notifications,
        auto_refresh=_pick_bool(raw, 'autoRefresh', base.auto_refresh),
        refresh_interval=_pick_int(raw, 'refreshInterval', REFRESH_INTERVAL_RANGE, base.refresh_interval),
        map_default_zoom=_pick_int(raw, 'mapDefaultZoom', MAP_ZOOM_RANGE, base.map_default_zoom),
        alert_sound=_pick_bool(raw, 'alertSound', base.alert_sound),
    )


def parse_preferences(raw_json: Optional[str]) -> UserPreferences:
    """Decode a stored blob; missing or malformed JSON yields defaults."""
    if not raw_json:
        return UserPreferences()

    try:
        return merge_preferences(json.loads(raw_json))
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning(f"Failed to parse saved preferences, using defaults: {e}")
        return UserPreferences()


# =============================================================================
# STORAGE
# =============================================================================

def load_preferences(storage: LocalStorage) -> UserPreferences:
    return parse_preferences(storage.get_item(PREFERENCES_KEY))


def save_preferences(storage: LocalStorage, preferences: UserPreferences):
    storage.set_item(PREFERENCES_KEY, preferences.to_json())
    logger.info("💾 User preferences saved")


def has_unsaved_changes(storage: LocalStorage, preferences: UserPreferences) -> bool:
    """Compare against the stored blob, or against defaults when nothing is stored."""
    return load_preferences(storage) != preferences
