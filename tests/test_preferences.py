# tests/test_preferences.py
import json

import pytest
from sqlalchemy import create_engine

from utils.db import check_db_connection, execute_query, execute_update
from utils.local_storage import LocalStorage
from utils.preferences import (
    PREFERENCES_KEY,
    NotificationSettings,
    UserPreferences,
    has_unsaved_changes,
    load_preferences,
    merge_preferences,
    parse_preferences,
    save_preferences,
)


@pytest.fixture
def storage(engine):
    return LocalStorage(engine)


class TestMerge:
    def test_defaults(self):
        prefs = UserPreferences()
        assert prefs.theme == "dark"
        assert prefs.refresh_interval == 30
        assert prefs.notifications.push_notifications
        assert not prefs.notifications.patrol_updates

    def test_partial_override(self):
        prefs = merge_preferences({'theme': 'light', 'notifications': {'patrolUpdates': True}})
        assert prefs.theme == "light"
        assert prefs.language == "en"
        assert prefs.notifications.patrol_updates
        assert prefs.notifications.motion_detection

    @pytest.mark.parametrize("raw", [
        {'theme': 'solarized'},
        {'language': 'fr'},
        {'autoRefresh': 'yes'},
        {'refreshInterval': 1},
        {'refreshInterval': True},
        {'mapDefaultZoom': 99},
        {'refreshInterval': float('inf')},
        {'mapDefaultZoom': float('nan')},
        {'refreshInterval': 10 ** 400},
        {'notifications': 'all'},
        {'unknownKey': 1},
    ])
    def test_invalid_values_keep_defaults(self, raw):
        assert merge_preferences(raw) == UserPreferences()

    def test_non_dict_is_ignored(self):
        assert merge_preferences(["dark"]) == UserPreferences()

    def test_round_trip(self):
        prefs = UserPreferences(theme="light", language="es", refresh_interval=60,
                                notifications=NotificationSettings(email_notifications=True))
        assert merge_preferences(prefs.to_dict()) == prefs

    def test_camel_case_keys(self):
        data = UserPreferences().to_dict()
        assert set(data) == {'theme', 'language', 'notifications', 'autoRefresh',
                             'refreshInterval', 'mapDefaultZoom', 'alertSound'}
        assert 'motionDetection' in data['notifications']


class TestParse:
    @pytest.mark.parametrize("raw_json", [
        None, "", "{not json", "null",
        '{"refreshInterval": Infinity}',
        '{"mapDefaultZoom": NaN}',
    ])
    def test_missing_or_malformed(self, raw_json):
        assert parse_preferences(raw_json) == UserPreferences()

    def test_valid(self):
        assert parse_preferences(json.dumps({'theme': 'light'})).theme == "light"


class TestLocalStorage:
    def test_get_missing(self, storage):
        assert storage.get_item("nothing") is None

    def test_set_get_replace_remove(self, storage):
        storage.set_item("k", "one")
        storage.set_item("k", "two")
        assert storage.get_item("k") == "two"
        assert storage.keys() == ["k"]
        assert storage.remove_item("k")
        assert storage.get_item("k") is None
        assert not storage.remove_item("k")

    def test_clear(self, storage):
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.clear()
        assert storage.keys() == []

    def test_persists_across_instances(self, engine):
        LocalStorage(engine).set_item("k", "v")
        assert LocalStorage(engine).get_item("k") == "v"


class TestPersistence:
    def test_load_without_saved_value(self, storage):
        assert load_preferences(storage) == UserPreferences()

    def test_save_and_load(self, storage):
        prefs = UserPreferences(theme="light", map_default_zoom=15)
        save_preferences(storage, prefs)
        assert json.loads(storage.get_item(PREFERENCES_KEY))['mapDefaultZoom'] == 15
        assert load_preferences(storage) == prefs

    def test_corrupt_blob_falls_back(self, storage):
        storage.set_item(PREFERENCES_KEY, "{broken")
        assert load_preferences(storage) == UserPreferences()

    def test_unsaved_changes(self, storage):
        prefs = UserPreferences(alert_sound=False)
        assert has_unsaved_changes(storage, prefs)
        save_preferences(storage, prefs)
        assert not has_unsaved_changes(storage, prefs)


class TestDbHelpers:
    def test_check_connection(self, engine):
        assert check_db_connection(engine) == (True, None)

    def test_query_helpers(self, storage, engine):
        assert execute_update(
            "INSERT INTO local_storage (item_key, item_value) VALUES (:k, :v)",
            {"k": "x", "v": "y"}, engine=engine
        ) == 1
        assert execute_query("SELECT item_value FROM local_storage", engine=engine) == [{"item_value": "y"}]

    def test_unreachable_storage(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}")
        ok, message = check_db_connection(engine)
        assert not ok
        assert message

    def test_reset_engine_builds_new_instance(self):
        from utils.db import get_db_engine, reset_db_engine

        first = get_db_engine()
        assert get_db_engine() is first
        reset_db_engine()
        try:
            assert get_db_engine() is not first
        finally:
            reset_db_engine()
