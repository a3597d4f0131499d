import pytest
from pathlib import Path
from app.config import DEFAULT_SETTINGS
from app.settings_store import SettingsStore, UnknownSettingError, open_settings


def test_defaults_for_known_keys(store: SettingsStore) -> None:
    assert store.get("username") == ""
    assert store.get("memory") == "6"
    assert store.get("version") == ""


def test_missing_file_is_created_empty(settings_path: Path) -> None:
    store = SettingsStore(str(settings_path))
    assert not settings_path.exists()
    assert store.get("memory") == DEFAULT_SETTINGS["memory"]
    assert settings_path.exists()
    assert settings_path.read_text(encoding="utf-8") == ""


def test_missing_parent_directory_is_created(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "launcher.dat"
    store = SettingsStore(str(path))
    assert store.get("username") == ""
    assert path.exists()


def test_unknown_key_without_default(store: SettingsStore) -> None:
    with pytest.raises(UnknownSettingError):
        store.get("skin")


def test_unknown_key_is_a_key_error(store: SettingsStore) -> None:
    with pytest.raises(KeyError):
        store.get("skin")


def test_set_then_get(store: SettingsStore) -> None:
    store.get("username")
    store.set("username", "alice")
    assert store.get("username") == "alice"


def test_set_has_no_io(store: SettingsStore, settings_path: Path) -> None:
    store.set("username", "alice")
    assert not settings_path.exists()


def test_file_read_once(settings_path: Path) -> None:
    settings_path.write_text("username=alice\n", encoding="utf-8")
    store = SettingsStore(str(settings_path))
    assert store.get("username") == "alice"

    settings_path.write_text("username=bob\n", encoding="utf-8")
    assert store.get("username") == "alice"


def test_round_trip_through_fresh_store(store: SettingsStore, settings_path: Path) -> None:
    store.get("username")
    store.set("username", "alice")
    store.set("memory", "12")
    assert store.save() is True

    fresh = SettingsStore(str(settings_path))
    assert fresh.get("username") == "alice"
    assert fresh.get("memory") == "12"


def test_save_then_load_restores_map(store: SettingsStore) -> None:
    store.get("username")
    store.set("username", "steve")
    store.set("theme", "dark")
    expected = store.as_dict()

    store.save()
    store.load()

    assert store.as_dict() == expected


def test_save_overwrites_stale_entries(settings_path: Path) -> None:
    settings_path.write_text("username=old\nmemory=4\n", encoding="utf-8")
    store = SettingsStore(str(settings_path))
    store.load()
    store.set("username", "new")
    store.save()

    assert settings_path.read_text(encoding="utf-8").splitlines() == [
        "username=new",
        "memory=4",
    ]


def test_save_without_load_keeps_disk_entries(settings_path: Path) -> None:
    settings_path.write_text("version=1.8\nusername=old\n", encoding="utf-8")
    store = SettingsStore(str(settings_path))
    store.set("username", "new")
    store.save()

    fresh = SettingsStore(str(settings_path))
    assert fresh.get("username") == "new"
    assert fresh.get("version") == "1.8"


def test_unknown_keys_preserved(settings_path: Path) -> None:
    settings_path.write_text("server=play.example\nmemory=8\n", encoding="utf-8")
    store = SettingsStore(str(settings_path))
    store.get("memory")
    store.save()

    assert "server=play.example" in settings_path.read_text(encoding="utf-8").splitlines()


def test_malformed_lines_are_skipped(settings_path: Path) -> None:
    settings_path.write_text(
        "username=alice\nno delimiter here\nurl=a=b\n\nmemory=10\n",
        encoding="utf-8",
    )
    store = SettingsStore(str(settings_path))
    store.load()

    assert store.as_dict() == {"username": "alice", "memory": "10"}


def test_later_duplicates_win(settings_path: Path) -> None:
    settings_path.write_text("memory=4\nmemory=16\n", encoding="utf-8")
    store = SettingsStore(str(settings_path))
    assert store.get("memory") == "16"


def test_windows_line_endings(settings_path: Path) -> None:
    settings_path.write_bytes(b"username=alice\r\nmemory=8\r\n")
    store = SettingsStore(str(settings_path))
    assert store.get("username") == "alice"
    assert store.get("memory") == "8"


def test_empty_value_is_kept(settings_path: Path) -> None:
    settings_path.write_text("username=\n", encoding="utf-8")
    store = SettingsStore(str(settings_path))
    store.load()
    assert store.as_dict() == {"username": ""}


def test_unreadable_file_falls_back_to_defaults(settings_path: Path) -> None:
    settings_path.write_bytes(b"\xff\xfe\x00broken")
    store = SettingsStore(str(settings_path))
    assert store.get("memory") == "6"


def test_load_error_is_not_raised(tmp_path: Path) -> None:
    # A directory cannot be opened as a settings file
    store = SettingsStore(str(tmp_path))
    store.load()
    assert store.loaded
    assert store.get("username") == ""


def test_save_failure_returns_false(tmp_path: Path) -> None:
    store = SettingsStore(str(tmp_path))
    store.set("username", "alice")
    assert store.save() is False


def test_save_leaves_no_temporary_files(store: SettingsStore, tmp_path: Path) -> None:
    store.set("username", "alice")
    store.save()
    assert [path.name for path in tmp_path.iterdir()] == ["launcher.dat"]


def test_custom_defaults(settings_path: Path) -> None:
    store = SettingsStore(str(settings_path), defaults={"username": "player"})
    assert store.get("username") == "player"
    with pytest.raises(UnknownSettingError):
        store.get("memory")


def test_open_settings_uses_given_path(settings_path: Path) -> None:
    store = open_settings(str(settings_path))
    assert store.path == str(settings_path)
    assert not store.loaded
