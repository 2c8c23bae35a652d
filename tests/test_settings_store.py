from pathlib import Path

from parts_finder.settings_store import AppSettings, load_settings, save_settings


def test_settings_store_roundtrip(tmp_path: Path):
    settings_path = tmp_path / "settings.json"
    loaded = load_settings(settings_path=settings_path)
    assert loaded == AppSettings()
    assert loaded.theme_mode == "dark"
    assert loaded.search_threshold == 0.4

    save_settings(
        AppSettings(
            theme_mode="light",
            language="nl",
            last_upload_dir=str(tmp_path),
            search_threshold=0.25,
            min_match_length=3,
        ),
        settings_path=settings_path,
    )
    reloaded = load_settings(settings_path=settings_path)
    assert reloaded.theme_mode == "light"
    assert reloaded.language == "nl"
    assert reloaded.last_upload_dir == str(tmp_path)
    assert reloaded.search_threshold == 0.25
    assert reloaded.min_match_length == 3


def test_invalid_values_fall_back_or_clamp(tmp_path: Path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        '{"theme_mode": "neon", "language": "fr", "search_threshold": 4, "min_match_length": "x"}',
        encoding="utf-8",
    )
    loaded = load_settings(settings_path=settings_path)
    assert loaded.theme_mode == "dark"
    assert loaded.language == "en"
    assert loaded.search_threshold == 1.0
    assert loaded.min_match_length == 2


def test_corrupt_settings_file_gives_defaults(tmp_path: Path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{not json", encoding="utf-8")
    assert load_settings(settings_path=settings_path) == AppSettings()
