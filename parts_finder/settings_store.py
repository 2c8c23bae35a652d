from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class AppSettings:
    theme_mode: str = "dark"
    language: str = "en"
    last_upload_dir: str = ""
    search_threshold: float = 0.4
    min_match_length: int = 2


def app_data_dir() -> Path:
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / "PartsFinder"
    return Path.home() / ".parts_finder"


def default_settings_path() -> Path:
    return app_data_dir() / "settings.json"


def default_log_dir() -> Path:
    return app_data_dir() / "logs"


def clamp_threshold(value: object) -> float:
    try:
        threshold = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.4
    return min(1.0, max(0.0, threshold))


def clamp_min_match_length(value: object) -> int:
    try:
        length = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 2
    return max(1, length)


def load_settings(settings_path: Path | None = None) -> AppSettings:
    path = settings_path or default_settings_path()
    if not path.exists():
        return AppSettings()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        theme_mode = str(payload.get("theme_mode", "dark")).lower()
        if theme_mode not in {"light", "dark"}:
            theme_mode = "dark"
        language = str(payload.get("language", "en")).lower()
        if language not in {"en", "nl"}:
            language = "en"
        last_upload_dir = str(payload.get("last_upload_dir", "") or "").strip()
        return AppSettings(
            theme_mode=theme_mode,
            language=language,
            last_upload_dir=last_upload_dir,
            search_threshold=clamp_threshold(payload.get("search_threshold", 0.4)),
            min_match_length=clamp_min_match_length(payload.get("min_match_length", 2)),
        )
    except Exception:
        return AppSettings()


def save_settings(settings: AppSettings, settings_path: Path | None = None) -> None:
    path = settings_path or default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    theme_mode = settings.theme_mode if settings.theme_mode in {"light", "dark"} else "dark"
    language = settings.language if settings.language in {"en", "nl"} else "en"
    payload = {
        "theme_mode": theme_mode,
        "language": language,
        "last_upload_dir": str(settings.last_upload_dir or ""),
        "search_threshold": clamp_threshold(settings.search_threshold),
        "min_match_length": clamp_min_match_length(settings.min_match_length),
    }
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
