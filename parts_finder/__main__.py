from __future__ import annotations

import argparse
import logging

from .settings_store import AppSettings, default_log_dir, load_settings, save_settings
from .ui import run_ui
from . import __version__


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parts Finder - catalog search and quotation")
    parser.add_argument("--version", action="version", version=f"Parts Finder {__version__}")
    parser.add_argument("--theme", choices=["light", "dark"], default=None, help="Override the UI theme")
    parser.add_argument("--language", choices=["en", "nl"], default=None, help="Override the UI language")
    return parser.parse_args()


def configure_logging() -> None:
    log_dir = default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(log_dir / "parts_finder.log", encoding="utf-8"),
        ],
    )


def main() -> int:
    configure_logging()
    args = parse_args()
    settings = load_settings()
    if args.theme or args.language:
        settings = AppSettings(
            theme_mode=args.theme or settings.theme_mode,
            language=args.language or settings.language,
            last_upload_dir=settings.last_upload_dir,
            search_threshold=settings.search_threshold,
            min_match_length=settings.min_match_length,
        )
        save_settings(settings)
    return run_ui(settings)


if __name__ == "__main__":
    raise SystemExit(main())
