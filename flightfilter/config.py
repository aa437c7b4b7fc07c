"""Configuration utilities.

Central place to load environment driven settings (filter defaults, data/report paths, etc.).
Avoids scattering os.getenv calls around the codebase.
"""

import os
from dataclasses import dataclass
from datetime import datetime, time
from pathlib import Path

from dotenv import load_dotenv

from .models import TimeArrow

# Load .env once on module import
load_dotenv()


def parse_time_of_day(value: str) -> time:
    """Parse 'HH:MM' into a time of day used as a ground-time threshold."""
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except ValueError:
        raise ValueError(f"Time of day '{value}' is not in HH:MM format") from None


def parse_worker_count(value: str) -> int:
    """Parse a thread count for the ground time filter, at least 1."""
    workers = int(value)
    if workers < 1:
        raise ValueError(f"Worker count must be at least 1, got {workers}")
    return workers


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


@dataclass(slots=True)
class Settings:
    ground_time_limit: time = parse_time_of_day(os.getenv("GROUND_TIME_LIMIT", "02:00"))
    time_arrow: TimeArrow = TimeArrow.parse(os.getenv("TIME_ARROW", "EARLIER_DEP_DATE"))
    filter_workers: int = parse_worker_count(os.getenv("FILTER_WORKERS", "4"))
    flights_json: Path | None = _optional_path(os.getenv("FLIGHTS_JSON"))
    output_html: Path = Path(os.getenv("OUTPUT_HTML", "flights_report.html"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
