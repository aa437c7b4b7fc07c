"""High-level orchestration: load flights, run the three filters, report the results.

Usage patterns:

1. Built-in demo itineraries, console listing only:
   run_pipeline()

2. Flights from a JSON file plus an HTML report:
   run_pipeline(data_path=Path("flights.json"), html_path=Path("flights_report.html"))
"""
import argparse
import logging
from datetime import datetime, time
from pathlib import Path
from typing import Sequence

from flightfilter.config import parse_time_of_day, parse_worker_count, settings
from flightfilter.loader import load_flights
from flightfilter.logging_config import setup_logging
from flightfilter.models import Flight, TimeArrow
from flightfilter.processing.flight_filter import FlightFilter
from flightfilter.report import FilterTask, format_tasks, render_html
from flightfilter.sample_data import create_flights


def _load_flights(data_path: Path | None) -> list[Flight]:
    if data_path is None:
        logging.info("No flights file given, using built-in sample flights")
        return create_flights()
    if not data_path.exists():
        raise FileNotFoundError(f"Flights file {data_path} not found.")
    return load_flights(data_path)


def run_pipeline(
        direction: TimeArrow = settings.time_arrow,
        reference_time: datetime | None = None,
        ground_limit: time = settings.ground_time_limit,
        data_path: Path | None = settings.flights_json,
        workers: int = settings.filter_workers,
        html_path: Path | None = None,
        show_progress: bool = False,
) -> list[FilterTask]:
    if reference_time is None:
        reference_time = datetime.now()
    flights = _load_flights(data_path)
    flight_filter = FlightFilter(flights, workers=workers, show_progress=show_progress)

    logging.info(f"Filtering {len(flights)} flights ({direction.name} vs {reference_time:%Y-%m-%d %H:%M}, "
                 f"ground time under {ground_limit:%H:%M})")
    tasks = [
        FilterTask(
            f"Flights filtered by {direction.name} relative to {reference_time:%Y-%m-%d %H:%M}",
            tuple(flight_filter.filter_for(direction, reference_time)),
        ),
        FilterTask(
            "Flights without segments arriving before they depart",
            tuple(flight_filter.filter_incorrect_dates()),
        ),
        FilterTask(
            f"Flights with less than {ground_limit:%H:%M} on the ground",
            flight_filter.filter_summary_time_more_than(ground_limit),
        ),
    ]
    print(format_tasks(tasks))

    if html_path is not None:
        html_path.write_text(render_html(tasks), encoding="utf-8")
        logging.info(f"HTML report written to {html_path}")
    return tasks


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Flight itinerary filters")
    p.add_argument("--data", type=Path, default=settings.flights_json,
                   help="JSON file with flights (built-in sample flights when omitted)")
    p.add_argument("--direction", type=TimeArrow.parse, default=settings.time_arrow,
                   help=f"Time arrow, one of {[a.name for a in TimeArrow]}")
    p.add_argument("--reference", type=datetime.fromisoformat, default=None,
                   help="Reference time in ISO format (default: now)")
    p.add_argument("--ground-limit", type=parse_time_of_day, default=settings.ground_time_limit,
                   help="Maximum ground time, HH:MM")
    p.add_argument("--workers", type=parse_worker_count, default=settings.filter_workers,
                   help="Threads used for the ground time filter")
    p.add_argument("--html", type=Path, nargs="?", const=settings.output_html, default=None,
                   help=f"Write an HTML report (default path: {settings.output_html})")
    p.add_argument("--progress", action="store_true", help="Show a progress bar for the ground time filter")
    p.add_argument("--log-level", default=settings.log_level)
    return p


def main_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        run_pipeline(
            direction=args.direction,
            reference_time=args.reference,
            ground_limit=args.ground_limit,
            data_path=args.data,
            workers=args.workers,
            html_path=args.html,
            show_progress=args.progress,
        )
    except Exception:  # noqa: BLE001
        logging.exception("Pipeline failed")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())
