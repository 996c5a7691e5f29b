#!/usr/bin/env python3
"""Print the planner dashboard for a local data directory.

Useful for checking what the dashboard and map pages will show for a
given position and day without opening the browser.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from danji_care.app import DanjiCareApp
from danji_care.config import DanjiCareConfig
from danji_care.geo.location import GeolocationService, fixed_position
from danji_care.logging import setup_logging
from danji_care.models import ACCIDENT_STATUS_LABEL
from danji_care.pins import MapView
from danji_care.weather import split_bold

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the danji-care planner dashboard.")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory holding the JSON stores")
    parser.add_argument("--lat", type=float, default=None, help="Planner latitude")
    parser.add_argument("--lng", type=float, default=None, help="Planner longitude")
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference day, YYYY-MM-DD (default: today)",
    )
    return parser.parse_args(argv)


def print_map(title: str, view: MapView) -> None:
    print(f"\n{'='*60}")
    print(f"{title} ({len(view.markers)} pins, center {view.center.lat:.4f},{view.center.lng:.4f})")
    print("=" * 60)
    for marker in view.markers:
        print(f"  [{marker.pin.value:>6}] {marker.name} - {marker.label} (갱신일 {marker.renewal_date})")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = DanjiCareConfig.from_env()
    if args.data_dir is not None:
        config.storage.data_dir = args.data_dir
    setup_logging(config.log_level)

    app = DanjiCareApp.create(config)
    source = fixed_position(args.lat, args.lng) if args.lat is not None and args.lng is not None else None
    location = GeolocationService(
        source,
        timeout=config.geolocation.timeout_seconds,
        maximum_age=config.geolocation.maximum_age_seconds,
    ).acquire()
    if location.error:
        logger.info("Showing all complexes: %s", location.error)

    summary = app.dashboard.summary(location, args.today)

    print("=" * 60)
    print(summary.location_label)
    print("".join(text for text, _ in split_bold(summary.encouragement)))
    print("=" * 60)
    for status, count in summary.status_counts.items():
        print(f"  {ACCIDENT_STATUS_LABEL[status]}: {count}")
    print(f"  신규 사고 접수 대기: {summary.pending_accident_count}")
    print(f"  오늘 일정: {summary.today_schedule_count}")
    print(f"  오늘 업무: {summary.today_workload}")
    print(f"  만기 60일 이내: {len(summary.renewals_due)}")
    for due in summary.renewals_due:
        print(f"    {due.name} {due.renewal_date} (D-{due.days_left})")

    print_map("영업용 지도", summary.prospecting_map)
    print_map("관리 단지 지도", app.dashboard.coverage_map(location, args.today))


if __name__ == "__main__":
    main()
