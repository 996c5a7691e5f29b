#!/usr/bin/env python3
"""Write a demo territory into a local data directory.

Creates one JSON file per store (customers, accidents, schedule events)
that the planner dashboard script and the web screens can read.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from danji_care.config import DanjiCareConfig, StorageConfig
from danji_care.logging import setup_logging
from danji_care.scenarios import DemoScenario
from danji_care.app import Repositories

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed danji-care demo data.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory for the JSON stores (default: $DANJI_DATA_DIR or ./local)",
    )
    parser.add_argument(
        "--accidents",
        type=int,
        default=12,
        help="Number of client requests to generate (default: 12)",
    )
    parser.add_argument(
        "--events",
        type=int,
        default=8,
        help="Number of calendar notes to generate (default: 8)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = DanjiCareConfig.from_env()
    setup_logging(config.log_level)

    storage_config = StorageConfig(backend="json", data_dir=args.data_dir or config.storage.data_dir)
    repos = Repositories.on(storage_config.create_backend())

    scenario = DemoScenario(
        num_accidents=args.accidents,
        num_events=args.events,
        seed=args.seed if args.seed is not None else config.seed,
    )
    counts = scenario.populate(repos.customers, repos.accidents, repos.events)

    print(f"Demo data written to: {storage_config.data_dir}")
    for store, count in counts.items():
        print(f"  {store}: {count} records")


if __name__ == "__main__":
    main()
