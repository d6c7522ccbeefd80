#!/usr/bin/env python3
"""
Print the best free slot (and near-best alternatives) for an organizer's next event.

Usage:
    python scripts/suggest_best_time.py --organizer 10 --hours 2
"""
import argparse
import logging
import os
import sys

from dotenv import load_dotenv

logging.basicConfig(level=logging.WARNING)  # Reduce noise

load_dotenv()
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from alumni_events.core.errors import SchedulingError
from alumni_events.services.engine import get_scheduling_service


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Suggest the best time for a new event")
    parser.add_argument("--organizer", type=int, required=True, help="Organizer id")
    parser.add_argument("--hours", type=float, default=2.0, help="Event duration in hours")
    args = parser.parse_args(argv)

    service = get_scheduling_service()
    try:
        result = service.suggest_best_time(args.organizer, args.hours)
    except SchedulingError as e:
        print(f"Error: {e.message}")
        return 1

    print("=" * 60)
    print(f"BEST TIME: organizer {args.organizer}, {args.hours:g}h")
    print("=" * 60)

    if not result.found:
        print("No available time in the next weeks.")
        return 0

    best = result.suggested
    print(f"Suggested: {best.start:%a %Y-%m-%d %H:%M} - {best.end:%H:%M} (score {best.score})")
    for slot in result.alternatives:
        print(f"  Alternative: {slot.start:%a %Y-%m-%d %H:%M} - {slot.end:%H:%M} (score {slot.score})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
