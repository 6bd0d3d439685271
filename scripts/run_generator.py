"""Generate a backdated activity pattern in a git working tree."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from commit_pattern import defaults
from commit_pattern.adapters import csv_adapter, json_adapter
from commit_pattern.metrics import compute_metrics
from commit_pattern.random_source import RandomProvider
from commit_pattern.recorder import GitRecorder, RecorderError
from commit_pattern.scheduling import plan_events, validate_parameters
from commit_pattern.schema import DateRange, PatternProfile
from commit_pattern.simulation import DISPATCH_DELAY_SECONDS, run_pattern

logger = logging.getLogger("commit_pattern")


def _build_profile(args: argparse.Namespace) -> PatternProfile:
    if args.profile:
        profile = json_adapter.parse(args.profile)
    else:
        profile = PatternProfile(targets=list(defaults.TARGETS), annotations=list(defaults.ANNOTATIONS))

    date_range = profile.date_range or defaults.DATE_RANGE
    start = date.fromisoformat(args.start) if args.start else date_range.start
    end = date.fromisoformat(args.end) if args.end else date_range.end
    profile.date_range = DateRange(start, end)

    if args.probability is not None:
        profile.probability = args.probability
    elif profile.probability is None:
        profile.probability = defaults.ACTIVITY_PROBABILITY

    validate_parameters(profile.probability, defaults.EVENTS_PER_ACTIVE_DAY, profile.targets, profile.annotations)
    return profile


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a backdated commit activity pattern")
    parser.add_argument("--repo", default=".", help="Path to the git working tree")
    parser.add_argument("--profile", help="Path to a JSON pattern profile")
    parser.add_argument("--start", help="First day of the range (YYYY-MM-DD)")
    parser.add_argument("--end", help="Last day of the range (YYYY-MM-DD)")
    parser.add_argument("--probability", type=float, help="Chance that a day is active")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--delay", type=float, default=DISPATCH_DELAY_SECONDS, help="Seconds between commits")
    parser.add_argument("--dry-run", action="store_true", help="Plan events without touching the repository")
    parser.add_argument("--plan-out", help="CSV path for the dry-run schedule")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        profile = _build_profile(args)
    except ValueError as exc:
        parser.error(str(exc))

    rng = RandomProvider(seed=args.seed)

    if args.dry_run:
        events = list(
            plan_events(
                profile.date_range,
                rng,
                profile.targets,
                profile.annotations,
                profile.probability,
                defaults.EVENTS_PER_ACTIVE_DAY,
            )
        )
        for event in events:
            print(f"{event.timestamp.isoformat()}  {event.target_file}  {event.annotation_text}")
        if args.plan_out:
            count = csv_adapter.write(events, args.plan_out)
            print(f"Saved {count} planned events to {args.plan_out}")
        return

    recorder = GitRecorder(args.repo)
    try:
        recorder.ensure_repository()
        summary = run_pattern(
            profile.date_range,
            recorder,
            profile.targets,
            profile.annotations,
            rng=rng,
            probability=profile.probability,
            events_per_day=defaults.EVENTS_PER_ACTIVE_DAY,
            root=args.repo,
            delay=args.delay,
        )
    except RecorderError as exc:
        logger.error("Recorder failure: %s", exc)
        sys.exit(1)

    print(json.dumps(compute_metrics(summary), indent=2))
    print("Inspect history: git log --oneline")


if __name__ == "__main__":
    main()
