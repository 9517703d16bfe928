"""Nightly scheduler — refreshes goal progress and checks the current week.

Usage:
    python -m scheduler.nightly --once      # single run (for cron)
    python -m scheduler.nightly --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from coaching_engine.engine import CoachingEngine
from coaching_engine.exceptions import SnapshotFormatError
from coaching_engine.serialization import load_snapshot, save_snapshot

from scheduler.config import (
    CLUB_DATA_PATH,
    LOG_LEVEL,
    NIGHTLY_HOUR,
    NIGHTLY_MINUTE,
)

logger = logging.getLogger(__name__)


def nightly_job(today: date | None = None) -> bool:
    """Execute one nightly cycle: load, refresh progress, check balance, save.

    Returns:
        True if the refreshed snapshot was saved.
    """
    today = today or date.today()
    logger.info("Starting nightly job for %s", today.isoformat())

    # 1. Load club snapshot
    try:
        snapshot = load_snapshot(CLUB_DATA_PATH)
    except FileNotFoundError:
        logger.error("Club data not found at %s", CLUB_DATA_PATH)
        return False
    except SnapshotFormatError as exc:
        logger.error("Club data at %s is invalid: %s", CLUB_DATA_PATH, exc)
        return False

    # 2. Count completed days per goal from the week plans
    # Import here to avoid circular dependency at module level
    sys.path.insert(0, "streamlit_app")
    from helpers import completed_days_by_goal, current_week_plan

    engine = CoachingEngine()
    refreshed = engine.refresh_progress(snapshot, completed_days_by_goal(snapshot))
    completed = sum(1 for p in refreshed.progress if p.is_completed)
    logger.info(
        "Refreshed progress for %d goals (%d completed)",
        len(refreshed.progress),
        completed,
    )

    # 3. Check this week's balance
    plan = current_week_plan(refreshed, today)
    if plan is None:
        logger.info("No week plan covers %s", today.isoformat())
    else:
        report = engine.analyze_balance(plan, refreshed.work_types)
        for warning in report.warnings:
            logger.warning("Week %s: %s", plan.id, warning)

    # 4. Persist
    save_snapshot(refreshed, CLUB_DATA_PATH)
    logger.info("Nightly job complete")
    return True


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="ClubCoach nightly scheduler")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        nightly_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            nightly_job,
            "cron",
            hour=NIGHTLY_HOUR,
            minute=NIGHTLY_MINUTE,
            id="nightly_job",
        )
        logger.info(
            "Scheduler started — nightly job at %02d:%02d",
            NIGHTLY_HOUR,
            NIGHTLY_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
