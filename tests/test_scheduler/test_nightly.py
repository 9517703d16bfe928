"""Tests for the nightly progress-refresh job."""

from __future__ import annotations

import dataclasses
import logging
from datetime import date
from unittest.mock import patch

from coaching_engine.serialization import load_snapshot, save_snapshot
from scheduler.nightly import nightly_job


def _complete_first_day(snapshot):
    plan = snapshot.week_plans[0]
    first = dataclasses.replace(plan.days[0], is_completed=True, completion_percentage=100.0)
    plan = dataclasses.replace(plan, days=(first,) + plan.days[1:])
    return dataclasses.replace(snapshot, week_plans=(plan,))


class TestNightlyJob:
    def test_missing_club_file(self, tmp_path, caplog) -> None:
        with patch("scheduler.nightly.CLUB_DATA_PATH", tmp_path / "absent.json"):
            assert nightly_job(date(2025, 3, 5)) is False
        assert "not found" in caplog.text

    def test_invalid_club_file(self, tmp_path, caplog) -> None:
        path = tmp_path / "club.json"
        path.write_text("[]]")
        with patch("scheduler.nightly.CLUB_DATA_PATH", path):
            assert nightly_job(date(2025, 3, 5)) is False
        assert "invalid" in caplog.text

    def test_undecodable_club_file(self, tmp_path, caplog) -> None:
        path = tmp_path / "club.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with patch("scheduler.nightly.CLUB_DATA_PATH", path):
            assert nightly_job(date(2025, 3, 5)) is False
        assert "invalid" in caplog.text

    def test_refreshes_and_saves(self, snapshot, tmp_path) -> None:
        path = save_snapshot(_complete_first_day(snapshot), tmp_path / "club.json")

        with patch("scheduler.nightly.CLUB_DATA_PATH", path):
            assert nightly_job(date(2025, 3, 5)) is True

        saved = load_snapshot(path)
        g1 = saved.progress_for("g1")
        g2 = saved.progress_for("g2")
        assert g1.current_percentage == 50.0
        assert g1.completed_days == 1  # Monday carries wt1 and wt3
        assert g2.is_completed
        assert g2.completed_days == 1

    def test_logs_balance_warnings(self, snapshot, tmp_path, caplog) -> None:
        path = save_snapshot(snapshot, tmp_path / "club.json")
        with patch("scheduler.nightly.CLUB_DATA_PATH", path):
            with caplog.at_level(logging.WARNING, logger="scheduler.nightly"):
                nightly_job(date(2025, 3, 5))
        assert 'No "tactical" work is scheduled this week.' in caplog.text

    def test_no_plan_for_today(self, snapshot, tmp_path, caplog) -> None:
        path = save_snapshot(snapshot, tmp_path / "club.json")
        with patch("scheduler.nightly.CLUB_DATA_PATH", path):
            with caplog.at_level(logging.INFO, logger="scheduler.nightly"):
                assert nightly_job(date(2025, 6, 1)) is True
        assert "No week plan covers 2025-06-01" in caplog.text
