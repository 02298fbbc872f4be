from __future__ import annotations

import math
from collections.abc import Sequence

from database.storage import MemStorage
from schemas.progress import DailySummaryResponse, PainTrend, ProgressEntry

# Pain trend compares the last week of entries against the week before it.
TREND_WINDOW = 7
TREND_HISTORY = 30
RECENT_PAIN_POINTS = 7
# Daily target when the library has no core exercises flagged.
DEFAULT_TARGET_EXERCISES = 4


def _avg_pain(entries: Sequence[ProgressEntry]) -> float:
    return sum(e.pain_level for e in entries) / len(entries)


def _round_half_up(value: float) -> int:
    # 12.5 -> 13; round() would give 12.
    return math.floor(value + 0.5)


def compute_pain_trend(entries: Sequence[ProgressEntry]) -> PainTrend | None:
    """
    `entries` must be most-recent first (as returned by get_progress_entries).
    Returns None when there is not enough history to compare.
    """
    if len(entries) < 2:
        return None

    recent = entries[:TREND_WINDOW]
    older = entries[TREND_WINDOW : TREND_WINDOW * 2]
    if not older:
        return None

    avg_recent = _avg_pain(recent)
    avg_older = _avg_pain(older)
    if avg_recent < avg_older:
        return "improving"
    if avg_recent > avg_older:
        return "worsening"
    return "stable"


def build_daily_summary(storage: MemStorage, user_id: str, today: str) -> DailySummaryResponse:
    completed_today = len(storage.get_exercise_completions(user_id, date=today))
    target = len(storage.get_exercises(is_core=True)) or DEFAULT_TARGET_EXERCISES
    history = storage.get_progress_entries(user_id, limit=TREND_HISTORY)
    active_reminders = sum(1 for r in storage.get_reminders(user_id) if r.is_active)

    return DailySummaryResponse(
        date=today,
        completed_today=completed_today,
        target_exercises=target,
        progress_pct=min(100, _round_half_up(completed_today / target * 100)),
        today_progress=storage.get_progress_entry(user_id, today),
        active_reminders=active_reminders,
        pain_trend=compute_pain_trend(history),
        recent_pain_levels=[e.pain_level for e in history[:RECENT_PAIN_POINTS]],
    )
