"""What would Consistency OS tell you today?

Scores a sample week of check-ins and prints today's breakdown,
the streak and the history, without touching the database.

Usage:
    python scripts/simulate_today.py
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.consistency.score import FINANCE_MAX, HEALTH_MAX, MIND_MAX, compute_score
from app.consistency.streak import compute_streak
from app.schemas.checkin import CheckinUpsert

TODAY = datetime.date(2026, 10, 18)

# (days ago, sleep_hours, soreness, stress, mood)
RAW_DATA = [
    (0, 6.5, 3, 2, 4),
    (1, 7.5, 2, 3, 4),
    (2, 5.0, 4, 4, 2),
    (3, 8.0, 1, 1, 5),
    (5, 7.0, 2, 2, 3),
    (6, None, None, 5, None),
]


def main() -> None:
    checkins = {
        TODAY - datetime.timedelta(days=ago): CheckinUpsert(sleep_hours=sleep, soreness=soreness, stress=stress,
                                                            mood=mood)
        for ago, sleep, soreness, stress, mood in RAW_DATA
    }

    today = compute_score(checkins.get(TODAY))
    print(f"Today ({TODAY}): {today.score}")
    print(f"  Health {today.health}/{HEALTH_MAX} · Mind {today.mind}/{MIND_MAX} · "
          f"Finance {today.finance}/{FINANCE_MAX}")
    print(f"  Flags: {', '.join(today.flags) or 'none'}")
    print(f"Streak: {compute_streak(checkins, TODAY)}")
    print()
    print("History:")
    for date in sorted(checkins, reverse=True):
        breakdown = compute_score(checkins[date])
        print(f"  {date}  {breakdown.score:3d}  {' '.join(breakdown.flags)}")


if __name__ == "__main__":
    main()
