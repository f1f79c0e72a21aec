"""Consistency core algorithms: daily wellness score and check-in streak."""

from app.consistency.score import compute_score
from app.consistency.streak import compute_streak

__all__ = ["compute_score", "compute_streak"]
