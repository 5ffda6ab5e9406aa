"""DISC & Driving Forces scoring and department analytics."""

from .disc_types import DiscAnswer, DrivingForce, Motivator, Scores, Trait
from .driving_forces import DrivingForceResult, score_driving_forces
from .scoring import DiscProfile, score_disc

__all__ = [
    "DiscAnswer",
    "DiscProfile",
    "DrivingForce",
    "DrivingForceResult",
    "Motivator",
    "Scores",
    "Trait",
    "score_disc",
    "score_driving_forces",
]
