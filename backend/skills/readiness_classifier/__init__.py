"""
Readiness Classifier Skill

Rule-based READY / CONDITIONAL / NOT_READY verdict for a single
supplier response, built from its extracted signals.
"""

from .definition import (
    ReadinessAnalysis,
    ReadinessIndicator,
)

from .impl import (
    ReadinessClassifier,
    classify_readiness,
    BASE_SCORE,
    THRESHOLD_NOT_READY,
    THRESHOLD_READY,
)

__all__ = [
    # Classes
    "ReadinessClassifier",
    # Models
    "ReadinessAnalysis",
    "ReadinessIndicator",
    # Functions
    "classify_readiness",
    # Constants
    "BASE_SCORE",
    "THRESHOLD_NOT_READY",
    "THRESHOLD_READY",
]
