from app.core.config import Settings, get_settings, settings
from app.core.exceptions import (
    CohortValidationError,
    EvaluationBaseException,
    EvaluationProcessingError,
)
from app.core.logging import EvaluationLogger, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "get_logger",
    "EvaluationLogger",
    "EvaluationBaseException",
    "CohortValidationError",
    "EvaluationProcessingError",
]
