"""
Custom exceptions for the Supplier Evaluation service.

The scoring skills never raise on partial data; these exceptions cover
the host layer around them: invalid cohort requests and unexpected
failures while running an evaluation. All inherit from
EvaluationBaseException.

Example:
    try:
        run = run_comparison(cohort, matrix)
    except CohortValidationError as e:
        logger.error(f"Rejected cohort: {e}")
"""

from typing import Optional, Sequence


class EvaluationBaseException(Exception):
    """
    Base exception class for all Supplier Evaluation errors.

    Attributes:
        message: Human-readable description of the error.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation with optional details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class CohortValidationError(EvaluationBaseException):
    """
    Exception raised when a cohort cannot be evaluated as submitted.

    Covers oversized cohorts and duplicated response identifiers.

    Attributes:
        cohort_size: Number of suppliers in the rejected cohort.
        response_ids: Offending response ids, if any.
    """

    def __init__(
        self,
        message: str,
        cohort_size: int = 0,
        response_ids: Optional[Sequence[str]] = None,
        details: Optional[str] = None,
    ) -> None:
        """
        Initialize cohort validation error.

        Args:
            message: Human-readable description of the error.
            cohort_size: Number of suppliers in the rejected cohort.
            response_ids: Offending response ids (e.g. duplicates).
            details: Optional additional context for debugging.
        """
        self.cohort_size = cohort_size
        self.response_ids = list(response_ids or [])

        enhanced_message = f"[Cohort] {message}"
        if self.response_ids:
            enhanced_message = f"{enhanced_message} (ids: {', '.join(self.response_ids)})"

        super().__init__(enhanced_message, details)


class EvaluationProcessingError(EvaluationBaseException):
    """
    Exception raised when an evaluation run fails unexpectedly.

    Attributes:
        stage: The run stage that failed (e.g. 'metrics', 'normalize').
        original_error: The underlying exception if available.
    """

    def __init__(
        self,
        message: str,
        stage: str,
        original_error: Optional[Exception] = None,
        details: Optional[str] = None,
    ) -> None:
        """
        Initialize evaluation processing error.

        Args:
            message: Human-readable description of the error.
            stage: The run stage that failed.
            original_error: The underlying exception if available.
            details: Optional additional context for debugging.
        """
        self.stage = stage
        self.original_error = original_error

        enhanced_message = f"[Stage: {stage}] {message}"
        if original_error:
            enhanced_message = f"{enhanced_message} | Caused by: {type(original_error).__name__}: {str(original_error)[:200]}"

        super().__init__(enhanced_message, details)
