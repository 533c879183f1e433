from app.services.evaluation import (
    run_category_readiness,
    run_comparison,
    run_readiness,
    validate_cohort,
)

__all__ = [
    "run_comparison",
    "run_readiness",
    "run_category_readiness",
    "validate_cohort",
]
