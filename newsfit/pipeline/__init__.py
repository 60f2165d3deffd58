"""Auto-fit pipeline: Claude rewrite step, fit loop and user operations."""

from newsfit.pipeline.adjuster import adjust_length, count_words, create_client
from newsfit.pipeline.autofit import (
    FitOutcome,
    FitState,
    FitStatus,
    compute_target_words,
    fill_columns,
    run_auto_fit,
)
from newsfit.pipeline.operations import auto_fit, detect, dispatch, fill_content, save_api_key

__all__ = [
    "adjust_length",
    "count_words",
    "create_client",
    "FitOutcome",
    "FitState",
    "FitStatus",
    "compute_target_words",
    "fill_columns",
    "run_auto_fit",
    "auto_fit",
    "detect",
    "dispatch",
    "fill_content",
    "save_api_key",
]
