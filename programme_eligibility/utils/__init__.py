"""
Utility functions for the Programme Eligibility Engine
"""

from .validators import (
    as_responses,
    choice_codes,
    is_blank,
    is_multi_choice,
    is_single_choice
)

__all__ = [
    "as_responses",
    "choice_codes",
    "is_blank",
    "is_multi_choice",
    "is_single_choice"
]
