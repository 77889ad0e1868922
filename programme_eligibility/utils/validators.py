"""
Utility functions for inspecting loosely-typed record values and questionnaire answers
"""
from collections.abc import Mapping
from typing import Any, FrozenSet


MULTI_SELECT_TYPES = (list, tuple, set, frozenset)


def is_blank(value: Any) -> bool:
    """
    Check whether an identifier field is effectively empty

    Args:
        value: Raw field value (None, string, or anything else)

    Returns:
        True for None, empty strings and whitespace-only strings
    """
    if value is None:
        return True
    return str(value).strip() == ""


def is_single_choice(answer: Any) -> bool:
    """Whether an answer is a single choice code"""
    return isinstance(answer, str)


def is_multi_choice(answer: Any) -> bool:
    """Whether an answer is a multi-select collection of choice codes"""
    return isinstance(answer, MULTI_SELECT_TYPES)


def choice_codes(answer: Any) -> FrozenSet[str]:
    """
    Get the selected codes of a multi-select answer

    Args:
        answer: Raw answer value

    Returns:
        Selected codes, or an empty set when the answer is not a multi-select
    """
    if not is_multi_choice(answer):
        return frozenset()
    return frozenset(code for code in answer if isinstance(code, str))


def as_responses(responses: Any) -> Mapping:
    """
    Get questionnaire responses as a mapping

    Args:
        responses: Raw responses value

    Returns:
        The responses if they form a mapping, otherwise an empty dict
    """
    if isinstance(responses, Mapping):
        return responses
    return {}
