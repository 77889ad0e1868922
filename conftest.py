"""Shared fixtures for engine tests."""

from datetime import date

import pytest


@pytest.fixture
def reference_day():
    return date(2025, 6, 1)


@pytest.fixture
def full_responses():
    """Answers earning every rubric point."""
    return {
        "A5": "universitaire",
        "A6": ["ninea", "rccm", "recepisse", "manuel"],
        "B1": "oui",
        "B2": "documente",
        "B5": "partiellement",
        "B6": "oui",
        "B8": ["comite_de_gestion"],
        "C1": "oui",
        "C4": "oui",
        "C6": "informelles",
        "C7": "déposé",
        "D1": "oui",
        "D4": "site",
        "D5": "oui",
        "E1": "oui",
        "E2": "oui",
        "F1": "oui",
    }
