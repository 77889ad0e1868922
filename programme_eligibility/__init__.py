"""
Programme Eligibility Engine

Decides whether a beneficiary structurally qualifies for a support programme,
scores the diagnostic questionnaire and recommends a review decision.
"""

__version__ = "1.0.0"
__description__ = "Eligibility and scoring engine for entrepreneurship-support programmes"
