"""
Tests for selecting the programmes a beneficiary may apply to
"""
from datetime import date, timedelta

from programme_eligibility.models import Beneficiary, Programme, ProgrammeStatus
from programme_eligibility.services import CriteriaEvaluator, filter_eligible, minimum_score_criterion


BENEFICIARY = Beneficiary(id="BEN-7", region_id="Thiès", sector="Commerce", ninea="77", employee_count=4, revenue=5000)


def _programme(pid, status="OUVERT", start=None, end=None, **overrides) -> Programme:
    return Programme(id=pid, name=f"Programme {pid}", status=status, start_date=start, end_date=end, **overrides)


def _ids(programmes):
    return [p.id for p in programmes]


class TestStatusGate:

    def test_open_and_in_progress_accepted(self, reference_day):
        programmes = [
            _programme("open", "OUVERT"),
            _programme("running", "EN_COURS"),
            _programme("draft", "BROUILLON"),
            _programme("closed", "FERMÉ"),
            _programme("archived", "ARCHIVÉ"),
            _programme("planned", "PLANIFIÉ"),
            _programme("unknown", "PENDING"),
            _programme("blank", ""),
        ]
        assert _ids(filter_eligible(programmes, BENEFICIARY, today=reference_day)) == ["open", "running"]

    def test_english_status_names(self, reference_day):
        programmes = [_programme("a", "open"), _programme("b", ProgrammeStatus.IN_PROGRESS), _programme("c", "CLOSED")]
        assert _ids(filter_eligible(programmes, BENEFICIARY, today=reference_day)) == ["a", "b"]


class TestDateGate:

    def test_window_bounds_are_inclusive(self, reference_day):
        day = timedelta(days=1)
        programmes = [
            _programme("starts_today", start=reference_day, end=reference_day + 30 * day),
            _programme("ends_today", start=reference_day - 30 * day, end=reference_day),
            _programme("single_day", start=reference_day, end=reference_day),
            _programme("not_started", start=reference_day + day, end=reference_day + 30 * day),
            _programme("finished", start=reference_day - 30 * day, end=reference_day - day),
        ]
        assert _ids(filter_eligible(programmes, BENEFICIARY, today=reference_day)) == [
            "starts_today", "ends_today", "single_day"
        ]

    def test_missing_bounds_are_open_ended(self, reference_day):
        programmes = [
            _programme("no_dates"),
            _programme("no_end", start=date(2020, 1, 1)),
            _programme("no_start", end=date(2030, 1, 1)),
        ]
        assert _ids(filter_eligible(programmes, BENEFICIARY, today=reference_day)) == ["no_dates", "no_end", "no_start"]

    def test_timestamps_from_store(self, reference_day):
        programme = Programme.model_validate({
            "id": "ts",
            "statut": "OUVERT",
            "date_debut": "2025-06-01T00:00:00+00:00",
            "date_fin": "2025-06-01T23:59:59+00:00",
        })
        assert _ids(filter_eligible([programme], BENEFICIARY, today=reference_day)) == ["ts"]

    def test_defaults_to_current_date(self):
        today = date.today()
        programmes = [
            _programme("current", start=today - timedelta(days=1), end=today + timedelta(days=1)),
            _programme("past", start=date(2000, 1, 1), end=date(2000, 12, 31)),
        ]
        assert _ids(filter_eligible(programmes, BENEFICIARY)) == ["current"]


class TestEligibilityGate:

    def test_ineligible_programmes_dropped(self, reference_day):
        programmes = [
            _programme("other_region", target_regions=["Dakar"]),
            _programme("match", target_regions=["Thiès"]),
            _programme("other_sector", criteria={"sectors": ["Agriculture"]}),
            _programme("too_small", criteria={"min_employees": 10}),
        ]
        assert _ids(filter_eligible(programmes, BENEFICIARY, today=reference_day)) == ["match"]

    def test_custom_evaluator(self, reference_day, full_responses):
        evaluator = CriteriaEvaluator().with_criterion("min_score", minimum_score_criterion)
        programmes = [_programme("selective", criteria={"min_score": 80}), _programme("open_door")]

        weak = filter_eligible(programmes, BENEFICIARY, {"B1": "oui"}, today=reference_day, evaluator=evaluator)
        strong = filter_eligible(programmes, BENEFICIARY, full_responses, today=reference_day, evaluator=evaluator)

        assert _ids(weak) == ["open_door"]
        assert _ids(strong) == ["selective", "open_door"]


class TestOrdering:

    def test_subset_in_input_order(self, reference_day):
        programmes = [
            _programme("p3"),
            _programme("p1", "FERMÉ"),
            _programme("p2"),
            _programme("p0", target_regions=["Matam"]),
            _programme("p5"),
        ]
        snapshot = list(programmes)

        result = filter_eligible(programmes, BENEFICIARY, today=reference_day)

        assert _ids(result) == ["p3", "p2", "p5"]
        assert all(any(p is q for q in programmes) for p in result)
        assert programmes == snapshot

    def test_accepts_any_iterable(self, reference_day):
        programmes = (_programme(f"p{i}") for i in range(3))
        assert _ids(filter_eligible(programmes, BENEFICIARY, today=reference_day)) == ["p0", "p1", "p2"]

    def test_empty_input(self, reference_day):
        assert filter_eligible([], BENEFICIARY, today=reference_day) == []
