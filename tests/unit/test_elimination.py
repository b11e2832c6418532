"""
Tests for src.core.matching.elimination: employer hard requirements.
"""

import pytest

from src.core.matching.elimination import availability_tier, check_elimination


# ── availability_tier ────────────────────────────────────────────────────────


class TestAvailabilityTier:
    @pytest.mark.parametrize(
        "value, tier",
        [
            ("immediate", 0),
            ("1 week", 1),
            ("2 weeks", 2),
            ("1 month", 3),
            ("2 months", 4),
            ("3 months", 5),
        ],
    )
    def test_known_values(self, value, tier):
        assert availability_tier(value) == tier

    def test_case_and_whitespace(self):
        assert availability_tier("  1 Month ") == 3

    def test_unknown_value(self):
        assert availability_tier("gig work") is None

    def test_empty_value(self):
        assert availability_tier("") is None
        assert availability_tier(None) is None


# ── Age ──────────────────────────────────────────────────────────────────────


class TestAgeElimination:
    def test_at_minimum(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"age": "25-35"})
        verdict = check_elimination(make_candidate(age=25), employer)
        assert verdict.eliminated is False

    def test_at_maximum(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"age": "25-35"})
        verdict = check_elimination(make_candidate(age=35), employer)
        assert verdict.eliminated is False

    def test_above_maximum(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"age": "25-35"})
        verdict = check_elimination(make_candidate(age=36), employer)
        assert verdict.eliminated is True
        assert len(verdict.reasons) == 1
        assert "36" in verdict.reasons[0]

    def test_below_minimum(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"age": "25-35"})
        verdict = check_elimination(make_candidate(age=24), employer)
        assert verdict.eliminated is True

    @pytest.mark.parametrize("age_range", ["abc", "25", "25-35-45", "25-", "-5-10", "twenty-thirty"])
    def test_malformed_range_ignored(self, make_candidate, make_employer, age_range):
        employer = make_employer(elimination_criteria={"age": age_range})
        verdict = check_elimination(make_candidate(age=80), employer)
        assert verdict.eliminated is False

    def test_any_range(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"age": "Any"})
        verdict = check_elimination(make_candidate(age=80), employer)
        assert verdict.eliminated is False

    def test_candidate_without_age(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"age": "25-35"})
        verdict = check_elimination(make_candidate(age=None), employer)
        assert verdict.eliminated is False


# ── Exact-match fields ───────────────────────────────────────────────────────


class TestExactMatchElimination:
    def test_any_is_skipped(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={
            "nationality": "Any",
            "race": "any",
            "visa_status": "ANY",
        })
        verdict = check_elimination(make_candidate(), employer)
        assert verdict.eliminated is False

    def test_case_insensitive_match(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={
            "nationality": "MALAYSIAN",
            "current_country": "singapore",
            "job_arrangement": "hybrid",
        })
        verdict = check_elimination(make_candidate(), employer)
        assert verdict.eliminated is False

    def test_mismatch(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"nationality": "Singaporean"})
        verdict = check_elimination(make_candidate(), employer)
        assert verdict.eliminated is True
        assert verdict.reasons[0].startswith("Nationality mismatch")

    def test_missing_candidate_religion(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"religion": "Islam"})
        verdict = check_elimination(make_candidate(religion=None), employer)
        assert verdict.eliminated is True
        assert verdict.reasons[0].startswith("Religion mismatch")

    def test_every_field_labelled(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={
            "ethnicity": "x",
            "race": "x",
            "religion": "x",
            "nationality": "x",
            "country_of_birth": "x",
            "current_country": "x",
            "visa_status": "x",
            "job_arrangement": "x",
        })
        verdict = check_elimination(make_candidate(), employer)
        labels = [reason.split(" mismatch")[0] for reason in verdict.reasons]
        assert labels == [
            "Ethnicity",
            "Race",
            "Religion",
            "Nationality",
            "Birth Country",
            "Current Country",
            "Visa Status",
            "Job Arrangement",
        ]


# ── Salary ───────────────────────────────────────────────────────────────────


class TestSalaryElimination:
    def test_expectation_above_ceiling(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"salary_monthly": 5000})
        verdict = check_elimination(make_candidate(minimum_expected_salary_monthly=6000), employer)
        assert verdict.eliminated is True
        assert verdict.reasons[0].startswith("Salary expectation")

    def test_expectation_equal_to_ceiling(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"salary_monthly": 6000})
        verdict = check_elimination(make_candidate(minimum_expected_salary_monthly=6000), employer)
        assert verdict.eliminated is False

    def test_zero_ceiling_is_unconstrained(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"salary_monthly": 0})
        verdict = check_elimination(make_candidate(minimum_expected_salary_monthly=6000), employer)
        assert verdict.eliminated is False


# ── Availability ─────────────────────────────────────────────────────────────


class TestAvailabilityElimination:
    def test_slower_than_required(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"availability": "1 month"})
        verdict = check_elimination(make_candidate(availability="2 months"), employer)
        assert verdict.eliminated is True
        assert verdict.reasons[0].startswith("Availability")

    def test_same_tier(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"availability": "1 month"})
        verdict = check_elimination(make_candidate(availability="1 month"), employer)
        assert verdict.eliminated is False

    def test_faster_than_required(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"availability": "1 month"})
        verdict = check_elimination(make_candidate(availability="Immediate"), employer)
        assert verdict.eliminated is False

    def test_unknown_candidate_value(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"availability": "1 month"})
        verdict = check_elimination(make_candidate(availability="gig work"), employer)
        assert verdict.eliminated is False

    def test_unknown_employer_value(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={"availability": "Flexible"})
        verdict = check_elimination(make_candidate(availability="3 months"), employer)
        assert verdict.eliminated is False


# ── Accumulation ─────────────────────────────────────────────────────────────


class TestEliminationAccumulation:
    def test_no_criteria(self, make_candidate, make_employer):
        verdict = check_elimination(make_candidate(), make_employer())
        assert verdict.eliminated is False
        assert verdict.reasons == []

    def test_all_failures_reported(self, make_candidate, make_employer):
        employer = make_employer(elimination_criteria={
            "age": "20-25",
            "nationality": "Singaporean",
            "salary_monthly": 3000,
            "availability": "immediate",
        })
        verdict = check_elimination(make_candidate(), employer)
        assert verdict.eliminated is True
        assert len(verdict.reasons) == 4
