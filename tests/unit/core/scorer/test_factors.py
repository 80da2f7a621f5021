#!/usr/bin/env python3
"""
Unit tests for the opportunity-match factor scores.
"""

import unittest

from core.config_loader import ScorerConfig, TeamSizeRules
from core.scorer import factors
from core.scorer.models import Team, Opportunity, Company


def opp(**fields):
    return Opportunity(**fields)


def team(**fields):
    return Team(**fields)


class TestSkillsScore(unittest.TestCase):

    def test_half_required_no_preferred(self):
        """{Python, Machine Learning} vs required [python, sql]: 35 + 15 = 50."""
        score = factors.calculate_skills_score(
            ["Python", "Machine Learning"], opp(required_skills=["python", "sql"])
        )
        self.assertEqual(score, 50)

    def test_no_skills_listed(self):
        self.assertEqual(factors.calculate_skills_score(["Python"], opp()), 70)
        self.assertEqual(factors.calculate_skills_score([], opp()), 70)

    def test_full_coverage(self):
        score = factors.calculate_skills_score(
            ["python", "sql", "machine learning"],
            opp(required_skills=["Python", "SQL"], preferred_skills=["Machine Learning"])
        )
        self.assertEqual(score, 100)

    def test_substring_match_either_direction(self):
        # "react" is contained in "react native"; "javascript" contains "java"
        score = factors.calculate_skills_score(
            ["React Native", "Java"], opp(required_skills=["react", "javascript"])
        )
        self.assertEqual(score, 85)

    def test_only_preferred_listed(self):
        score = factors.calculate_skills_score(["Kafka"], opp(preferred_skills=["kafka", "spark"]))
        # 35 for the empty required list + 15 for half the preferred
        self.assertEqual(score, 50)

    def test_no_team_skills(self):
        self.assertEqual(factors.calculate_skills_score([], opp(required_skills=["python"])), 15)

    def test_blank_skill_does_not_match_everything(self):
        score = factors.calculate_skills_score(["", "Go"], opp(required_skills=["python"]))
        self.assertEqual(score, 15)


class TestIndustryScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def score(self, team_industry, opp_industry):
        return factors.calculate_industry_score(
            team(industry=team_industry), opp(industry=opp_industry), self.config
        )

    def test_table_lookup(self):
        self.assertEqual(self.score("Financial Services", "Fintech"), 90)
        self.assertEqual(self.score("Technology", "Fintech"), 85)

    def test_reverse_lookup(self):
        self.assertEqual(self.score("Fintech", "Technology"), 85)

    def test_exact_match_case_insensitive(self):
        self.assertEqual(self.score("FINTECH", "fintech"), 100)

    def test_partial_word_match(self):
        self.assertEqual(self.score("Healthcare Services", "Healthcare"), 65)

    def test_unrelated(self):
        self.assertEqual(self.score("Retail", "Aerospace"), 40)

    def test_unknown(self):
        self.assertEqual(self.score(None, "Fintech"), 50)
        self.assertEqual(self.score("Fintech", None), 50)

    def test_custom_table_clamped_to_floor(self):
        config = ScorerConfig(industry_compatibility={"Retail": {"Logistics": 10}})
        score = factors.calculate_industry_score(
            team(industry="Retail"), opp(industry="Logistics"), config
        )
        self.assertEqual(score, 40)


class TestLocationScore(unittest.TestCase):

    def score(self, team_remote=None, opp_remote=None, team_location=None, opp_location=None):
        return factors.calculate_location_score(
            team(remote_status=team_remote, location=team_location),
            opp(remote_policy=opp_remote, location=opp_location)
        )

    def test_remote_opportunity_fits_everyone(self):
        self.assertEqual(self.score("remote", "remote"), 100)
        self.assertEqual(self.score("onsite", "remote"), 100)

    def test_remote_team(self):
        self.assertEqual(self.score("remote", "hybrid"), 70)
        self.assertEqual(self.score("remote", "onsite"), 30)

    def test_hybrid(self):
        self.assertEqual(self.score("hybrid", "onsite"), 75)
        self.assertEqual(self.score("onsite", "hybrid"), 75)

    def test_onsite_locations(self):
        self.assertEqual(self.score("onsite", "onsite", "New York, NY", "new york, ny"), 100)
        self.assertEqual(self.score("onsite", "onsite", "Austin, TX", "Dallas, TX"), 70)
        self.assertEqual(self.score("onsite", "onsite", "Austin, TX", "London, UK"), 50)

    def test_missing_data(self):
        self.assertEqual(self.score(), 50)
        self.assertEqual(self.score("onsite", "onsite", "Austin, TX", None), 50)


class TestSizeScore(unittest.TestCase):

    def test_within_range(self):
        self.assertEqual(factors.calculate_size_score(team(size=5), opp(team_size_min=3, team_size_max=8)), 100)
        self.assertEqual(factors.calculate_size_score(team(size=3), opp(team_size_min=3, team_size_max=8)), 100)

    def test_too_small(self):
        self.assertEqual(factors.calculate_size_score(team(size=3), opp(team_size_min=5)), 70)
        self.assertEqual(factors.calculate_size_score(team(size=1), opp(team_size_min=10)), 0)

    def test_too_large(self):
        self.assertEqual(factors.calculate_size_score(team(size=12), opp(team_size_min=3, team_size_max=8)), 60)

    def test_configured_rules(self):
        rules = TeamSizeRules(default_team_size_max=4, size_excess_penalty=20)
        self.assertEqual(factors.calculate_size_score(team(size=5), opp(), rules), 80)

    def test_default_bounds(self):
        self.assertEqual(factors.calculate_size_score(team(size=20), opp()), 100)
        self.assertEqual(factors.calculate_size_score(team(size=25), opp()), 50)

    def test_unknown_size_uses_member_count(self):
        self.assertEqual(factors.calculate_size_score(team(member_count=4), opp(team_size_min=5)), 85)
        # No size at all counts as zero members
        self.assertEqual(factors.calculate_size_score(team(), opp()), 85)


class TestCompensationScore(unittest.TestCase):

    def score(self, team_min=None, team_max=None, opp_min=None, opp_max=None):
        return factors.calculate_compensation_score(
            team(salary_expectation_min=team_min, salary_expectation_max=team_max),
            opp(compensation_min=opp_min, compensation_max=opp_max)
        )

    def test_meets_expectations(self):
        self.assertEqual(self.score(150000, 200000, 180000, 250000), 100)

    def test_within_band(self):
        self.assertEqual(self.score(150000, 220000, 150000, 200000), 85)

    def test_gap(self):
        self.assertEqual(self.score(200000, 250000, 100000, 150000), 45)

    def test_large_gap_floored(self):
        self.assertEqual(self.score(200000, 250000, 30000, 50000), 20)

    def test_missing_data(self):
        self.assertEqual(self.score(opp_min=100000, opp_max=150000), 70)
        self.assertEqual(self.score(team_min=100000, team_max=150000), 70)

    def test_non_positive_expectations_score_floor(self):
        """A zero minimum expectation with a negative band scores the floor instead of dividing by zero."""
        self.assertEqual(self.score(0, 200000, -50000, -1), 20)
        self.assertEqual(self.score(-10000, 200000, -50000, -20000), 20)


class TestUrgencyAndCompany(unittest.TestCase):

    def test_urgency_levels(self):
        config = ScorerConfig()
        self.assertEqual(factors.calculate_urgency_bonus(opp(urgency="critical"), config), 100)
        self.assertEqual(factors.calculate_urgency_bonus(opp(urgency="high"), config), 85)
        self.assertEqual(factors.calculate_urgency_bonus(opp(urgency="standard"), config), 70)
        self.assertEqual(factors.calculate_urgency_bonus(opp(urgency="low"), config), 50)
        self.assertEqual(factors.calculate_urgency_bonus(opp(urgency="someday"), config), 70)
        self.assertEqual(factors.calculate_urgency_bonus(opp(), config), 70)

    def test_company_quality(self):
        full = Company(verification_status="verified", logo_url="https://x/logo.png", industry="Fintech")
        self.assertEqual(factors.calculate_company_quality(full), 100)
        self.assertEqual(factors.calculate_company_quality(Company(verification_status="pending")), 60)
        self.assertEqual(factors.calculate_company_quality(Company(logo_url="l", industry="i")), 70)
        self.assertEqual(factors.calculate_company_quality(Company()), 50)
        self.assertEqual(factors.calculate_company_quality(None), 50)


if __name__ == '__main__':
    unittest.main()
