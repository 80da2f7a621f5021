#!/usr/bin/env python3
"""
Team Fit Scorer - scores teams as candidates for a company's opportunity.

The company-side counterpart of MatchScorer. It shares the size rule but
weighs the team's shared history and availability instead of urgency and
company quality, and it reports strengths/concerns from the hiring side.
"""

from typing import List, Optional, Sequence, Tuple
import logging

from core.config_loader import TeamFitConfig, ResultPolicy
from core.scorer.models import (
    Team,
    Opportunity,
    TeamFitBreakdown,
    TeamFitScore,
    TeamMatch,
)
from core.scorer import factors
from core.scorer.insights import get_recommendation
from core.scorer.service import collect_team_skills, apply_result_policy
from core.utils import clamp_score

logger = logging.getLogger(__name__)

ANONYMOUS_DESCRIPTION = 'Team details hidden in anonymous mode. Express interest to learn more.'
WITHHELD_LOCATION = 'Location withheld'


def calculate_skills_score(team: Team, opportunity: Opportunity) -> int:
    """Required coverage is worth 70 points, preferred 30; empty lists score nothing."""
    team_skills = [s.lower() for s in collect_team_skills(team)]
    required = [s.lower() for s in opportunity.required_skills]
    preferred = [s.lower() for s in opportunity.preferred_skills]

    if not required and not preferred:
        return factors.NO_SKILLS_SCORE

    score = (factors.count_matched(required, team_skills) / max(len(required), 1)) * 70
    score += (factors.count_matched(preferred, team_skills) / max(len(preferred), 1)) * 30
    return clamp_score(score)


def calculate_industry_score(team: Team, opportunity: Opportunity, config: TeamFitConfig) -> int:
    team_industry = (team.industry or '').lower()
    opp_industry = (opportunity.industry or '').lower()

    if not team_industry or not opp_industry:
        return factors.UNKNOWN_INDUSTRY_SCORE
    if team_industry == opp_industry:
        return 100

    related = config.industry_transfers.get(team_industry, [])
    if any(r.lower() in opp_industry or opp_industry in r.lower() for r in related):
        return 75

    return factors.UNRELATED_INDUSTRY_SCORE


def calculate_location_score(team: Team, opportunity: Opportunity) -> int:
    team_location = (team.location or '').lower()
    opp_location = (opportunity.location or '').lower()
    team_remote = team.remote_status
    opp_remote = opportunity.remote_policy

    if opp_remote == 'remote':
        return 100 if team_remote == 'remote' else 90

    if team_location and opp_location and team_location == opp_location:
        return 100

    if team_remote == 'hybrid' or opp_remote == 'hybrid':
        return 70

    if team_remote == 'remote' and opp_remote == 'onsite':
        return 30

    return factors.UNKNOWN_LOCATION_SCORE


def calculate_compensation_score(team: Team, opportunity: Opportunity) -> int:
    """Score by overlap of the salary ranges, or by the relative gap between them."""
    team_min = team.salary_expectation_min or 0
    team_max = team.salary_expectation_max or 0
    opp_min = opportunity.compensation_min or 0
    opp_max = opportunity.compensation_max or 0

    if not team_min and not team_max:
        return factors.NO_COMPENSATION_DATA_SCORE
    if not opp_min and not opp_max:
        return factors.NO_COMPENSATION_DATA_SCORE

    overlap_min = max(team_min, opp_min)
    overlap_max = min(team_max, opp_max)

    if overlap_max >= overlap_min:
        overlap_size = overlap_max - overlap_min
        team_range = (team_max - team_min) or 1
        return clamp_score(70 + (overlap_size / team_range) * 30)

    gap = team_min - opp_max if team_min > opp_max else opp_min - team_max
    base = max(team_min, opp_min)
    if base <= 0:
        return 0

    gap_percent = gap / base
    return clamp_score(70 - gap_percent * 100)


def calculate_experience_score(team: Team) -> int:
    years_working = team.years_working_together or 0

    if years_working >= 5:
        return 100
    if years_working >= 3:
        return 85
    if years_working >= 2:
        return 70
    if years_working >= 1:
        return 55
    return 40


def calculate_availability_score(team: Team, config: TeamFitConfig) -> int:
    return clamp_score(config.availability_scores.get(team.availability_status or '', 0))


def extract_team_insights(team: Team, breakdown: TeamFitBreakdown) -> Tuple[List[str], List[str]]:
    """
    Explain a team's fit from the company's point of view.

    Returns: (strengths, concerns)
    """
    strengths = []
    concerns = []

    if breakdown.skills_match >= 80:
        strengths.append('Exceptional skills alignment')
    elif breakdown.skills_match < 50:
        concerns.append('Skills gap may require training')

    if breakdown.industry_match >= 90:
        strengths.append('Direct industry experience')
    elif breakdown.industry_match < 50:
        concerns.append('Industry transition needed')

    if breakdown.experience_match >= 85:
        strengths.append('Highly cohesive team')
    elif breakdown.experience_match < 50:
        concerns.append('Limited shared working history')

    if breakdown.compensation_match < 60:
        concerns.append('Compensation expectations may not align')

    if breakdown.location_match < 50:
        concerns.append('Location/remote work mismatch')

    if team.verification_status == 'verified':
        strengths.append('Verified credentials')
    elif team.verification_status == 'pending':
        concerns.append('Verification pending')

    return strengths, concerns


def is_anonymous(team: Team) -> bool:
    return team.visibility == 'anonymous' or team.is_anonymous


def anonymized_name(team: Team) -> str:
    """'Anonymous Team #' plus the last six characters of the id, upper-cased."""
    suffix = (team.id or '')[-6:].upper()
    return f'Anonymous Team #{suffix}'


class TeamFitScorer:
    """
    Scores teams for an opportunity.

    Usage:
        scorer = TeamFitScorer(TeamFitConfig())
        fit = scorer.score(team, opportunity)
    """

    def __init__(
        self,
        config: Optional[TeamFitConfig] = None,
        policy: Optional[ResultPolicy] = None
    ):
        self.config = config or TeamFitConfig()
        self.policy = policy or ResultPolicy()

    def calculate_breakdown(self, team: Team, opportunity: Opportunity) -> TeamFitBreakdown:
        return TeamFitBreakdown(
            skills_match=calculate_skills_score(team, opportunity),
            industry_match=calculate_industry_score(team, opportunity, self.config),
            location_match=calculate_location_score(team, opportunity),
            size_match=factors.calculate_size_score(team, opportunity, self.config),
            compensation_match=calculate_compensation_score(team, opportunity),
            experience_match=calculate_experience_score(team),
            availability_match=calculate_availability_score(team, self.config),
        )

    def score(self, team: Team, opportunity: Opportunity) -> TeamFitScore:
        breakdown = self.calculate_breakdown(team, opportunity)

        weights = self.config.weights
        pairs = (
            (breakdown.skills_match, weights.skills_match),
            (breakdown.industry_match, weights.industry_match),
            (breakdown.location_match, weights.location_match),
            (breakdown.size_match, weights.size_match),
            (breakdown.compensation_match, weights.compensation_match),
            (breakdown.experience_match, weights.experience_match),
            (breakdown.availability_match, weights.availability_match),
        )
        total = 0.0
        for score, weight in pairs:
            total = total + score * weight
        total = clamp_score(total)

        strengths, concerns = extract_team_insights(team, breakdown)
        logger.debug(f"Opportunity {opportunity.id} x team {team.id}: total={total}")

        return TeamFitScore(
            total=total,
            breakdown=breakdown,
            recommendation=get_recommendation(total),
            strengths=strengths,
            concerns=concerns,
        )

    def rank_teams(
        self,
        opportunity: Opportunity,
        teams: Sequence[Team],
        min_score: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[TeamMatch]:
        """Score available teams for the opportunity and return the best fits.

        Teams marked not_available are skipped before scoring.
        """
        min_score = self.policy.min_score if min_score is None else min_score
        limit = self.policy.limit if limit is None else limit

        candidates = [t for t in teams if t.availability_status != 'not_available']
        if len(candidates) > self.policy.max_candidates:
            logger.warning(f"Received {len(candidates)} available teams for opportunity {opportunity.id}; "
                           f"scoring only the first {self.policy.max_candidates}")
            candidates = candidates[:self.policy.max_candidates]

        matches = [TeamMatch(team=team, score=self.score(team, opportunity)) for team in candidates]
        ranked = apply_result_policy(matches, min_score, limit)

        logger.info(f"Scored {len(matches)} teams for opportunity {opportunity.id}, "
                    f"returning {len(ranked)} (min_score={min_score}, limit={limit})")
        return ranked
