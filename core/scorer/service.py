#!/usr/bin/env python3
"""
Match Scorer - weighted multi-factor match between a team and an opportunity.

Takes a team (with its aggregated skills) and an opportunity and produces:
- Seven factor sub-scores (skills, industry, location, size, compensation,
  urgency, company quality), each 0-100
- A weighted total, rounded half-up and clamped to 0-100
- A recommendation label and strengths / concerns / insights

Pure and stateless: the scorer holds only its configuration, so one instance
can serve concurrent requests.
"""

from typing import List, Optional, Iterable, Sequence
import logging

from core.config_loader import ScorerConfig, ResultPolicy
from core.scorer.models import (
    Team,
    TeamMember,
    Opportunity,
    ScoreBreakdown,
    MatchScore,
    OpportunityMatch,
)
from core.scorer import factors
from core.scorer.insights import get_recommendation, extract_insights
from core.utils import clamp_score

logger = logging.getLogger(__name__)


def extract_team_skills(members: Iterable[TeamMember]) -> List[str]:
    """Union of member skill names, case preserved, first occurrence wins."""
    skills = {}
    for member in members:
        for skill in member.skills:
            skills.setdefault(skill, None)
    return list(skills)


def collect_team_skills(team: Team) -> List[str]:
    """Member skills plus any skills listed on the team record itself."""
    skills = dict.fromkeys(extract_team_skills(team.members))
    for skill in team.skills:
        skills.setdefault(skill, None)
    return list(skills)


def weighted_total(breakdown: ScoreBreakdown, config: ScorerConfig) -> int:
    """Weighted sum of the breakdown in factor order, rounded and clamped."""
    weights = config.weights
    pairs = (
        (breakdown.skills_match, weights.skills_match),
        (breakdown.industry_match, weights.industry_match),
        (breakdown.location_match, weights.location_match),
        (breakdown.size_match, weights.size_match),
        (breakdown.compensation_match, weights.compensation_match),
        (breakdown.urgency_bonus, weights.urgency_bonus),
        (breakdown.company_quality, weights.company_quality),
    )
    total = 0.0
    for score, weight in pairs:
        total = total + score * weight
    return clamp_score(total)


def apply_result_policy(matches: List, min_score: int, limit: int) -> List:
    """Keep matches with total >= min_score, best first, truncated to limit.

    Sorting is stable so equal totals keep their input order.
    """
    filtered = [m for m in matches if m.score.total >= min_score]
    filtered.sort(key=lambda m: m.score.total, reverse=True)
    return filtered[:max(limit, 0)]


class MatchScorer:
    """
    Scores opportunities for a team.

    Usage:
        scorer = MatchScorer(ScorerConfig())
        match = scorer.score(team, collect_team_skills(team), opportunity)
    """

    def __init__(
        self,
        config: Optional[ScorerConfig] = None,
        policy: Optional[ResultPolicy] = None
    ):
        self.config = config or ScorerConfig()
        self.policy = policy or ResultPolicy()

    def calculate_breakdown(
        self,
        team: Team,
        team_skills: Iterable[str],
        opportunity: Opportunity
    ) -> ScoreBreakdown:
        return ScoreBreakdown(
            skills_match=factors.calculate_skills_score(team_skills, opportunity),
            industry_match=factors.calculate_industry_score(team, opportunity, self.config),
            location_match=factors.calculate_location_score(team, opportunity),
            size_match=factors.calculate_size_score(team, opportunity, self.config),
            compensation_match=factors.calculate_compensation_score(team, opportunity),
            urgency_bonus=factors.calculate_urgency_bonus(opportunity, self.config),
            company_quality=factors.calculate_company_quality(opportunity.company),
        )

    def score(
        self,
        team: Team,
        team_skills: Iterable[str],
        opportunity: Opportunity
    ) -> MatchScore:
        """Calculate the match between one team and one opportunity.

        Args:
            team: Team record
            team_skills: Skill names aggregated from the team's members
            opportunity: Opportunity record (with company)

        Returns:
            MatchScore with total, breakdown, recommendation and explanations
        """
        breakdown = self.calculate_breakdown(team, list(team_skills), opportunity)
        total = weighted_total(breakdown, self.config)
        strengths, concerns, insights = extract_insights(team, opportunity, breakdown)

        logger.debug(f"Team {team.id} x opportunity {opportunity.id}: total={total}")

        return MatchScore(
            total=total,
            breakdown=breakdown,
            recommendation=get_recommendation(total),
            strengths=strengths,
            concerns=concerns,
            insights=insights,
        )

    def rank_opportunities(
        self,
        team: Team,
        opportunities: Sequence[Opportunity],
        min_score: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[OpportunityMatch]:
        """Score each opportunity once and return the best matches.

        Args:
            team: Team looking for opportunities
            opportunities: Candidate opportunities (at most max_candidates are scored)
            min_score: Minimum total to keep (defaults to the result policy)
            limit: Maximum results (defaults to the result policy)

        Returns:
            OpportunityMatch list sorted by total, highest first
        """
        min_score = self.policy.min_score if min_score is None else min_score
        limit = self.policy.limit if limit is None else limit

        candidates = list(opportunities)
        if len(candidates) > self.policy.max_candidates:
            logger.warning(f"Received {len(candidates)} opportunities for team {team.id}; "
                           f"scoring only the first {self.policy.max_candidates}")
            candidates = candidates[:self.policy.max_candidates]
        team_skills = collect_team_skills(team)

        matches = [
            OpportunityMatch(opportunity=opp, score=self.score(team, team_skills, opp))
            for opp in candidates
        ]
        ranked = apply_result_policy(matches, min_score, limit)

        logger.info(f"Scored {len(matches)} opportunities for team {team.id}, "
                    f"returning {len(ranked)} (min_score={min_score}, limit={limit})")
        return ranked
