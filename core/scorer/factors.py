#!/usr/bin/env python3
"""
Factor Scores - the seven per-factor sub-scores of an opportunity match.

Every function returns an integer in [0, 100] and falls back to a neutral
default when the data it needs is missing:

- skills: 70 when the opportunity lists no skills
- industry: 50 when either industry is unknown
- location: 50 when nothing more specific can be said
- size: opportunity bounds default to [1, 20]
- compensation: 70 when either side has no figures
- urgency: 70 for unknown urgency
- company quality: 50 base
"""

from typing import Iterable, List, Optional
import logging

from core.config_loader import ScorerConfig, TeamSizeRules
from core.scorer.models import Team, Opportunity, Company
from core.utils import clamp_score

logger = logging.getLogger(__name__)

NO_SKILLS_SCORE = 70
UNKNOWN_INDUSTRY_SCORE = 50
RELATED_INDUSTRY_SCORE = 65
UNRELATED_INDUSTRY_SCORE = 40
UNKNOWN_LOCATION_SCORE = 50
NO_COMPENSATION_DATA_SCORE = 70
MIN_COMPENSATION_GAP_SCORE = 20
DEFAULT_URGENCY_SCORE = 70
COMPANY_BASE_SCORE = 50


def skill_matches(skill: str, team_skills: Iterable[str]) -> bool:
    """A skill is covered when it and a team skill contain one another (both lower-case)."""
    return any(ts in skill or skill in ts for ts in team_skills)


def count_matched(skills: List[str], team_skills: List[str]) -> int:
    return len([s for s in skills if skill_matches(s, team_skills)])


def _lowered(skills: Iterable[str]) -> List[str]:
    return [s.strip().lower() for s in skills if isinstance(s, str) and s.strip()]


def calculate_skills_score(team_skills: Iterable[str], opportunity: Opportunity) -> int:
    """
    Score required/preferred skill coverage.

    Required skills are worth 70 points and preferred skills 30; a list the
    opportunity leaves empty contributes half its points (35 / 15).
    """
    team_lower = _lowered(team_skills)
    required = _lowered(opportunity.required_skills)
    preferred = _lowered(opportunity.preferred_skills)

    if not required and not preferred:
        return NO_SKILLS_SCORE

    score = 0.0

    # Required skills (critical)
    if required:
        score += (count_matched(required, team_lower) / len(required)) * 70
    else:
        score += 35

    # Preferred skills (bonus)
    if preferred:
        score += (count_matched(preferred, team_lower) / len(preferred)) * 30
    else:
        score += 15

    return clamp_score(score)


def calculate_industry_score(team: Team, opportunity: Opportunity, config: ScorerConfig) -> int:
    """Score industry fit via exact match, the compatibility table, or shared words."""
    team_industry = (team.industry or '').lower()
    opp_industry = (opportunity.industry or '').lower()

    if not team_industry or not opp_industry:
        return UNKNOWN_INDUSTRY_SCORE
    if team_industry == opp_industry:
        return 100

    table = config.industry_compatibility
    compatibility = table.get(team_industry, {}).get(opp_industry)
    if not compatibility:
        # Check reverse
        compatibility = table.get(opp_industry, {}).get(team_industry)
    if compatibility:
        return clamp_score(compatibility, low=UNRELATED_INDUSTRY_SCORE)

    # Partial word matching
    if any(word in opp_industry for word in team_industry.split()):
        return RELATED_INDUSTRY_SCORE

    return UNRELATED_INDUSTRY_SCORE


def _region(location: str) -> str:
    """Trailing comma segment: 'Austin, TX' -> 'tx'."""
    return location.split(',')[-1].strip()


def calculate_location_score(team: Team, opportunity: Opportunity) -> int:
    """Score remote-policy compatibility, then location for onsite roles."""
    team_remote = team.remote_status
    opp_remote = opportunity.remote_policy

    # Remote opportunities work for everyone
    if opp_remote == 'remote':
        return 100

    # Remote teams need remote or hybrid opportunities
    if team_remote == 'remote':
        if opp_remote == 'hybrid':
            return 70
        if opp_remote == 'onsite':
            return 30

    if team_remote == 'hybrid' or opp_remote == 'hybrid':
        return 75

    team_location = (team.location or '').lower()
    opp_location = (opportunity.location or '').lower()
    if team_location and opp_location:
        if team_location == opp_location:
            return 100
        if _region(team_location) == _region(opp_location):
            return 70

    return UNKNOWN_LOCATION_SCORE


def calculate_size_score(
    team: Team,
    opportunity: Opportunity,
    config: Optional[TeamSizeRules] = None
) -> int:
    """Score team size against the opportunity's [min, max] bounds."""
    config = config or TeamSizeRules()
    team_size = team.effective_size
    min_size = opportunity.team_size_min or config.default_team_size_min
    max_size = opportunity.team_size_max or config.default_team_size_max

    if min_size <= team_size <= max_size:
        return 100

    if team_size < min_size:
        deficit = min_size - team_size
        return max(0, 100 - deficit * config.size_deficit_penalty)

    excess = team_size - max_size
    return max(0, 100 - excess * config.size_excess_penalty)


def calculate_compensation_score(team: Team, opportunity: Opportunity) -> int:
    """Score the opportunity's top of band against the team's expectations."""
    team_min = team.salary_expectation_min or 0
    team_max = team.salary_expectation_max or 0
    opp_min = opportunity.compensation_min or 0
    opp_max = opportunity.compensation_max or 0

    if not team_min and not team_max:
        return NO_COMPENSATION_DATA_SCORE
    if not opp_min and not opp_max:
        return NO_COMPENSATION_DATA_SCORE

    # Opportunity meets or exceeds expectations
    if opp_max >= team_max:
        return 100
    if opp_max >= team_min:
        return 85

    # Non-positive expectations leave no base for a relative gap
    if team_min <= 0:
        return MIN_COMPENSATION_GAP_SCORE

    gap_percent = (team_min - opp_max) / team_min
    return max(MIN_COMPENSATION_GAP_SCORE, clamp_score(70 - gap_percent * 100))


def calculate_urgency_bonus(opportunity: Opportunity, config: ScorerConfig) -> int:
    if opportunity.urgency is None:
        return DEFAULT_URGENCY_SCORE
    return clamp_score(config.urgency_scores.get(opportunity.urgency, DEFAULT_URGENCY_SCORE))


def calculate_company_quality(company: Optional[Company]) -> int:
    """Base 50, plus verification (+30 verified, +10 pending), logo (+10) and industry (+10)."""
    if company is None:
        return COMPANY_BASE_SCORE

    score = COMPANY_BASE_SCORE
    if company.verification_status == 'verified':
        score += 30
    elif company.verification_status == 'pending':
        score += 10

    if company.logo_url:
        score += 10
    if company.industry:
        score += 10

    return min(score, 100)
