#!/usr/bin/env python3
"""
Match Explanations - recommendation labels and human-readable insights.
"""

from typing import List, Tuple

from core.scorer.models import Team, Opportunity, ScoreBreakdown
from core.utils import format_number

# Recommendation thresholds on the 0-100 total (lower bounds, inclusive)
EXCELLENT_THRESHOLD = 85
GOOD_THRESHOLD = 70
FAIR_THRESHOLD = 55

COMPETITIVE_APPLICATION_COUNT = 10
COHESIVE_TEAM_YEARS = 3


def get_recommendation(total: int) -> str:
    if total >= EXCELLENT_THRESHOLD:
        return 'excellent'
    if total >= GOOD_THRESHOLD:
        return 'good'
    if total >= FAIR_THRESHOLD:
        return 'fair'
    return 'poor'


def extract_insights(
    team: Team,
    opportunity: Opportunity,
    breakdown: ScoreBreakdown
) -> Tuple[List[str], List[str], List[str]]:
    """
    Explain a match from the team's point of view.

    Returns: (strengths, concerns, insights)
    """
    strengths = []
    concerns = []
    insights = []

    # Strengths
    if breakdown.skills_match >= 80:
        strengths.append('Strong skills alignment')
    if breakdown.industry_match >= 90:
        strengths.append('Direct industry experience')
    if breakdown.compensation_match >= 85:
        strengths.append('Compensation meets expectations')
    if opportunity.featured:
        strengths.append('Featured opportunity')
    company = opportunity.company
    if company is not None and company.verification_status == 'verified':
        strengths.append('Verified company')

    # Concerns
    if breakdown.skills_match < 50:
        concerns.append('Skills gap may require training')
    if breakdown.industry_match < 50:
        concerns.append('Significant industry transition')
    if breakdown.compensation_match < 60:
        concerns.append('Below compensation expectations')
    if breakdown.location_match < 50:
        concerns.append('Location/remote work mismatch')
    if breakdown.size_match < 70:
        concerns.append("Team size doesn't match requirements")

    # Insights
    if breakdown.urgency_bonus >= 85:
        insights.append('High urgency - faster decision process expected')
    if opportunity.application_count > COMPETITIVE_APPLICATION_COUNT:
        insights.append(f'Competitive opportunity with {opportunity.application_count}+ applications')
    years_working = team.years_working_together or 0
    if years_working >= COHESIVE_TEAM_YEARS:
        insights.append(f'{format_number(years_working)} years of team cohesion provides competitive advantage')

    return strengths, concerns, insights
