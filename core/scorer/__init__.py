#!/usr/bin/env python3
"""
Scoring Module - rule-based team/opportunity matching.

Public API:
- MatchScorer: scores opportunities for a team
- TeamFitScorer: scores teams for an opportunity
- Team, Opportunity, Company, TeamMember: input records
- MatchScore, TeamFitScore: scored results

Modules:

- models.py: Input records and result dataclasses
- factors.py: The seven opportunity-match factor scores
- insights.py: Recommendation labels and strengths/concerns/insights
- service.py: MatchScorer orchestrator and ranking
- team_fit.py: TeamFitScorer (company side)
"""

from core.scorer.models import (
    Team,
    TeamMember,
    Company,
    Opportunity,
    ScoreBreakdown,
    MatchScore,
    OpportunityMatch,
    TeamFitBreakdown,
    TeamFitScore,
    TeamMatch,
)
from core.scorer.service import (
    MatchScorer,
    extract_team_skills,
    collect_team_skills,
    weighted_total,
    apply_result_policy,
)
from core.scorer.team_fit import TeamFitScorer

__all__ = [
    'MatchScorer',
    'TeamFitScorer',
    'Team',
    'TeamMember',
    'Company',
    'Opportunity',
    'ScoreBreakdown',
    'MatchScore',
    'OpportunityMatch',
    'TeamFitBreakdown',
    'TeamFitScore',
    'TeamMatch',
    'extract_team_skills',
    'collect_team_skills',
    'weighted_total',
    'apply_result_policy',
]
