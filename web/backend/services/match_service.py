#!/usr/bin/env python3
"""
Match service - business logic for team/opportunity matching requests.
"""

import logging
from typing import List, Optional, Dict, Any

from core.scorer import (
    MatchScorer,
    TeamFitScorer,
    Team,
    Company,
    Opportunity,
    OpportunityMatch,
    TeamMatch,
    collect_team_skills,
)
from core.scorer.team_fit import (
    ANONYMOUS_DESCRIPTION,
    WITHHELD_LOCATION,
    anonymized_name,
    is_anonymous,
)
from ..exceptions import InvalidRequestException

logger = logging.getLogger(__name__)

DESCRIPTION_PREVIEW_LENGTH = 300


def opportunity_summary(opportunity: Opportunity) -> Dict[str, Any]:
    """Serialize the opportunity fields shown on a match card."""
    description = opportunity.description
    return {
        'id': opportunity.id,
        'title': opportunity.title,
        'description': description[:DESCRIPTION_PREVIEW_LENGTH] if description else None,
        'company': (opportunity.company or Company()).to_dict(),
        'industry': opportunity.industry,
        'location': opportunity.location,
        'remotePolicy': opportunity.remote_policy,
        'compensation': {
            'min': opportunity.compensation_min,
            'max': opportunity.compensation_max,
            'currency': opportunity.compensation_currency,
        },
        'teamSize': {
            'min': opportunity.team_size_min,
            'max': opportunity.team_size_max,
        },
        'requiredSkills': list(opportunity.required_skills),
        'urgency': opportunity.urgency,
        'featured': opportunity.featured,
        'applicationCount': opportunity.application_count,
        'createdAt': opportunity.created_at,
    }


def team_card(team: Team) -> Dict[str, Any]:
    """Serialize a team for a company, hiding identity for anonymous teams."""
    card = {
        'id': team.id,
        'name': team.name,
        'description': team.description,
        'industry': team.industry,
        'specialization': team.specialization,
        'location': team.location,
        'remoteStatus': team.remote_status,
        'size': team.size,
        'yearsWorkingTogether': team.years_working_together,
        'availabilityStatus': team.availability_status,
        'verificationStatus': team.verification_status,
        'memberCount': team.member_count,
        'applicationCount': team.application_count,
        'skills': collect_team_skills(team),
        'visibility': team.visibility,
        'isAnonymous': team.is_anonymous,
    }

    if is_anonymous(team):
        card['name'] = anonymized_name(team)
        card['description'] = ANONYMOUS_DESCRIPTION
        card['location'] = WITHHELD_LOCATION if team.location else None

    return card


class MatchService:
    """Service for ranking opportunities and teams."""

    def __init__(
        self,
        scorer: Optional[MatchScorer] = None,
        team_fit_scorer: Optional[TeamFitScorer] = None
    ):
        self.scorer = scorer or MatchScorer()
        self.team_fit_scorer = team_fit_scorer or TeamFitScorer()

    def find_opportunities(
        self,
        team_data: Dict[str, Any],
        opportunities_data: List[Dict[str, Any]],
        min_score: int,
        limit: int
    ) -> Dict[str, Any]:
        """
        Rank opportunities for a team.

        Args:
            team_data: Team record (camelCase JSON).
            opportunities_data: Candidate opportunity records.
            min_score: Minimum total to include.
            limit: Maximum number of matches.

        Returns:
            Response payload with the team summary and ranked matches.

        Raises:
            InvalidRequestException: If the team record is empty.
        """
        if not team_data:
            raise InvalidRequestException("team is required")

        team = Team.from_dict(team_data)
        opportunities = [Opportunity.from_dict(o) for o in opportunities_data]

        ranked: List[OpportunityMatch] = self.scorer.rank_opportunities(
            team, opportunities, min_score=min_score, limit=limit
        )

        matches = [
            {'opportunity': opportunity_summary(m.opportunity), 'score': m.score.to_dict()}
            for m in ranked
        ]

        return {
            'success': True,
            'data': {
                'team': {
                    'id': team.id,
                    'name': team.name,
                    'industry': team.industry,
                    'skills': collect_team_skills(team),
                },
                'matches': matches,
                'total': len(matches),
            }
        }

    def find_teams(
        self,
        opportunity_data: Dict[str, Any],
        teams_data: List[Dict[str, Any]],
        min_score: int,
        limit: int
    ) -> Dict[str, Any]:
        """
        Rank teams for an opportunity.

        Raises:
            InvalidRequestException: If the opportunity record is empty.
        """
        if not opportunity_data:
            raise InvalidRequestException("opportunity is required")

        opportunity = Opportunity.from_dict(opportunity_data)
        teams = [Team.from_dict(t) for t in teams_data]

        ranked: List[TeamMatch] = self.team_fit_scorer.rank_teams(
            opportunity, teams, min_score=min_score, limit=limit
        )

        matches = [{'team': team_card(m.team), 'score': m.score.to_dict()} for m in ranked]

        return {
            'success': True,
            'data': {
                'opportunity': {
                    'id': opportunity.id,
                    'title': opportunity.title,
                    'company': opportunity.company.name if opportunity.company else None,
                    'industry': opportunity.industry,
                },
                'matches': matches,
                'total': len(matches),
            }
        }

    def score_pair(
        self,
        team_data: Dict[str, Any],
        opportunity_data: Dict[str, Any],
        team_skills: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """Score one team against one opportunity."""
        team = Team.from_dict(team_data)
        opportunity = Opportunity.from_dict(opportunity_data)
        skills = team_skills if team_skills is not None else collect_team_skills(team)

        score = self.scorer.score(team, skills, opportunity)
        return {'success': True, 'score': score.to_dict()}
