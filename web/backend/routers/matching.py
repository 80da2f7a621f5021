#!/usr/bin/env python3
"""
Matching endpoints - rank opportunities for a team and teams for an opportunity.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from core.config_loader import ResultPolicy
from core.scorer import MatchScorer, TeamFitScorer
from ..dependencies import get_match_scorer, get_team_fit_scorer, get_result_policy
from ..rate_limit import limiter, SCORING_RATE_LIMIT
from ..services.match_service import MatchService
from ..models.requests import OpportunityMatchRequest, TeamMatchRequest, ScoreRequest
from ..models.responses import (
    OpportunityMatchesResponse,
    TeamMatchesResponse,
    ScoreResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matching", tags=["matching"])


@router.post("/opportunities", response_model=OpportunityMatchesResponse)
@limiter.limit(SCORING_RATE_LIMIT)
def match_opportunities(
    request: Request,
    body: OpportunityMatchRequest,
    min_score: Optional[int] = Query(default=None, ge=0, le=100, alias="minScore",
                                     description="Minimum total score to include"),
    limit: Optional[int] = Query(default=None, ge=1, le=100, description="Maximum results to return"),
    scorer: MatchScorer = Depends(get_match_scorer),
    policy: ResultPolicy = Depends(get_result_policy)
):
    """
    Rank opportunities for a team.

    Scores every candidate opportunity, keeps those with total >= minScore
    and returns them best first, truncated to limit. Defaults come from the
    configured result policy.
    """
    service = MatchService(scorer=scorer)
    return service.find_opportunities(
        body.team,
        body.opportunities,
        min_score=policy.min_score if min_score is None else min_score,
        limit=policy.limit if limit is None else limit
    )


@router.post("/teams", response_model=TeamMatchesResponse)
@limiter.limit(SCORING_RATE_LIMIT)
def match_teams(
    request: Request,
    body: TeamMatchRequest,
    min_score: Optional[int] = Query(default=None, ge=0, le=100, alias="minScore",
                                     description="Minimum total score to include"),
    limit: Optional[int] = Query(default=None, ge=1, le=100, description="Maximum results to return"),
    team_fit_scorer: TeamFitScorer = Depends(get_team_fit_scorer),
    policy: ResultPolicy = Depends(get_result_policy)
):
    """
    Rank teams for an opportunity.

    Teams that are not available are skipped; anonymous teams are returned
    with their identity withheld.
    """
    service = MatchService(team_fit_scorer=team_fit_scorer)
    return service.find_teams(
        body.opportunity,
        body.teams,
        min_score=policy.min_score if min_score is None else min_score,
        limit=policy.limit if limit is None else limit
    )


@router.post("/score", response_model=ScoreResponse)
@limiter.limit(SCORING_RATE_LIMIT)
def score_match(
    request: Request,
    body: ScoreRequest,
    scorer: MatchScorer = Depends(get_match_scorer)
):
    """Score a single team/opportunity pair with its full breakdown."""
    service = MatchService(scorer=scorer)
    return service.score_pair(body.team, body.opportunity, team_skills=body.team_skills)
