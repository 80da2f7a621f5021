#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from core.config_loader import LegalConfig, ResultPolicy
from core.scorer import MatchScorer, TeamFitScorer
from .config import get_config


def get_result_policy() -> ResultPolicy:
    """Default min_score / limit for ranking endpoints."""
    return get_config().matching.result_policy


def get_match_scorer() -> MatchScorer:
    """
    FastAPI dependency that provides the opportunity MatchScorer.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(scorer: MatchScorer = Depends(get_match_scorer)):
            ...
    """
    matching = get_config().matching
    return MatchScorer(matching.scorer, matching.result_policy)


def get_team_fit_scorer() -> TeamFitScorer:
    """FastAPI dependency that provides the company-side TeamFitScorer."""
    matching = get_config().matching
    return TeamFitScorer(matching.team_fit, matching.result_policy)


def get_legal_config() -> LegalConfig:
    return get_config().legal
