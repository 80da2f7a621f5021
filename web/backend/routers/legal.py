#!/usr/bin/env python3
"""
Legal endpoints - non-compete risk and compliance cost.
"""

from fastapi import APIRouter, Depends, Request

from core.config_loader import LegalConfig
from ..dependencies import get_legal_config
from ..rate_limit import limiter, SCORING_RATE_LIMIT
from ..services.legal_service import LegalService
from ..models.requests import NonCompeteRequest, ComplianceCostRequest
from ..models.responses import NonCompeteResponse, ComplianceCostResponse

router = APIRouter(prefix="/api/legal", tags=["legal"])


@router.post("/non-compete", response_model=NonCompeteResponse)
@limiter.limit(SCORING_RATE_LIMIT)
def analyze_non_compete(
    request: Request,
    body: NonCompeteRequest,
    config: LegalConfig = Depends(get_legal_config)
):
    """
    Analyze how enforceable a team member's non-compete is.

    Returns enforcement likelihood (5-95), violation risk, the factors behind
    it, recommendations and mitigation options.
    """
    return LegalService(config).analyze_non_compete(body.terms, body.jurisdiction)


@router.post("/compliance-cost", response_model=ComplianceCostResponse)
def estimate_compliance_cost(
    body: ComplianceCostRequest,
    config: LegalConfig = Depends(get_legal_config)
):
    """Estimate the legal compliance cost of a liftout."""
    return LegalService(config).compliance_cost(body.jurisdiction, body.team_size, body.liftout_type)
