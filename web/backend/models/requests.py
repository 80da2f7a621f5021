#!/usr/bin/env python3
"""
Request models for API endpoints.

Team and opportunity records are accepted as free-form objects in the
marketplace's camelCase shape; the scorer's own record parsing decides how
to treat missing or malformed fields.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class OpportunityMatchRequest(BaseModel):
    """Request to rank opportunities for a team."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "team": {
                    "id": "team-1",
                    "name": "Quant Research Pod",
                    "industry": "Financial Services",
                    "remoteStatus": "hybrid",
                    "size": 5,
                    "yearsWorkingTogether": 4,
                    "members": [{"user": {"skills": [{"skill": {"name": "Python"}}]}}]
                },
                "opportunities": [
                    {
                        "id": "opp-1",
                        "title": "Fintech Analytics Team",
                        "industry": "Fintech",
                        "remotePolicy": "remote",
                        "requiredSkills": ["python", "sql"],
                        "urgency": "high",
                        "company": {"name": "Acme", "verificationStatus": "verified"}
                    }
                ]
            }
        }
    )

    team: Dict[str, Any] = Field(..., description="Team record with members and skills")
    opportunities: List[Dict[str, Any]] = Field(default_factory=list, description="Candidate opportunities")


class TeamMatchRequest(BaseModel):
    """Request to rank teams for an opportunity."""
    opportunity: Dict[str, Any] = Field(..., description="Opportunity record with company")
    teams: List[Dict[str, Any]] = Field(default_factory=list, description="Candidate teams")


class ScoreRequest(BaseModel):
    """Request to score a single team/opportunity pair."""
    team: Dict[str, Any]
    opportunity: Dict[str, Any]
    team_skills: Optional[List[str]] = Field(
        None,
        alias="teamSkills",
        description="Precomputed team skills; derived from members when omitted"
    )

    model_config = ConfigDict(populate_by_name=True)


class NonCompeteRequest(BaseModel):
    """Request to analyze a non-compete."""
    terms: Dict[str, Any] = Field(..., description="duration, geographicScope, industryScope, compensation, ...")
    jurisdiction: str = Field(..., min_length=1, description="Governing jurisdiction, e.g. California")


class ComplianceCostRequest(BaseModel):
    """Request to estimate liftout compliance cost."""
    jurisdiction: str = Field(..., min_length=1)
    team_size: int = Field(default=1, ge=1, le=500, alias="teamSize")
    liftout_type: Optional[str] = Field(
        default=None,
        alias="liftoutType",
        description="competitive, expansion, capability or defensive"
    )

    model_config = ConfigDict(populate_by_name=True)
