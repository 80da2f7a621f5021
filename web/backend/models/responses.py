#!/usr/bin/env python3
"""
Response models for API endpoints.

Field names follow the marketplace front end's camelCase JSON contract.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class MatchScoreModel(BaseModel):
    """Score of an opportunity for a team."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "total": 82,
                "breakdown": {
                    "skillsMatch": 85,
                    "industryMatch": 90,
                    "locationMatch": 100,
                    "sizeMatch": 100,
                    "compensationMatch": 100,
                    "urgencyBonus": 85,
                    "companyQuality": 100
                },
                "recommendation": "good",
                "strengths": ["Strong skills alignment", "Direct industry experience"],
                "concerns": [],
                "insights": ["High urgency - faster decision process expected"]
            }
        }
    )

    total: int = Field(ge=0, le=100)
    breakdown: Dict[str, int]
    recommendation: str
    strengths: List[str]
    concerns: List[str]
    insights: List[str]


class TeamFitScoreModel(BaseModel):
    """Score of a team for an opportunity."""
    total: int = Field(ge=0, le=100)
    breakdown: Dict[str, int]
    recommendation: str
    strengths: List[str]
    concerns: List[str]


class CompensationRange(BaseModel):
    min: Optional[int] = None
    max: Optional[int] = None
    currency: Optional[str] = None


class TeamSizeRange(BaseModel):
    min: Optional[int] = None
    max: Optional[int] = None


class OpportunitySummary(BaseModel):
    """Opportunity fields returned alongside its score."""
    id: Optional[str]
    title: Optional[str]
    description: Optional[str]
    company: Dict[str, Any]
    industry: Optional[str]
    location: Optional[str]
    remotePolicy: Optional[str]
    compensation: CompensationRange
    teamSize: TeamSizeRange
    requiredSkills: List[str]
    urgency: Optional[str]
    featured: bool
    applicationCount: int
    createdAt: Optional[str]


class OpportunityMatchItem(BaseModel):
    opportunity: OpportunitySummary
    score: MatchScoreModel


class TeamSummary(BaseModel):
    """Team identity echoed back with its ranked opportunities."""
    id: Optional[str]
    name: Optional[str]
    industry: Optional[str]
    skills: List[str]


class OpportunityMatchesData(BaseModel):
    team: TeamSummary
    matches: List[OpportunityMatchItem]
    total: int


class OpportunityMatchesResponse(BaseModel):
    """Response containing ranked opportunities for a team."""
    success: bool
    data: OpportunityMatchesData


class TeamCard(BaseModel):
    """Team fields returned alongside its score (anonymized when requested)."""
    id: Optional[str]
    name: Optional[str]
    description: Optional[str]
    industry: Optional[str]
    specialization: Optional[str]
    location: Optional[str]
    remoteStatus: Optional[str]
    size: Optional[int]
    yearsWorkingTogether: Optional[float]
    availabilityStatus: Optional[str]
    verificationStatus: Optional[str]
    memberCount: Optional[int]
    applicationCount: Optional[int]
    skills: List[str]
    visibility: Optional[str]
    isAnonymous: bool


class TeamMatchItem(BaseModel):
    team: TeamCard
    score: TeamFitScoreModel


class OpportunityHeader(BaseModel):
    id: Optional[str]
    title: Optional[str]
    company: Optional[str]
    industry: Optional[str]


class TeamMatchesData(BaseModel):
    opportunity: OpportunityHeader
    matches: List[TeamMatchItem]
    total: int


class TeamMatchesResponse(BaseModel):
    """Response containing ranked teams for an opportunity."""
    success: bool
    data: TeamMatchesData


class ScoreResponse(BaseModel):
    """Response containing a single match score."""
    success: bool
    score: MatchScoreModel


class NonCompeteResponse(BaseModel):
    """Response containing a non-compete analysis."""
    success: bool
    analysis: Dict[str, Any]


class ComplianceCostResponse(BaseModel):
    """Response containing a compliance cost estimate."""
    success: bool
    jurisdiction: str
    teamSize: int
    liftoutType: Optional[str]
    cost: int = Field(ge=0)
