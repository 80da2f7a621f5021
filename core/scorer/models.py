#!/usr/bin/env python3
"""
Scoring Models - Input records and scoring results.

Input records are built from the marketplace's camelCase JSON with
``from_dict``, which never raises: malformed values are coerced or dropped so
that every scoring factor sees either a usable value or None.
"""

from typing import List, Dict, Any, Optional, Mapping
from dataclasses import dataclass, field

from core.utils import safe_int, safe_number, safe_str, safe_str_list


def _as_mapping(data: Any) -> Mapping[str, Any]:
    return data if isinstance(data, Mapping) else {}


def _lower(value: Any) -> Optional[str]:
    text = safe_str(value)
    return text.lower() if text else None


def _ident(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    return safe_str(str(value))


def _count(data: Mapping[str, Any], key: str) -> Optional[int]:
    """Read a Prisma-style ``_count.<key>`` aggregate."""
    return safe_int(_as_mapping(data.get('_count')).get(key))


@dataclass
class TeamMember:
    """An active team member and the skill names on their profile."""
    id: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> 'TeamMember':
        data = _as_mapping(data)
        # Nested shape: {"user": {"skills": [{"skill": {"name": ...}}]}}
        user = _as_mapping(data.get('user')) or data

        skills = []
        raw_skills = user.get('skills')
        if isinstance(raw_skills, list):
            for entry in raw_skills:
                if isinstance(entry, Mapping):
                    entry = _as_mapping(entry.get('skill')).get('name', entry.get('name'))
                name = safe_str(entry)
                if name:
                    skills.append(name)

        first = safe_str(user.get('firstName'))
        last = safe_str(user.get('lastName'))
        name = " ".join(part for part in (first, last) if part) or safe_str(user.get('name'))
        profile = _as_mapping(user.get('profile'))

        return cls(
            id=_ident(user.get('id')),
            name=name,
            title=safe_str(profile.get('title')) or safe_str(user.get('title')),
            skills=skills,
        )


@dataclass
class Team:
    """A team record with the fields the scorers read."""
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    industry: Optional[str] = None
    specialization: Optional[str] = None
    location: Optional[str] = None
    remote_status: Optional[str] = None
    size: Optional[int] = None
    member_count: Optional[int] = None
    application_count: Optional[int] = None
    years_working_together: Optional[float] = None
    salary_expectation_min: Optional[int] = None
    salary_expectation_max: Optional[int] = None
    availability_status: Optional[str] = None
    verification_status: Optional[str] = None
    visibility: Optional[str] = None
    is_anonymous: bool = False
    members: List[TeamMember] = field(default_factory=list)
    # Skills listed on the team itself, in addition to member skills
    skills: List[str] = field(default_factory=list)

    @property
    def effective_size(self) -> int:
        """Declared size, falling back to the member count."""
        return self.size or self.member_count or 0

    @classmethod
    def from_dict(cls, data: Any) -> 'Team':
        data = _as_mapping(data)
        raw_members = data.get('members')
        members = [TeamMember.from_dict(m) for m in raw_members] if isinstance(raw_members, list) else []

        member_count = _count(data, 'members')
        if member_count is None:
            member_count = safe_int(data.get('memberCount'))
        if member_count is None and members:
            member_count = len(members)

        application_count = _count(data, 'applications')
        if application_count is None:
            application_count = safe_int(data.get('applicationCount'))

        return cls(
            id=_ident(data.get('id')),
            name=safe_str(data.get('name')),
            description=safe_str(data.get('description')),
            industry=safe_str(data.get('industry')),
            specialization=safe_str(data.get('specialization')),
            location=safe_str(data.get('location')),
            remote_status=_lower(data.get('remoteStatus')),
            size=safe_int(data.get('size')),
            member_count=member_count,
            application_count=application_count,
            years_working_together=safe_number(data.get('yearsWorkingTogether')),
            salary_expectation_min=safe_int(data.get('salaryExpectationMin')),
            salary_expectation_max=safe_int(data.get('salaryExpectationMax')),
            availability_status=_lower(data.get('availabilityStatus')),
            verification_status=_lower(data.get('verificationStatus')),
            visibility=_lower(data.get('visibility')),
            is_anonymous=data.get('isAnonymous') is True,
            members=members,
            skills=safe_str_list(data.get('skills')),
        )


@dataclass
class Company:
    """Company signals used for the company-quality factor."""
    id: Optional[str] = None
    name: Optional[str] = None
    industry: Optional[str] = None
    logo_url: Optional[str] = None
    verification_status: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'Company':
        data = _as_mapping(data)
        return cls(
            id=_ident(data.get('id')),
            name=safe_str(data.get('name')),
            industry=safe_str(data.get('industry')),
            logo_url=safe_str(data.get('logoUrl')),
            verification_status=_lower(data.get('verificationStatus')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'industry': self.industry,
            'logoUrl': self.logo_url,
            'verificationStatus': self.verification_status,
        }


@dataclass
class Opportunity:
    """An opportunity posting with its company."""
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    industry: Optional[str] = None
    location: Optional[str] = None
    remote_policy: Optional[str] = None
    team_size_min: Optional[int] = None
    team_size_max: Optional[int] = None
    compensation_min: Optional[int] = None
    compensation_max: Optional[int] = None
    compensation_currency: Optional[str] = None
    required_skills: List[str] = field(default_factory=list)
    preferred_skills: List[str] = field(default_factory=list)
    urgency: Optional[str] = None
    featured: bool = False
    application_count: int = 0
    created_at: Optional[str] = None
    company: Optional[Company] = field(default_factory=Company)

    @classmethod
    def from_dict(cls, data: Any) -> 'Opportunity':
        data = _as_mapping(data)

        application_count = _count(data, 'applications')
        if application_count is None:
            application_count = safe_int(data.get('applicationCount'), 0)

        created_at = data.get('createdAt')
        return cls(
            id=_ident(data.get('id')),
            title=safe_str(data.get('title')),
            description=safe_str(data.get('description')),
            industry=safe_str(data.get('industry')),
            location=safe_str(data.get('location')),
            remote_policy=_lower(data.get('remotePolicy')),
            team_size_min=safe_int(data.get('teamSizeMin')),
            team_size_max=safe_int(data.get('teamSizeMax')),
            compensation_min=safe_int(data.get('compensationMin')),
            compensation_max=safe_int(data.get('compensationMax')),
            compensation_currency=safe_str(data.get('compensationCurrency')),
            required_skills=safe_str_list(data.get('requiredSkills')),
            preferred_skills=safe_str_list(data.get('preferredSkills')),
            urgency=_lower(data.get('urgency')),
            featured=data.get('featured') is True,
            application_count=application_count,
            created_at=str(created_at) if created_at is not None else None,
            company=Company.from_dict(data.get('company')),
        )


@dataclass
class ScoreBreakdown:
    """The seven sub-scores of an opportunity match, each 0-100."""
    skills_match: int = 0
    industry_match: int = 0
    location_match: int = 0
    size_match: int = 0
    compensation_match: int = 0
    urgency_bonus: int = 0
    company_quality: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'skillsMatch': self.skills_match,
            'industryMatch': self.industry_match,
            'locationMatch': self.location_match,
            'sizeMatch': self.size_match,
            'compensationMatch': self.compensation_match,
            'urgencyBonus': self.urgency_bonus,
            'companyQuality': self.company_quality,
        }


@dataclass
class MatchScore:
    """Complete scored match between one team and one opportunity."""
    total: int
    breakdown: ScoreBreakdown
    recommendation: str
    strengths: List[str] = field(default_factory=list)
    concerns: List[str] = field(default_factory=list)
    insights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total': self.total,
            'breakdown': self.breakdown.to_dict(),
            'recommendation': self.recommendation,
            'strengths': list(self.strengths),
            'concerns': list(self.concerns),
            'insights': list(self.insights),
        }


@dataclass
class TeamFitBreakdown:
    """Sub-scores of a team evaluated against an opportunity, each 0-100."""
    skills_match: int = 0
    industry_match: int = 0
    location_match: int = 0
    size_match: int = 0
    compensation_match: int = 0
    experience_match: int = 0
    availability_match: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'skillsMatch': self.skills_match,
            'industryMatch': self.industry_match,
            'locationMatch': self.location_match,
            'sizeMatch': self.size_match,
            'compensationMatch': self.compensation_match,
            'experienceMatch': self.experience_match,
            'availabilityMatch': self.availability_match,
        }


@dataclass
class TeamFitScore:
    """Score of a team as a candidate for an opportunity."""
    total: int
    breakdown: TeamFitBreakdown
    recommendation: str
    strengths: List[str] = field(default_factory=list)
    concerns: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total': self.total,
            'breakdown': self.breakdown.to_dict(),
            'recommendation': self.recommendation,
            'strengths': list(self.strengths),
            'concerns': list(self.concerns),
        }


@dataclass
class OpportunityMatch:
    """A ranked opportunity together with its score."""
    opportunity: Opportunity
    score: MatchScore


@dataclass
class TeamMatch:
    """A ranked team together with its fit score."""
    team: Team
    score: TeamFitScore
