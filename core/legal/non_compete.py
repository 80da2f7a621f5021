#!/usr/bin/env python3
"""
Non-compete Analysis - how likely a member's non-compete is to be enforced.

Scoring starts at 50 and is adjusted for duration, geographic scope,
garden-leave consideration, breadth of the industry restriction and the
jurisdiction's enforcement climate. The raw score drives the violation risk
and recommendations; the reported likelihood is clamped to [5, 95].
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
import logging

from core.config_loader import LegalConfig
from core.utils import round_half_up, safe_number, safe_str, safe_str_list, format_number

logger = logging.getLogger(__name__)

BASE_ENFORCEMENT_SCORE = 50
MIN_LIKELIHOOD = 5
MAX_LIKELIHOOD = 95

DEFENSE_COSTS = 150000
SETTLEMENT_RANGE = (25000, 500000)
BUSINESS_DISRUPTION = 'Potential 6-12 month litigation timeline with temporary restraining order risk'


@dataclass
class NonCompeteTerms:
    """Restriction terms for one team member."""
    team_member_id: Optional[str] = None
    current_employer: Optional[str] = None
    duration: Optional[float] = None  # months
    geographic_scope: str = ''
    industry_scope: List[str] = field(default_factory=list)
    customer_restrictions: Optional[str] = None
    compensation: Optional[float] = None  # garden leave pay
    current_salary: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'NonCompeteTerms':
        data = data if isinstance(data, Mapping) else {}
        return cls(
            team_member_id=safe_str(data.get('teamMemberId')),
            current_employer=safe_str(data.get('currentEmployer')),
            duration=safe_number(data.get('duration')),
            geographic_scope=(safe_str(data.get('geographicScope')) or '').lower(),
            industry_scope=safe_str_list(data.get('industryScope')),
            customer_restrictions=safe_str(data.get('customerRestrictions')),
            compensation=safe_number(data.get('compensation')),
            current_salary=safe_number(data.get('currentSalary')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'teamMemberId': self.team_member_id,
            'currentEmployer': self.current_employer,
            'duration': self.duration,
            'geographicScope': self.geographic_scope,
            'industryScope': list(self.industry_scope),
            'customerRestrictions': self.customer_restrictions,
            'compensation': self.compensation,
            'currentSalary': self.current_salary,
        }


@dataclass
class EnforceabilityFactor:
    factor: str
    impact: str  # strengthens | weakens | neutral
    description: str
    weight: int  # 0-10, importance

    def to_dict(self) -> Dict[str, Any]:
        return {
            'factor': self.factor,
            'impact': self.impact,
            'description': self.description,
            'weight': self.weight,
        }


@dataclass
class MitigationOption:
    id: str
    strategy: str
    description: str
    cost: int
    timeline: str
    success_probability: int  # 0-100
    legal_requirements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'strategy': self.strategy,
            'description': self.description,
            'cost': self.cost,
            'timeline': self.timeline,
            'successProbability': self.success_probability,
            'legalRequirements': list(self.legal_requirements),
        }


@dataclass
class NonCompeteAnalysis:
    terms: NonCompeteTerms
    jurisdiction: str
    enforcement_score: int
    enforcement_likelihood: int
    violation_risk: str
    factors: List[EnforceabilityFactor] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    mitigation_options: List[MitigationOption] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'teamMemberId': self.terms.team_member_id,
            'currentEmployer': self.terms.current_employer,
            'hasNonCompete': True,
            'nonCompeteTerms': self.terms.to_dict(),
            'enforceability': {
                'jurisdiction': self.jurisdiction,
                'enforcementLikelihood': self.enforcement_likelihood,
                'factors': [f.to_dict() for f in self.factors],
                'recommendations': list(self.recommendations),
            },
            'violationRisk': self.violation_risk,
            'legalCosts': {
                'defenseCosts': DEFENSE_COSTS,
                'settlementRange': {'min': SETTLEMENT_RANGE[0], 'max': SETTLEMENT_RANGE[1]},
                'businessDisruption': BUSINESS_DISRUPTION,
            },
            'mitigationOptions': [o.to_dict() for o in self.mitigation_options],
        }


def lookup_jurisdiction(table: Mapping[str, Any], jurisdiction: str, default: Any) -> Any:
    """Case-insensitive lookup of a jurisdiction-keyed table."""
    wanted = (jurisdiction or '').strip().lower()
    for key, value in table.items():
        if key.lower() == wanted:
            return value
    return default


def calculate_enforcement_score(terms: NonCompeteTerms, jurisdiction: str, config: LegalConfig) -> int:
    score = BASE_ENFORCEMENT_SCORE

    # Duration factor (an unspecified duration leaves the score alone)
    if terms.duration is not None:
        if terms.duration <= 6:
            score += 20
        elif terms.duration <= 12:
            score += 10
        elif terms.duration > 24:
            score -= 30

    # Geographic scope factor
    scope = terms.geographic_scope
    if scope == 'worldwide':
        score -= 25
    elif 'state' in scope:
        score += 10
    elif 'city' in scope:
        score += 15

    # Consideration factor
    if (terms.compensation or 0) > 0:
        score += 15

    # Industry scope factor
    if len(terms.industry_scope) > 5:
        score -= 15
    elif len(terms.industry_scope) <= 2:
        score += 10

    score += lookup_jurisdiction(config.jurisdiction_enforcement, jurisdiction, 0)
    return score


def determine_violation_risk(score: int) -> str:
    if score >= 80:
        return 'prohibitive'
    if score >= 60:
        return 'high'
    if score >= 40:
        return 'medium'
    return 'low'


def build_enforceability_factors(terms: NonCompeteTerms) -> List[EnforceabilityFactor]:
    duration = terms.duration
    reasonable_duration = duration is not None and duration <= 12
    duration_text = f'{format_number(duration)} month' if duration is not None else 'Unspecified'
    worldwide = terms.geographic_scope == 'worldwide'
    has_consideration = (terms.compensation or 0) > 0

    return [
        EnforceabilityFactor(
            factor='Duration Reasonableness',
            impact='strengthens' if reasonable_duration else 'weakens',
            description=f"{duration_text} restriction is "
                        f"{'reasonable' if reasonable_duration else 'potentially excessive'}",
            weight=9,
        ),
        EnforceabilityFactor(
            factor='Geographic Scope',
            impact='weakens' if worldwide else 'strengthens',
            description=f"{terms.geographic_scope or 'unspecified'} scope is "
                        f"{'overly broad' if worldwide else 'reasonable'}",
            weight=8,
        ),
        EnforceabilityFactor(
            factor='Consideration',
            impact='strengthens' if has_consideration else 'weakens',
            description='Garden leave compensation provided' if has_consideration
                        else 'No consideration for restriction',
            weight=7,
        ),
    ]


def generate_recommendations(score: int, terms: NonCompeteTerms) -> List[str]:
    recommendations = []

    if score > 70:
        recommendations.append('High enforcement risk - consider negotiated release or role modification')
        recommendations.append('Garden leave period may be required to honor restriction')
    elif score > 40:
        recommendations.append('Moderate enforcement risk - review specific terms and precedents')
        recommendations.append('Consider geographic or role-based limitations to reduce conflict')
    else:
        recommendations.append('Low enforcement risk - restriction may be overly broad')
        recommendations.append('Potential to challenge enforceability based on scope or consideration')

    if terms.compensation is not None and terms.compensation == 0:
        recommendations.append('Lack of consideration weakens enforceability significantly')

    return recommendations


def generate_mitigation_options(terms: NonCompeteTerms, score: int) -> List[MitigationOption]:
    duration = terms.duration or 0
    options = [
        MitigationOption(
            id='garden-leave',
            strategy='garden_leave',
            description=f'Honor non-compete with {format_number(duration)} months garden leave at current salary',
            cost=round_half_up((terms.current_salary or 0) * (duration / 12)),
            timeline=f'{format_number(duration)} months',
            success_probability=95,
            legal_requirements=['Formal notice to current employer', 'Written garden leave agreement'],
        ),
    ]

    if score < 70:
        options.append(MitigationOption(
            id='role-mod',
            strategy='role_modification',
            description='Modify role to avoid direct competition while maintaining team leadership',
            cost=50000,
            timeline='2-3 months',
            success_probability=70,
            legal_requirements=['Legal opinion on role differentiation', 'Modified job description'],
        ))

    options.append(MitigationOption(
        id='negotiated',
        strategy='negotiated_release',
        description='Negotiate partial or complete release from non-compete restrictions',
        cost=100000,
        timeline='3-6 months',
        success_probability=60,
        legal_requirements=['Formal release agreement', 'Consideration payment'],
    ))

    return options


def analyze_non_compete(
    terms: NonCompeteTerms,
    jurisdiction: str,
    config: Optional[LegalConfig] = None
) -> NonCompeteAnalysis:
    """Assess enforceability of a non-compete in a jurisdiction.

    Args:
        terms: Restriction terms for one member
        jurisdiction: Governing jurisdiction, e.g. "California"
        config: Jurisdiction tables (defaults to LegalConfig())

    Returns:
        NonCompeteAnalysis with likelihood, risk, factors, recommendations
        and mitigation options
    """
    config = config or LegalConfig()
    score = calculate_enforcement_score(terms, jurisdiction, config)
    likelihood = min(MAX_LIKELIHOOD, max(MIN_LIKELIHOOD, score))

    logger.debug(f"Non-compete in {jurisdiction}: score={score}, likelihood={likelihood}")

    return NonCompeteAnalysis(
        terms=terms,
        jurisdiction=jurisdiction,
        enforcement_score=score,
        enforcement_likelihood=likelihood,
        violation_risk=determine_violation_risk(score),
        factors=build_enforceability_factors(terms),
        recommendations=generate_recommendations(score, terms),
        mitigation_options=generate_mitigation_options(terms, score),
    )
