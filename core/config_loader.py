import yaml
import os
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


def _default_industry_compatibility() -> Dict[str, Dict[str, int]]:
    return {
        'financial services': {
            'fintech': 90,
            'investment banking': 95,
            'private equity': 90,
            'consulting': 75,
            'technology': 60,
        },
        'technology': {
            'fintech': 85,
            'healthcare technology': 80,
            'enterprise software': 90,
            'consulting': 65,
        },
        'healthcare': {
            'healthcare technology': 90,
            'biotechnology': 85,
            'pharmaceuticals': 80,
        },
        'consulting': {
            'financial services': 75,
            'technology': 70,
            'strategy': 90,
        },
    }


def _default_industry_transfers() -> Dict[str, List[str]]:
    return {
        'financial services': ['fintech', 'investment banking', 'private equity', 'consulting'],
        'technology': ['fintech', 'healthcare technology', 'enterprise software'],
        'healthcare': ['healthcare technology', 'biotechnology', 'pharmaceuticals'],
        'consulting': ['financial services', 'technology', 'strategy'],
    }


class _NonNegativeWeights(BaseModel):
    """Shared validation for factor weight tables."""

    @field_validator('*')
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError(f"weights must be >= 0, got {value}")
        return value


class OpportunityWeights(_NonNegativeWeights):
    """Weights for the opportunity match total (team browsing opportunities)."""
    skills_match: float = 0.30
    industry_match: float = 0.20
    location_match: float = 0.10
    size_match: float = 0.10
    compensation_match: float = 0.15
    urgency_bonus: float = 0.05
    company_quality: float = 0.10


class TeamFitWeights(_NonNegativeWeights):
    """Weights for the team fit total (company browsing teams)."""
    skills_match: float = 0.30
    industry_match: float = 0.20
    location_match: float = 0.10
    size_match: float = 0.10
    compensation_match: float = 0.15
    experience_match: float = 0.10
    availability_match: float = 0.05


class TeamSizeRules(BaseModel):
    """Team-size bounds and penalties shared by both scorers."""
    # Opportunity team-size bounds when the posting leaves them blank
    default_team_size_min: int = 1
    default_team_size_max: int = 20

    # Per-member penalties outside the size range
    size_deficit_penalty: int = 15
    size_excess_penalty: int = 10


class ScorerConfig(TeamSizeRules):
    """
    Configuration for the opportunity MatchScorer.

    Defaults reproduce the marketplace's production parameters. The industry
    table is keyed team-industry -> opportunity-industry -> score and is looked
    up in both directions.
    """
    weights: OpportunityWeights = Field(default_factory=OpportunityWeights)
    industry_compatibility: Dict[str, Dict[str, int]] = Field(
        default_factory=_default_industry_compatibility
    )

    urgency_scores: Dict[str, int] = Field(default_factory=lambda: {
        'critical': 100,
        'high': 85,
        'standard': 70,
        'low': 50,
    })

    @field_validator('industry_compatibility')
    @classmethod
    def _lowercase_table(cls, table: Dict[str, Dict[str, int]]) -> Dict[str, Dict[str, int]]:
        return {
            team.lower(): {opp.lower(): score for opp, score in row.items()}
            for team, row in table.items()
        }


class TeamFitConfig(TeamSizeRules):
    """Configuration for the TeamFitScorer."""
    weights: TeamFitWeights = Field(default_factory=TeamFitWeights)
    industry_transfers: Dict[str, List[str]] = Field(default_factory=_default_industry_transfers)
    availability_scores: Dict[str, int] = Field(default_factory=lambda: {
        'available': 100,
        'selective': 70,
        'engaged': 40,
    })


class ResultPolicy(BaseModel):
    """Post-scoring result filtering and truncation policy.

    Applied after scoring to filter and truncate results.
    """
    min_score: int = Field(default=50, ge=0, le=100)  # keep matches with total >= min_score
    limit: int = Field(default=20, ge=1)  # Maximum results to return
    max_candidates: int = Field(default=100, ge=1)  # Maximum records scored per request


class LegalConfig(BaseModel):
    """Jurisdiction tables for the non-compete and compliance helpers."""
    jurisdiction_enforcement: Dict[str, int] = Field(default_factory=lambda: {
        'California': -40,
        'New York': 10,
        'Delaware': 15,
        'Texas': 5,
        'Florida': 20,
        'Illinois': 0,
    })
    compliance_base_costs: Dict[str, int] = Field(default_factory=lambda: {
        'California': 50000,
        'New York': 125000,
        'Delaware': 75000,
        'Texas': 100000,
        'Florida': 150000,
    })
    default_compliance_cost: int = 100000
    member_cost_multiplier: float = 0.15  # each additional member adds 15%
    liftout_type_multipliers: Dict[str, float] = Field(default_factory=lambda: {
        'competitive': 1.5,
        'expansion': 1.2,
        'capability': 1.0,
        'defensive': 1.3,
    })


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    team_fit: TeamFitConfig = Field(default_factory=TeamFitConfig)

    # Result policy for post-scoring filtering and truncation
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)


class AppConfig(BaseModel):
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    legal: LegalConfig = Field(default_factory=LegalConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def load_config(config_path: Optional[str] = "config.yaml") -> AppConfig:
    """Load configuration from YAML and apply environment overrides.

    A missing file is not an error: every section has production defaults.
    """
    data = {}
    if config_path:
        # If not found at relative path (e.g. running from a subdirectory), try the project root
        if not os.path.exists(config_path):
            base_dir = os.path.dirname(os.path.abspath(__file__))
            config_path = os.path.join(base_dir, "..", os.path.basename(config_path))

        if os.path.exists(config_path):
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}

    # Allow env var override for web server address
    env_host = os.environ.get("WEB_HOST")
    if env_host:
        data.setdefault('web', {})
        data['web']['host'] = env_host

    env_port = os.environ.get("WEB_PORT")
    if env_port:
        data.setdefault('web', {})
        data['web']['port'] = int(env_port)

    # Allow env var override for result policy
    env_min_score = os.environ.get("LIFTOUT_MIN_SCORE")
    env_limit = os.environ.get("LIFTOUT_LIMIT")
    if env_min_score or env_limit:
        data.setdefault('matching', {})
        data['matching'].setdefault('result_policy', {})
        if env_min_score:
            data['matching']['result_policy']['min_score'] = int(env_min_score)
        if env_limit:
            data['matching']['result_policy']['limit'] = int(env_limit)

    return AppConfig(**data)
