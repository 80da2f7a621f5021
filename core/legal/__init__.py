"""
Legal risk helpers for liftout transactions.

- non_compete.py: Non-compete enforceability analysis
- compliance.py: Compliance cost estimate
"""

from core.legal.non_compete import (
    NonCompeteTerms,
    NonCompeteAnalysis,
    EnforceabilityFactor,
    MitigationOption,
    analyze_non_compete,
    calculate_enforcement_score,
    determine_violation_risk,
    lookup_jurisdiction,
)
from core.legal.compliance import calculate_compliance_cost

__all__ = [
    'NonCompeteTerms',
    'NonCompeteAnalysis',
    'EnforceabilityFactor',
    'MitigationOption',
    'analyze_non_compete',
    'calculate_enforcement_score',
    'determine_violation_risk',
    'lookup_jurisdiction',
    'calculate_compliance_cost',
]
