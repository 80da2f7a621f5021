#!/usr/bin/env python3
"""
Legal service - non-compete analysis and compliance cost estimates.
"""

import logging
from typing import Any, Dict, Optional

from core.config_loader import LegalConfig
from core.legal import NonCompeteTerms, analyze_non_compete, calculate_compliance_cost

logger = logging.getLogger(__name__)


class LegalService:
    """Service wrapping the legal risk helpers."""

    def __init__(self, config: Optional[LegalConfig] = None):
        self.config = config or LegalConfig()

    def analyze_non_compete(self, terms_data: Dict[str, Any], jurisdiction: str) -> Dict[str, Any]:
        terms = NonCompeteTerms.from_dict(terms_data)
        analysis = analyze_non_compete(terms, jurisdiction, self.config)
        logger.info(f"Non-compete analysis for {jurisdiction}: risk={analysis.violation_risk}")
        return {'success': True, 'analysis': analysis.to_dict()}

    def compliance_cost(
        self,
        jurisdiction: str,
        team_size: int,
        liftout_type: Optional[str]
    ) -> Dict[str, Any]:
        cost = calculate_compliance_cost(jurisdiction, team_size, liftout_type, self.config)
        return {
            'success': True,
            'jurisdiction': jurisdiction,
            'teamSize': team_size,
            'liftoutType': liftout_type,
            'cost': cost,
        }
