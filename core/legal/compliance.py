#!/usr/bin/env python3
"""
Compliance Cost - rough legal budget for a liftout.
"""

from typing import Optional
import logging

from core.config_loader import LegalConfig
from core.legal.non_compete import lookup_jurisdiction
from core.utils import round_half_up

logger = logging.getLogger(__name__)


def calculate_compliance_cost(
    jurisdiction: str,
    team_size: Optional[int],
    liftout_type: Optional[str],
    config: Optional[LegalConfig] = None
) -> int:
    """Estimate compliance cost.

    Formula: base(jurisdiction) * (1 + (team_size - 1) * 0.15) * type_multiplier

    Unknown jurisdictions use the default base cost and unknown liftout types
    a multiplier of 1.0. A missing or non-positive team size counts as one
    member.
    """
    config = config or LegalConfig()

    base_cost = lookup_jurisdiction(
        config.compliance_base_costs, jurisdiction, config.default_compliance_cost
    )
    members = team_size if team_size and team_size > 0 else 1
    size_multiplier = 1 + (members - 1) * config.member_cost_multiplier
    type_multiplier = config.liftout_type_multipliers.get((liftout_type or '').lower(), 1.0)

    cost = round_half_up(base_cost * size_multiplier * type_multiplier)
    logger.debug(f"Compliance cost for {jurisdiction}, {members} members, {liftout_type}: {cost}")
    return cost
