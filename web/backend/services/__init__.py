"""Business logic services."""

from .match_service import MatchService
from .legal_service import LegalService
