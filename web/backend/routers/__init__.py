"""API route handlers."""

from .matching import router as matching_router
from .legal import router as legal_router
