"""Storage boundary: in-memory resource stores and their seed data."""

from serverless_api.boundary.seed import SEED_COURSES, SEED_USERS
from serverless_api.boundary.store import ResourceStore

__all__ = ["ResourceStore", "SEED_COURSES", "SEED_USERS"]
