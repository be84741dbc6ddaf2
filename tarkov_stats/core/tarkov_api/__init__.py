"""
Tarkov player API client package.

This package provides an HTTP client for the public player profile service,
the error taxonomy it raises, and pydantic models for its documents.
"""

from .client import TarkovAPIClient
from .endpoints import TarkovAPIEndpoints, is_account_id, validate_account_id
from .errors import (
    TarkovAPIError,
    InvalidRequestError,
    NetworkError,
    DecodingError,
    PlayerNotFoundError,
)
from .models import (
    CounterItem,
    EquipmentItem,
    GameStats,
    PlayerProfile,
    SkillEntry,
)

__all__ = [
    "TarkovAPIClient",
    "TarkovAPIEndpoints",
    "is_account_id",
    "validate_account_id",
    "TarkovAPIError",
    "InvalidRequestError",
    "NetworkError",
    "DecodingError",
    "PlayerNotFoundError",
    "CounterItem",
    "EquipmentItem",
    "GameStats",
    "PlayerProfile",
    "SkillEntry",
]
