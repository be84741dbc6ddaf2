"""Pydantic schemas for the players feature."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchIndexEntry(BaseModel):
    """One search hit: an account id and its display name."""

    id: str = Field(..., description="Numeric account id")
    name: str = Field(..., description="Player nickname")

    model_config = ConfigDict(frozen=True)


class PlayerStatsResponse(BaseModel):
    """Aggregated statistics for one side of a profile."""

    sessions: int
    survived: int
    kills: int
    deaths: int
    total_in_game_time: int = Field(..., description="Seconds spent in raids")
    kd: float = Field(..., description="Kills per death, raw kills without deaths")
    survival_rate: float = Field(..., description="Percentage of sessions survived")
    avg_session_time: float = Field(..., description="Mean seconds per session")
    playtime: str = Field(..., description="total_in_game_time as 'Xh Ym'")


class EquippedItemResponse(BaseModel):
    """An item in one of the main equipment slots."""

    slot: str
    slot_name: str
    item_id: str
    template_id: str
    label: str
    stack_count: Optional[int] = None
    durability: Optional[float] = None
    max_durability: Optional[float] = None
    durability_percent: Optional[float] = None


class SkillResponse(BaseModel):
    """Common skill progress."""

    id: str
    name: str
    progress: float


class PlayerProfileResponse(BaseModel):
    """Derived view of a profile for the presentation layer."""

    account_id: str
    nickname: str
    side: str
    experience: int
    experience_display: str = Field(..., description="Experience as 1.2M / 4.5K")
    level: int
    experience_to_next_level: int
    prestige_level: Optional[int] = None
    member_category: Optional[int] = None
    updated: Optional[int] = None
    pmc: PlayerStatsResponse
    scav: PlayerStatsResponse
    equipment: Dict[str, EquippedItemResponse] = Field(default_factory=dict)
    equipment_groups: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Occupied slots per loadout group (weapons, gear, head, armband)",
    )
    skills: List[SkillResponse] = Field(default_factory=list)
    mastering_count: int = 0
    achievement_count: int = 0
