"""Pydantic models for Tarkov player API response data."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PlayerInfo(BaseModel):
    """Character summary block."""

    nickname: str
    side: str
    experience: int
    member_category: Optional[int] = Field(None, alias="memberCategory")
    selected_member_category: Optional[int] = Field(
        None, alias="selectedMemberCategory"
    )
    prestige_level: Optional[int] = Field(None, alias="prestigeLevel")

    model_config = ConfigDict(populate_by_name=True)


class PlayerCustomization(BaseModel):
    """Character appearance template ids."""

    head: Optional[str] = None
    body: Optional[str] = None
    feet: Optional[str] = None
    hands: Optional[str] = None


class RepairableState(BaseModel):
    """Durability of armor and weapons."""

    durability: Optional[float] = Field(None, alias="Durability")
    max_durability: Optional[float] = Field(None, alias="MaxDurability")

    @property
    def durability_percent(self) -> Optional[float]:
        """Current durability as a percentage of max, if both are known."""
        if self.durability is None or not self.max_durability:
            return None
        return self.durability / self.max_durability * 100

    model_config = ConfigDict(populate_by_name=True)


class ItemUpdate(BaseModel):
    """Mutable item state."""

    stack_objects_count: Optional[int] = Field(None, alias="StackObjectsCount")
    repairable: Optional[RepairableState] = Field(None, alias="Repairable")

    model_config = ConfigDict(populate_by_name=True)


class EquipmentItem(BaseModel):
    """An item inside the equipment tree."""

    id: str = Field(..., alias="_id")
    tpl: str = Field(..., alias="_tpl")
    parent_id: Optional[str] = Field(None, alias="parentId")
    slot_id: Optional[str] = Field(None, alias="slotId")
    upd: Optional[ItemUpdate] = None

    model_config = ConfigDict(populate_by_name=True)


class EquipmentContainer(BaseModel):
    """Root of the equipment tree."""

    id: str = Field(..., alias="Id")
    items: List[EquipmentItem] = Field(..., alias="Items")

    model_config = ConfigDict(populate_by_name=True)


class SkillEntry(BaseModel):
    """Progress in a common skill."""

    id: str = Field(..., alias="Id")
    progress: float = Field(..., alias="Progress")
    points_earned_during_session: Optional[float] = Field(
        None, alias="PointsEarnedDuringSession"
    )
    last_access: Optional[int] = Field(None, alias="LastAccess")

    model_config = ConfigDict(populate_by_name=True)


class MasteringEntry(BaseModel):
    """Weapon mastering progress."""

    id: str = Field(..., alias="Id")
    progress: Optional[int] = Field(None, alias="Progress")

    model_config = ConfigDict(populate_by_name=True)


class PlayerSkills(BaseModel):
    """Skills block."""

    common: Optional[List[SkillEntry]] = Field(None, alias="Common")
    mastering: Optional[List[MasteringEntry]] = Field(None, alias="Mastering")
    points: Optional[float] = Field(None, alias="Points")

    model_config = ConfigDict(populate_by_name=True)


class CounterItem(BaseModel):
    """Opaque telemetry counter identified by its key path."""

    key: List[str] = Field(..., alias="Key")
    value: int = Field(..., alias="Value")

    model_config = ConfigDict(populate_by_name=True)


class OverAllCounters(BaseModel):
    """Lifetime counters."""

    items: Optional[List[CounterItem]] = Field(None, alias="Items")

    model_config = ConfigDict(populate_by_name=True)


class EFTStats(BaseModel):
    """Per-side statistics block."""

    total_in_game_time: Optional[int] = Field(None, alias="totalInGameTime")
    over_all_counters: Optional[OverAllCounters] = Field(
        None, alias="overAllCounters"
    )

    model_config = ConfigDict(populate_by_name=True)


class GameStats(BaseModel):
    """Wrapper around the eft statistics block."""

    eft: Optional[EFTStats] = None

    @property
    def counters(self) -> List[CounterItem]:
        """Counter items, empty when any level of nesting is missing."""
        if self.eft is None or self.eft.over_all_counters is None:
            return []
        return self.eft.over_all_counters.items or []

    @property
    def total_in_game_time(self) -> int:
        """Seconds spent in raids, 0 when missing."""
        if self.eft is None:
            return 0
        return self.eft.total_in_game_time or 0


class PlayerProfile(BaseModel):
    """Complete profile document for one account."""

    aid: int
    info: PlayerInfo
    customization: PlayerCustomization
    skills: Optional[PlayerSkills] = None
    equipment: Optional[EquipmentContainer] = None
    pmc_stats: Optional[GameStats] = Field(None, alias="pmcStats")
    scav_stats: Optional[GameStats] = Field(None, alias="scavStats")
    achievements: Optional[Dict[str, int]] = None
    updated: Optional[int] = None

    @property
    def account_id(self) -> str:
        """Account id as used in URLs and the search index."""
        return str(self.aid)

    model_config = ConfigDict(populate_by_name=True)
