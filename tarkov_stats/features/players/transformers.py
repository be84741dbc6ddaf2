"""Transformers for deriving view data from profile documents.

This module provides:
- Derived accessors over PlayerProfile (stats, level, equipment, skills)
- PlayerProfile -> PlayerProfileResponse for the presentation layer

Everything here is a pure function of the profile snapshot.
"""

from typing import Dict, List, Union

from tarkov_stats.algorithms.experience import (
    experience_to_next_level,
    level_for_experience,
)
from tarkov_stats.algorithms.stats import PlayerStats, stats_from_game_stats
from tarkov_stats.core.tarkov_api.constants import (
    MAIN_SLOTS,
    SLOT_GROUPS,
    StatsSide,
    slot_display_name,
)
from tarkov_stats.core.tarkov_api.models import (
    EquipmentItem,
    PlayerProfile,
    SkillEntry,
)
from tarkov_stats.utils.formatting import (
    format_item_id,
    format_number,
    format_playtime,
    format_skill_name,
)
from .schemas import (
    EquippedItemResponse,
    PlayerProfileResponse,
    PlayerStatsResponse,
    SkillResponse,
)


def player_stats(
    profile: PlayerProfile, which: Union[StatsSide, str] = StatsSide.PMC
) -> PlayerStats:
    """Aggregate PMC or Scav counters of a profile."""
    side = StatsSide(which)
    game_stats = profile.pmc_stats if side is StatsSide.PMC else profile.scav_stats
    return stats_from_game_stats(game_stats)


def player_level(profile: PlayerProfile) -> int:
    """Character level from total experience."""
    return level_for_experience(profile.info.experience)


def equipped_items(profile: PlayerProfile) -> Dict[str, EquipmentItem]:
    """Items in the main slots, keyed by slot; a later item replaces an earlier one."""
    if profile.equipment is None:
        return {}
    slot_map: Dict[str, EquipmentItem] = {}
    for item in profile.equipment.items:
        if item.slot_id is not None and item.slot_id in MAIN_SLOTS:
            slot_map[item.slot_id] = item
    return slot_map


def equipment_groups(items: Dict[str, EquipmentItem]) -> Dict[str, List[str]]:
    """Occupied slots per loadout group; empty groups are left out."""
    groups: Dict[str, List[str]] = {}
    for group, slots in SLOT_GROUPS.items():
        occupied = [slot for slot in slots if slot in items]
        if occupied:
            groups[group] = occupied
    return groups


def filtered_skills(profile: PlayerProfile) -> List[SkillEntry]:
    """Trained common skills, best first. Bot-only skills are hidden."""
    if profile.skills is None or not profile.skills.common:
        return []
    trained = [
        skill
        for skill in profile.skills.common
        if skill.progress > 0 and not skill.id.startswith("Bot")
    ]
    return sorted(trained, key=lambda skill: skill.progress, reverse=True)


def stats_to_response(stats: PlayerStats) -> PlayerStatsResponse:
    """Transform PlayerStats to its API schema, including computed metrics."""
    return PlayerStatsResponse(
        sessions=stats.sessions,
        survived=stats.survived,
        kills=stats.kills,
        deaths=stats.deaths,
        total_in_game_time=stats.total_in_game_time,
        kd=stats.kd,
        survival_rate=stats.survival_rate,
        avg_session_time=stats.avg_session_time,
        playtime=format_playtime(stats.total_in_game_time),
    )


def equipped_item_to_response(slot: str, item: EquipmentItem) -> EquippedItemResponse:
    """Transform an equipped item, flattening stack and durability state."""
    upd = item.upd
    repairable = upd.repairable if upd is not None else None
    return EquippedItemResponse(
        slot=slot,
        slot_name=slot_display_name(slot),
        item_id=item.id,
        template_id=item.tpl,
        label=format_item_id(item.tpl),
        stack_count=upd.stack_objects_count if upd is not None else None,
        durability=repairable.durability if repairable is not None else None,
        max_durability=repairable.max_durability if repairable is not None else None,
        durability_percent=(
            repairable.durability_percent if repairable is not None else None
        ),
    )


def profile_to_response(profile: PlayerProfile) -> PlayerProfileResponse:
    """Transform a profile document into the view model shown to users.

    :param profile: Decoded profile
    :returns: Profile response with derived stats, level, loadout and skills
    """
    items = equipped_items(profile)
    mastering = profile.skills.mastering if profile.skills is not None else None
    return PlayerProfileResponse(
        account_id=profile.account_id,
        nickname=profile.info.nickname,
        side=profile.info.side,
        experience=profile.info.experience,
        experience_display=format_number(profile.info.experience),
        level=player_level(profile),
        experience_to_next_level=experience_to_next_level(profile.info.experience),
        prestige_level=profile.info.prestige_level,
        member_category=profile.info.member_category,
        updated=profile.updated,
        pmc=stats_to_response(player_stats(profile, StatsSide.PMC)),
        scav=stats_to_response(player_stats(profile, StatsSide.SCAV)),
        equipment={
            slot: equipped_item_to_response(slot, items[slot])
            for slot in MAIN_SLOTS
            if slot in items
        },
        equipment_groups=equipment_groups(items),
        skills=[
            SkillResponse(
                id=skill.id,
                name=format_skill_name(skill.id),
                progress=skill.progress,
            )
            for skill in filtered_skills(profile)
        ],
        mastering_count=len(mastering or []),
        achievement_count=len(profile.achievements or {}),
    )
