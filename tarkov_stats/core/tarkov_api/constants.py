"""Tarkov player API constants and enum definitions."""

from enum import Enum
from typing import Dict, Tuple


class StatsSide(str, Enum):
    """Which counter block of a profile to aggregate."""

    PMC = "pmc"
    SCAV = "scav"


class EquipmentSlot(str, Enum):
    """Equipment slots shown in a loadout."""

    HEADWEAR = "Headwear"
    EARPIECE = "Earpiece"
    FACE_COVER = "FaceCover"
    EYEWEAR = "Eyewear"
    ARMOR_VEST = "ArmorVest"
    TACTICAL_VEST = "TacticalVest"
    ARM_BAND = "ArmBand"
    FIRST_PRIMARY_WEAPON = "FirstPrimaryWeapon"
    SECOND_PRIMARY_WEAPON = "SecondPrimaryWeapon"
    HOLSTER = "Holster"
    BACKPACK = "Backpack"
    SECURED_CONTAINER = "SecuredContainer"
    SCABBARD = "Scabbard"


# Slot allow-list, in display order. Items in any other slot (pockets,
# stash, mods attached to weapons) are dropped.
MAIN_SLOTS: Tuple[str, ...] = tuple(slot.value for slot in EquipmentSlot)

SLOT_DISPLAY_NAMES: Dict[str, str] = {
    "FirstPrimaryWeapon": "Primary",
    "SecondPrimaryWeapon": "Secondary",
    "Holster": "Sidearm",
    "ArmorVest": "Armor",
    "TacticalVest": "Rig",
    "FaceCover": "Face Cover",
    "SecuredContainer": "Secure",
    "ArmBand": "Armband",
}

SLOT_GROUPS: Dict[str, Tuple[str, ...]] = {
    "weapons": ("FirstPrimaryWeapon", "SecondPrimaryWeapon", "Holster", "Scabbard"),
    "gear": ("ArmorVest", "TacticalVest", "Backpack", "SecuredContainer"),
    "head": ("Headwear", "Earpiece", "FaceCover", "Eyewear"),
    "armband": ("ArmBand",),
}


def slot_display_name(slot: str) -> str:
    """Human label for a slot id, falling back to the id itself."""
    return SLOT_DISPLAY_NAMES.get(slot, slot)
