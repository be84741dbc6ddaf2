"""
Tests for profile transformers.
"""

import pytest

from tarkov_stats.algorithms.stats import PlayerStats
from tarkov_stats.core.tarkov_api.constants import StatsSide
from tarkov_stats.core.tarkov_api.models import PlayerProfile
from tarkov_stats.features.players.transformers import (
    equipment_groups,
    equipped_items,
    filtered_skills,
    player_level,
    player_stats,
    profile_to_response,
    stats_to_response,
)


@pytest.fixture
def bare_profile() -> PlayerProfile:
    """Profile with only the required blocks."""
    return PlayerProfile.model_validate(
        {
            "aid": 42,
            "info": {"nickname": "Fresh", "side": "Usec", "experience": 0},
            "customization": {},
        }
    )


class TestPlayerStats:
    """Test cases for player_stats()."""

    def test_pmc(self, sample_profile):
        assert player_stats(sample_profile) == PlayerStats(
            sessions=5, survived=4, kills=12, deaths=5, total_in_game_time=3600
        )

    def test_scav(self, sample_profile):
        stats = player_stats(sample_profile, StatsSide.SCAV)
        assert stats == PlayerStats(
            sessions=4, survived=1, kills=3, deaths=0, total_in_game_time=7260
        )
        assert stats.kd == 3

    def test_side_by_value(self, sample_profile):
        assert player_stats(sample_profile, "scav").sessions == 4

    def test_missing_blocks(self, bare_profile):
        assert player_stats(bare_profile) == PlayerStats()
        assert player_stats(bare_profile, StatsSide.SCAV) == PlayerStats()


class TestPlayerLevel:
    """Test cases for player_level()."""

    def test_exact_threshold(self, sample_profile):
        assert player_level(sample_profile) == 30

    def test_new_character(self, bare_profile):
        assert player_level(bare_profile) == 1


class TestEquippedItems:
    """Test cases for equipped_items()."""

    def test_only_main_slots(self, sample_profile):
        items = equipped_items(sample_profile)

        assert set(items) == {"Headwear", "FirstPrimaryWeapon", "SecuredContainer"}
        assert items["Headwear"].id == "helmet1"

    def test_last_item_in_slot_wins(self, sample_profile_data):
        sample_profile_data["equipment"]["Items"].append(
            {"_id": "helmet2", "_tpl": "5c06c6a80db834001b735491", "slotId": "Headwear"}
        )
        profile = PlayerProfile.model_validate(sample_profile_data)

        assert equipped_items(profile)["Headwear"].id == "helmet2"

    def test_no_equipment(self, bare_profile):
        assert equipped_items(bare_profile) == {}


class TestEquipmentGroups:
    """Test cases for equipment_groups()."""

    def test_occupied_slots_by_group(self, sample_profile):
        groups = equipment_groups(equipped_items(sample_profile))

        assert groups == {
            "weapons": ["FirstPrimaryWeapon"],
            "gear": ["SecuredContainer"],
            "head": ["Headwear"],
        }

    def test_empty_groups_left_out(self, bare_profile):
        assert equipment_groups(equipped_items(bare_profile)) == {}


class TestFilteredSkills:
    """Test cases for filtered_skills()."""

    def test_trained_non_bot_skills_by_progress(self, sample_profile):
        skills = filtered_skills(sample_profile)
        assert [skill.id for skill in skills] == [
            "Endurance",
            "AimDrills",
            "StressResistance",
        ]

    def test_no_skills(self, bare_profile):
        assert filtered_skills(bare_profile) == []


class TestStatsToResponse:
    """Test cases for stats_to_response()."""

    def test_metrics(self):
        response = stats_to_response(
            PlayerStats(
                sessions=5, survived=4, kills=12, deaths=5, total_in_game_time=3600
            )
        )

        assert response.kd == pytest.approx(2.4)
        assert response.survival_rate == pytest.approx(80.0)
        assert response.avg_session_time == pytest.approx(720.0)
        assert response.playtime == "1h 0m"

    def test_zero_sessions(self):
        response = stats_to_response(PlayerStats())

        assert response.kd == 0
        assert response.survival_rate == 0
        assert response.avg_session_time == 0
        assert response.playtime == "0m"


class TestProfileToResponse:
    """Test cases for profile_to_response()."""

    def test_summary(self, sample_profile):
        response = profile_to_response(sample_profile)

        assert response.account_id == "7654321"
        assert response.nickname == "Wiggles"
        assert response.side == "Bear"
        assert response.level == 30
        assert response.experience_display == "1.0M"
        assert response.experience_to_next_level == 1141108 - 1018908
        assert response.prestige_level == 1
        assert response.updated == 1700000500
        assert response.mastering_count == 2
        assert response.achievement_count == 1

    def test_stats(self, sample_profile):
        response = profile_to_response(sample_profile)

        assert response.pmc.sessions == 5
        assert response.pmc.kd == pytest.approx(2.4)
        assert response.scav.playtime == "2h 1m"
        assert response.scav.survival_rate == pytest.approx(25.0)

    def test_equipment_in_slot_order(self, sample_profile):
        response = profile_to_response(sample_profile)

        assert list(response.equipment) == [
            "Headwear",
            "FirstPrimaryWeapon",
            "SecuredContainer",
        ]
        helmet = response.equipment["Headwear"]
        assert helmet.slot_name == "Headwear"
        assert helmet.label == "Item 15693143"
        assert helmet.durability == 30
        assert helmet.max_durability == 40
        assert helmet.durability_percent == pytest.approx(75.0)
        primary = response.equipment["FirstPrimaryWeapon"]
        assert primary.slot_name == "Primary"
        assert primary.durability is None
        assert primary.stack_count is None
        assert response.equipment_groups["weapons"] == ["FirstPrimaryWeapon"]

    def test_skills(self, sample_profile):
        response = profile_to_response(sample_profile)

        assert [skill.name for skill in response.skills] == [
            "Endurance",
            "Aim Drills",
            "Stress Resistance",
        ]
        assert response.skills[0].progress == 5100.5

    def test_bare_profile(self, bare_profile):
        response = profile_to_response(bare_profile)

        assert response.level == 1
        assert response.experience_to_next_level == 1000
        assert response.equipment == {}
        assert response.equipment_groups == {}
        assert response.skills == []
        assert response.mastering_count == 0
        assert response.achievement_count == 0
        assert response.pmc.sessions == 0
