"""Shared fixtures for the test suite."""

import asyncio
from typing import Dict, List, Optional

import pytest

from tarkov_stats.core.tarkov_api.models import PlayerProfile


class FakeGateway:
    """In-memory PlayerGateway with optional gates to hold requests open."""

    def __init__(self, index: Dict[str, str]):
        self.index = index
        self.profiles: Dict[str, PlayerProfile] = {}
        self.index_calls = 0
        self.profile_calls: List[str] = []
        self.index_gate: Optional[asyncio.Event] = None
        self.index_errors: List[Exception] = []
        self.profile_gates: Dict[str, asyncio.Event] = {}
        self.profile_errors: Dict[str, Exception] = {}

    async def fetch_search_index(self) -> Dict[str, str]:
        self.index_calls += 1
        if self.index_gate is not None:
            await self.index_gate.wait()
        if self.index_errors:
            raise self.index_errors.pop(0)
        return dict(self.index)

    async def fetch_profile(self, account_id: str) -> PlayerProfile:
        self.profile_calls.append(account_id)
        gate = self.profile_gates.get(account_id)
        if gate is not None:
            await gate.wait()
        if account_id in self.profile_errors:
            raise self.profile_errors[account_id]
        return self.profiles[account_id]


@pytest.fixture
def sample_index() -> Dict[str, str]:
    """Account id -> nickname index."""
    return {
        "1001": "Alpha",
        "1002": "alphabet",
        "1003": "Bravo",
        "1004": "abc_sniper",
        "1005": "ABCD",
        "1006": "Charlie",
        "1007": "Zabcz",
    }


@pytest.fixture
def fake_gateway(sample_index) -> FakeGateway:
    return FakeGateway(sample_index)


@pytest.fixture
def sample_profile_data() -> dict:
    """Profile document as returned by the service."""
    return {
        "aid": 7654321,
        "info": {
            "nickname": "Wiggles",
            "side": "Bear",
            "experience": 1018908,
            "memberCategory": 0,
            "selectedMemberCategory": 0,
            "prestigeLevel": 1,
        },
        "customization": {
            "head": "5cde96047d6c8b20b577f016",
            "body": "5cc0858d14c02e000c6bea66",
            "feet": "5cc085bb14c02e000e67a5c5",
            "hands": "5cc0876314c02e000c6bea6b",
        },
        "skills": {
            "Common": [
                {"Id": "Endurance", "Progress": 5100.5, "LastAccess": 1700000000},
                {"Id": "StressResistance", "Progress": 820.0},
                {"Id": "BotReload", "Progress": 9999.0},
                {"Id": "Charisma", "Progress": 0},
                {"Id": "AimDrills", "Progress": 1200.25},
            ],
            "Mastering": [{"Id": "AK74", "Progress": 1500}, {"Id": "M4A1"}],
            "Points": 0,
        },
        "equipment": {
            "Id": "root",
            "Items": [
                {"_id": "root", "_tpl": "55d7217a4bdc2d86028b456d"},
                {
                    "_id": "helmet1",
                    "_tpl": "5aa7cfc0e5b5b00015693143",
                    "parentId": "root",
                    "slotId": "Headwear",
                    "upd": {"Repairable": {"Durability": 30, "MaxDurability": 40}},
                },
                {
                    "_id": "rifle1",
                    "_tpl": "5bf3e03b0db834001d2c4a9c",
                    "parentId": "root",
                    "slotId": "FirstPrimaryWeapon",
                },
                {
                    "_id": "mag1",
                    "_tpl": "55d480c04bdc2d1d4e8b456a",
                    "parentId": "rifle1",
                    "slotId": "mod_magazine",
                },
                {
                    "_id": "ammo1",
                    "_tpl": "5c0d5e4486f77478390952fe",
                    "parentId": "root",
                    "slotId": "pocket1",
                    "upd": {"StackObjectsCount": 60},
                },
                {
                    "_id": "case1",
                    "_tpl": "5857a8bc2459772bad15db29",
                    "parentId": "root",
                    "slotId": "SecuredContainer",
                },
            ],
        },
        "pmcStats": {
            "eft": {
                "totalInGameTime": 3600,
                "overAllCounters": {
                    "Items": [
                        {"Key": ["Sessions"], "Value": 3},
                        {"Key": ["Sessions", "Completed"], "Value": 2},
                        {"Key": ["ExitStatus", "Survived"], "Value": 4},
                        {"Key": ["Kills"], "Value": 12},
                        {"Key": ["Deaths"], "Value": 5},
                        {"Key": ["LongestWinStreak", "Pmc"], "Value": 3},
                    ]
                },
            }
        },
        "scavStats": {
            "eft": {
                "totalInGameTime": 7260,
                "overAllCounters": {
                    "Items": [
                        {"Key": ["Sessions", "Scav"], "Value": 4},
                        {"Key": ["ExitStatus", "Survived", "Scav"], "Value": 1},
                        {"Key": ["Kills"], "Value": 3},
                    ]
                },
            }
        },
        "achievements": {"6512ea46f7a078264a4376e4": 1700000000},
        "updated": 1700000500,
    }


@pytest.fixture
def sample_profile(sample_profile_data) -> PlayerProfile:
    return PlayerProfile.model_validate(sample_profile_data)
