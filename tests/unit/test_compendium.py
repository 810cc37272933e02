"""Unit tests for the typed compendium endpoints against canned responses."""
import pytest

from hyrule_compendium.domain.inputs import CompendiumCategory, EntryIdentifier
from hyrule_compendium.domain.models import CreatureEntry, MonsterEntry
from hyrule_compendium.domain.responses import AllCreatureEntries
from hyrule_compendium.errors import NoDataFoundError, ResponseParsingError, ServerError

from conftest import (
    BASE_URL,
    HORSE,
    HYRULE_BASS,
    MASTER_SWORD,
    MISSING_DATA,
    SILVER_MOBLIN,
    TREASURE_CHEST,
    WINTERWING_BUTTERFLY,
)


class TestSingleEntries:

    def test_entry_monster_by_name(self, compendium, server):
        server.add("entry/silver_moblin", {"data": SILVER_MOBLIN})
        entry = compendium.entry(EntryIdentifier.by_name("silver moblin"))
        assert isinstance(entry, MonsterEntry)
        assert entry.id == 112

    def test_entry_creature_by_name(self, compendium, server):
        server.add("entry/winterwing_butterfly", {"data": WINTERWING_BUTTERFLY})
        entry = compendium.entry("winterwing butterfly")
        assert isinstance(entry, CreatureEntry)
        assert entry.id == 67
        assert entry.name == "winterwing butterfly"

    def test_entry_by_plain_int(self, compendium, server):
        server.add("entry/1", {"data": HORSE})
        assert compendium.entry(1).name == "horse"

    def test_typed_endpoints(self, compendium, server):
        server.add("entry/112", {"data": SILVER_MOBLIN})
        server.add("entry/348", {"data": MASTER_SWORD})
        server.add("entry/177", {"data": HYRULE_BASS})
        server.add("entry/385", {"data": TREASURE_CHEST})
        server.add("entry/67", {"data": WINTERWING_BUTTERFLY})
        assert compendium.monster(112).drops[-1] == "diamond"
        assert compendium.equipment(348).attack == 30
        assert compendium.material(177).hearts_recovered == 1.0
        assert compendium.treasure(385).name == "treasure chest"
        assert compendium.creature(67).cooking_effect == "heat resistance"

    def test_master_mode_monster_path(self, compendium, server):
        server.add("master_mode/entry/silver_moblin", {"data": SILVER_MOBLIN})
        assert compendium.master_mode_monster("silver moblin").id == 112
        assert server.requested == [BASE_URL + "master_mode/entry/silver_moblin"]

    def test_typed_endpoint_wrong_category(self, compendium, server):
        server.add("entry/1", {"data": HORSE})
        with pytest.raises(ResponseParsingError):
            compendium.monster(1)


class TestErrors:

    def test_missing_entry(self, compendium):
        with pytest.raises(NoDataFoundError, match="entry/example_monster"):
            compendium.entry("example monster")

    def test_internal_server_error(self, compendium, server):
        server.add("entry/silver_moblin", {"data": SILVER_MOBLIN}, status=500)
        with pytest.raises(ServerError):
            compendium.entry("silver_moblin")

    def test_empty_data_with_ok_status(self, compendium, server):
        server.add("entry/silver_moblin", MISSING_DATA)
        with pytest.raises(ResponseParsingError) as exc:
            compendium.entry("silver_moblin")
        assert exc.value.__cause__ is not None

    def test_no_data_envelope(self, compendium, server):
        server.add("entry/112", SILVER_MOBLIN)
        with pytest.raises(ResponseParsingError, match="no 'data' field"):
            compendium.entry(112)

    def test_unknown_category_tag(self, compendium, server):
        server.add("entry/999", {"data": {**SILVER_MOBLIN, "category": "bosses"}})
        with pytest.raises(ResponseParsingError):
            compendium.entry(999)


class TestBulkEndpoints:

    def test_monster_category(self, compendium, server):
        server.add("category/monsters", {"data": [SILVER_MOBLIN]})
        result = compendium.category(CompendiumCategory.MONSTER)
        assert result.category is CompendiumCategory.MONSTER
        assert [m.id for m in result.entries] == [112]

    def test_creature_category_by_name(self, compendium, server):
        server.add("category/creatures", {"data": {"food": [WINTERWING_BUTTERFLY], "non_food": [HORSE]}})
        result = compendium.category("creatures")
        assert isinstance(result.entries, AllCreatureEntries)
        assert result.entries.food[0].is_food

    def test_unknown_category_name(self, compendium, server):
        with pytest.raises(ValueError):
            compendium.category("bosses")
        assert server.requested == []

    def test_all_entries(self, compendium, server):
        server.add("all", {"data": {
            "creatures": {"food": [WINTERWING_BUTTERFLY], "non_food": [HORSE]},
            "equipment": [MASTER_SWORD],
            "materials": [HYRULE_BASS],
            "monsters": [SILVER_MOBLIN],
            "treasure": [TREASURE_CHEST],
        }})
        entries = compendium.all_entries()
        assert len(entries.creatures.food) == 1
        assert entries.treasure[0].id == 385

    def test_all_master_mode_entries(self, compendium, server):
        server.add("master_mode/all", {"data": [SILVER_MOBLIN]})
        monsters = compendium.all_master_mode_entries()
        assert [m.name for m in monsters] == ["silver moblin"]
