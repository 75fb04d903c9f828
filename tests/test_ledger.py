"""Tests for the edit ledger — recording, reconciliation, clearing."""

import copy
import threading

import pytest

from locdiff.edits.ledger import EditLedger, InvalidSlotError
from locdiff.edits.models import SLOT_LEFT, SLOT_RIGHT, EditRecord, EditType


@pytest.fixture
def ledger() -> EditLedger:
    return EditLedger()


class TestAddAndGet:
    def test_initially_empty(self, ledger):
        assert ledger.has_edits(SLOT_LEFT) is False
        assert ledger.has_edits(SLOT_RIGHT) is False
        assert ledger.has_any_edits() is False
        assert ledger.get_file_edits(SLOT_LEFT) == {}

    def test_add_edit_records_fields(self, ledger):
        record = ledger.add_edit("slot1", "app.title", "New Title")
        assert isinstance(record, EditRecord)
        stored = ledger.get_edit("slot1", "app.title")
        assert stored == record
        assert stored.new_value == "New Title"
        assert stored.edit_type is EditType.MODIFY
        assert stored.timestamp > 0

    def test_edit_type_string_accepted(self, ledger):
        ledger.add_edit("slot2", "app.new", "x", "add")
        assert ledger.get_edit("slot2", "app.new").edit_type is EditType.ADD

    def test_unknown_edit_type_rejected(self, ledger):
        with pytest.raises(ValueError):
            ledger.add_edit("slot1", "a", "x", "rename")

    def test_last_write_wins(self, ledger):
        ledger.add_edit("slot1", "p", "v1")
        ledger.add_edit("slot1", "p", "v2")
        assert ledger.get_edit("slot1", "p").new_value == "v2"
        assert len(ledger.get_file_edits("slot1")) == 1

    def test_slots_are_independent(self, ledger):
        ledger.add_edit("slot1", "p", "left")
        ledger.add_edit("slot2", "p", "right")
        assert ledger.get_edit("slot1", "p").new_value == "left"
        assert ledger.get_edit("slot2", "p").new_value == "right"

    def test_get_missing_edit(self, ledger):
        assert ledger.get_edit("slot1", "nothing.here") is None

    def test_has_any_edits(self, ledger):
        ledger.add_edit("slot2", "a", 1)
        assert ledger.has_edits("slot2") is True
        assert ledger.has_edits("slot1") is False
        assert ledger.has_any_edits() is True

    def test_file_edits_is_a_copy(self, ledger):
        ledger.add_edit("slot1", "a", 1)
        edits = ledger.get_file_edits("slot1")
        edits.clear()
        assert ledger.has_edits("slot1") is True


class TestInvalidSlot:
    @pytest.mark.parametrize("slot", ["file1", "slot3", "", None, 1])
    def test_add_edit_raises(self, ledger, slot):
        with pytest.raises(InvalidSlotError) as exc_info:
            ledger.add_edit(slot, "a", 1)
        assert exc_info.value.slot == slot

    def test_message_names_value_and_options(self, ledger):
        with pytest.raises(InvalidSlotError, match=r"'file3'.*'slot1'.*'slot2'"):
            ledger.add_edit("file3", "a", 1)

    def test_strict_methods_raise(self, ledger):
        with pytest.raises(InvalidSlotError):
            ledger.get_edit("bogus", "a")
        with pytest.raises(InvalidSlotError):
            ledger.apply_edit("bogus", {})
        with pytest.raises(InvalidSlotError):
            ledger.clear_edits("bogus")

    def test_lenient_reads(self, ledger):
        base = {"a": 1}
        assert ledger.get_file_edits("bogus") == {}
        assert ledger.get_current_data("bogus", base) is base
        assert ledger.has_edits("bogus") is False

    def test_is_value_error(self):
        assert issubclass(InvalidSlotError, ValueError)


class TestApplyEdit:
    def test_modify_nested(self, ledger):
        base = {"x": {"y": "old", "z": 1}}
        ledger.add_edit("slot1", "x.y", "new")
        result = ledger.apply_edit("slot1", base)
        assert result == {"x": {"y": "new", "z": 1}}
        assert base["x"]["y"] == "old"

    def test_upsert_creates_path(self, ledger):
        ledger.add_edit("slot1", "a.b.c", "x")
        assert ledger.apply_edit("slot1", {}) == {"a": {"b": {"c": "x"}}}

    def test_base_not_mutated(self, ledger, en_doc):
        before = copy.deepcopy(en_doc)
        ledger.add_edit("slot1", "app.menu.file", "Datei")
        ledger.add_edit("slot1", "brand.new.key", [1, 2])
        ledger.apply_edit("slot1", en_doc)
        assert en_doc == before

    def test_idempotent(self, ledger, fr_doc):
        ledger.add_edit("slot2", "app.menu.edit", "Modifier", "add")
        first = ledger.apply_edit("slot2", fr_doc)
        second = ledger.apply_edit("slot2", fr_doc)
        assert first == second
        assert first is not second

    def test_only_own_slot_applied(self, ledger):
        ledger.add_edit("slot1", "a", "left")
        ledger.add_edit("slot2", "a", "right")
        assert ledger.apply_edit("slot2", {"a": "orig"}) == {"a": "right"}

    def test_edit_value_copied(self, ledger):
        value = {"nested": ["x"]}
        ledger.add_edit("slot1", "k", value)
        result = ledger.apply_edit("slot1", {})
        result["k"]["nested"].append("y")
        assert value == {"nested": ["x"]}

    def test_none_base(self, ledger):
        ledger.add_edit("slot1", "a", 1)
        assert ledger.apply_edit("slot1", None) == {"a": 1}

    def test_no_edits_returns_copy(self, ledger, en_doc):
        result = ledger.apply_edit("slot1", en_doc)
        assert result == en_doc
        assert result is not en_doc

    def test_delete_edit_writes_value(self, ledger):
        ledger.add_edit("slot1", "a", None, EditType.DELETE)
        assert ledger.apply_edit("slot1", {"a": "x"}) == {"a": None}


class TestCurrentData:
    def test_returns_base_before_apply(self, ledger):
        base = {"a": 1}
        ledger.add_edit("slot1", "a", 2)
        assert ledger.get_current_data("slot1", base) is base

    def test_returns_snapshot_after_apply(self, ledger):
        base = {"a": 1}
        ledger.add_edit("slot1", "a", 2)
        applied = ledger.apply_edit("slot1", base)
        assert ledger.get_current_data("slot1", base) is applied

    def test_snapshot_not_refreshed_by_new_edit(self, ledger):
        base = {"a": 1}
        ledger.add_edit("slot1", "a", 2)
        ledger.apply_edit("slot1", base)
        ledger.add_edit("slot1", "a", 3)
        assert ledger.get_current_data("slot1", base) == {"a": 2}

    def test_empty_snapshot_is_still_a_snapshot(self, ledger):
        base = {"a": 1}
        ledger.apply_edit("slot1", {})
        assert ledger.get_current_data("slot1", base) == {}


class TestClear:
    def test_clear_edits_resets_snapshot(self, ledger):
        base = {"p": "orig"}
        ledger.add_edit("slot1", "p", "v")
        ledger.apply_edit("slot1", base)
        ledger.clear_edits("slot1")
        assert ledger.get_current_data("slot1", base) is base
        assert ledger.has_edits("slot1") is False

    def test_clear_edits_leaves_other_slot(self, ledger):
        ledger.add_edit("slot1", "a", 1)
        ledger.add_edit("slot2", "a", 2)
        ledger.apply_edit("slot2", {})
        ledger.clear_edits("slot1")
        assert ledger.has_edits("slot2") is True
        assert ledger.get_current_data("slot2", {"x": 0}) == {"a": 2}

    def test_clear_all(self, ledger):
        ledger.add_edit("slot1", "a", 1)
        ledger.add_edit("slot2", "a", 2)
        ledger.apply_edit("slot1", {})
        ledger.apply_edit("slot2", {})
        ledger.clear_all_edits()
        assert ledger.has_any_edits() is False
        base = {"b": 0}
        assert ledger.get_current_data("slot1", base) is base
        assert ledger.get_current_data("slot2", base) is base

    def test_clear_all_on_empty_ledger(self, ledger):
        ledger.clear_all_edits()
        assert ledger.has_any_edits() is False


class TestThreadSafety:
    def test_concurrent_add_edits(self, ledger):
        def worker(slot: str, start: int) -> None:
            for i in range(start, start + 200):
                ledger.add_edit(slot, f"k{i}", i)

        threads = [
            threading.Thread(target=worker, args=(slot, n * 200))
            for n, slot in enumerate(["slot1", "slot2", "slot1", "slot2"])
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(ledger.get_file_edits("slot1")) == 400
        assert len(ledger.get_file_edits("slot2")) == 400
