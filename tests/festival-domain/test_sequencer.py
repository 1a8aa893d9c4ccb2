"""Tests for change sequencing and collision checks."""

import os

from fest.festival.changes import ChangeType
from fest.festival.naming import ElementKind
from fest.festival.planner import plan_insert, plan_remove, plan_renumber, plan_reorder
from fest.festival.sequencer import TEMP_PREFIX, find_collisions, sequence, snapshot


def _steps(plan):
    return [(c.type.value, c.old_name, c.new_name) for c in plan.changes]


class TestSequenceShifts:
    """Shifts are ordered by direction of travel."""

    def test_decreasing_renames_run_lowest_first(self, make_tree):
        root = make_tree("002_IMPLEMENT", "003_REVIEW")
        plan = sequence(plan_renumber(str(root), ElementKind.PHASE))
        assert plan.sequenced
        assert _steps(plan) == [
            ("Rename", "002_IMPLEMENT", "001_IMPLEMENT"),
            ("Rename", "003_REVIEW", "002_REVIEW"),
        ]

    def test_increasing_renames_run_highest_first(self, make_tree):
        root = make_tree("01_a", "02_b", "03_c")
        plan = sequence(plan_insert(str(root), ElementKind.SEQUENCE, 0, "new"))
        assert _steps(plan) == [
            ("Rename", "03_c", "04_c"),
            ("Rename", "02_b", "03_b"),
            ("Rename", "01_a", "02_a"),
            ("Create", None, "01_new"),
        ]

    def test_mixed_directions(self, make_tree):
        root = make_tree("01_a", "02_b", "05_c", "07_d")
        plan = sequence(plan_renumber(str(root), ElementKind.SEQUENCE, 3))
        assert _steps(plan) == [
            ("Rename", "07_d", "06_d"),
            ("Rename", "02_b", "04_b"),
            ("Rename", "01_a", "03_a"),
        ]
        assert find_collisions(plan.changes, snapshot(str(root))) == []

    def test_removes_run_before_renames(self, make_tree):
        root = make_tree("01_setup.md", "02_task_a.md", "02_task_b.md", "03_finish.md")
        plan = sequence(plan_remove(str(root / "01_setup.md")))
        assert plan.changes[0].type is ChangeType.REMOVE
        assert [c.new_name for c in plan.changes[1:]] == [
            "01_task_a.md", "01_task_b.md", "02_finish.md",
        ]

    def test_sequencing_twice_is_a_no_op(self, make_tree):
        root = make_tree("002_A")
        plan = sequence(plan_renumber(str(root), ElementKind.PHASE))
        assert sequence(plan) is plan


class TestSequenceMoves:
    """Moves are staged through a temporary name."""

    def test_move_down_is_staged(self, make_tree):
        root = make_tree("001_A", "002_B", "003_C", "004_D", "005_E")
        plan = sequence(plan_reorder(str(root), ElementKind.PHASE, 2, 4))
        steps = _steps(plan)

        assert steps[0][1] == "002_B"
        assert steps[0][2].startswith(TEMP_PREFIX) and steps[0][2].endswith("_002_B")
        assert steps[1:3] == [
            ("Rename", "003_C", "002_C"),
            ("Rename", "004_D", "003_D"),
        ]
        assert steps[3] == ("Rename", steps[0][2], "004_B")
        assert find_collisions(plan.changes, snapshot(str(root))) == []

    def test_move_up_shifts_group_highest_first(self, make_tree):
        root = make_tree("01_setup.md", "02_task_a.md", "02_task_b.md", "03_finish.md")
        plan = sequence(plan_reorder(str(root), ElementKind.TASK, 3, 1))
        steps = _steps(plan)

        assert steps[0][1] == "03_finish.md" and steps[0][2].startswith(TEMP_PREFIX)
        assert steps[1:4] == [
            ("Rename", "02_task_a.md", "03_task_a.md"),
            ("Rename", "02_task_b.md", "03_task_b.md"),
            ("Rename", "01_setup.md", "02_setup.md"),
        ]
        assert steps[4] == ("Rename", steps[0][2], "01_finish.md")

    def test_temporary_names_stay_in_directory(self, make_tree):
        root = make_tree("01_a", "02_b")
        plan = sequence(plan_reorder(str(root), ElementKind.SEQUENCE, 1, 2))
        for change in plan.changes:
            assert os.path.dirname(change.new_path) == str(root)

    def test_shift_distance_uses_element_number(self, make_tree):
        root = make_tree("01_a", "02_b")
        plan = sequence(plan_reorder(str(root), ElementKind.SEQUENCE, 1, 2))
        assert [c.shift for c in plan.changes] == [1, -1, 1]


class TestFindCollisions:

    def test_unordered_insert_collides(self, make_tree):
        root = make_tree("01_a", "02_a")
        plan = plan_insert(str(root), ElementKind.SEQUENCE, 0, "a")
        collisions = find_collisions(plan.changes, snapshot(str(root)))
        assert [c.reason for c in collisions] == ["01_a already exists", "02_a already exists"]
        assert str(collisions[0]) == "step 1 (Create: 01_a): 01_a already exists"

    def test_missing_source(self, make_tree):
        root = make_tree("02_a")
        plan = plan_renumber(str(root), ElementKind.SEQUENCE)
        collisions = find_collisions(plan.changes, set())
        assert [c.reason for c in collisions] == ["02_a does not exist"]

    def test_sequenced_plan_is_clean(self, make_tree):
        root = make_tree("01_a", "02_a")
        plan = sequence(plan_insert(str(root), ElementKind.SEQUENCE, 0, "a"))
        assert find_collisions(plan.changes, snapshot(str(root))) == []
