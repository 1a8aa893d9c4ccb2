"""CLI integration tests for insert and reorder commands."""

import os

from click.testing import CliRunner

from fest.cli import main


def _invoke(args, input=None):
    return CliRunner(catch_exceptions=False).invoke(main, args, input=input)


class TestInsertCli:

    def test_insert_phase(self, make_tree, listing):
        root = make_tree("001_PLAN", "002_BUILD")
        result = _invoke(["insert", "phase", str(root), "--after", "1", "--name", "design review", "--yes"])

        assert result.exit_code == 0
        assert "✓ Create: 002_DESIGN_REVIEW" in result.output
        assert listing(root) == ["001_PLAN", "002_DESIGN_REVIEW", "003_BUILD"]

    def test_insert_sequence_at_front(self, make_tree, listing):
        root = make_tree("001_PLAN/01_requirements")
        result = _invoke([
            "insert", "sequence", "--phase", "001_PLAN", "--festival", str(root),
            "--after", "0", "--name", "kickoff", "--yes",
        ])
        assert result.exit_code == 0
        assert listing(root / "001_PLAN") == ["01_kickoff", "02_requirements"]

    def test_insert_task_creates_empty_file(self, make_tree):
        root = make_tree("001_PLAN/01_setup/01_start.md")
        _invoke([
            "insert", "task", "--phase", "1", "--sequence", "1", "--festival", str(root),
            "--after", "1", "--name", "Write Tests", "--yes",
        ])
        assert os.path.isfile(root / "001_PLAN/01_setup/02_write_tests.md")

    def test_name_is_required(self, make_tree):
        root = make_tree("001_PLAN")
        result = _invoke(["insert", "phase", str(root), "--after", "1", "--yes"])
        assert result.exit_code == 2
        assert "--name" in result.output

    def test_blank_name_is_rejected(self, make_tree, listing):
        root = make_tree("001_PLAN")
        result = _invoke(["insert", "phase", str(root), "--after", "1", "--name", " ", "--yes"])
        assert result.exit_code == 1
        assert "a name is required" in result.output
        assert listing(root) == ["001_PLAN"]


class TestReorderCli:

    def test_reorder_phase(self, make_tree, listing):
        root = make_tree("001_A", "002_B", "003_C", "004_D", "005_E")
        result = _invoke(["reorder", "phase", "2", "4", str(root), "--yes"])

        assert result.exit_code == 0
        assert listing(root) == ["001_A", "002_C", "003_D", "004_B", "005_E"]
        assert "_tmp_reorder_" not in "".join(listing(root))

    def test_reorder_sequence(self, make_tree, listing):
        root = make_tree("001_PLAN/01_a", "001_PLAN/02_b")
        _invoke(["reorder", "sequence", "2", "1", "--phase", "1", "--festival", str(root), "--yes"])
        assert listing(root / "001_PLAN") == ["01_b", "02_a"]

    def test_reorder_task_group(self, make_tree, listing):
        root = make_tree("s/01_setup.md", "s/02_task_a.md", "s/02_task_b.md", "s/03_finish.md")
        _invoke(["reorder", "task", "2", "3", "--sequence", str(root / "s"), "--yes"])
        assert listing(root / "s") == ["01_setup.md", "02_finish.md", "03_task_a.md", "03_task_b.md"]

    def test_same_position(self, make_tree):
        root = make_tree("001_A", "002_B")
        result = _invoke(["reorder", "phase", "1", "1", str(root), "--yes"])
        assert result.exit_code == 0
        assert "No changes needed." in result.output

    def test_out_of_range(self, make_tree, listing):
        root = make_tree("001_A", "002_B")
        result = _invoke(["reorder", "phase", "1", "9", str(root), "--yes"])
        assert result.exit_code == 1
        assert "destination position 9 is out of range [1, 2]" in result.output
        assert listing(root) == ["001_A", "002_B"]
