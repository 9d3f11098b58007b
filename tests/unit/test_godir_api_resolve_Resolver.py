"""Unit tests for godir.api.resolve.Resolver."""

import json

import pytest

from godir.api.config.GodirConfig import GodirConfig
from godir.api.errors import ConfigCorruptError, InvalidPatternError, ScanRootError
from tests.conftest import make_tree

pytestmark = pytest.mark.resolve


def write_config(config_path, directories, excludes=()):
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps({"directories": list(directories), "excludes": list(excludes)}))


def stored(config_path):
    return json.loads(config_path.read_text())["directories"]


class TestMatchAgainstStore:
    def test_single_match_needs_no_prompt(self, make_resolver, config_path):
        write_config(config_path, ["/a/dev"])
        resolver, prompter = make_resolver()

        assert resolver.resolve("dev") == "/a/dev"
        assert prompter.questions == []

    def test_multiple_matches_pick_by_number(self, make_resolver, config_path, display):
        write_config(config_path, ["/a/dev", "/b/dev2"])
        resolver, prompter = make_resolver("2")

        assert resolver.resolve("dev") == "/b/dev2"
        assert display.messages["info"] == ["Multiple matches found:", "1: /a/dev", "2: /b/dev2"]
        assert len(prompter.questions) == 1

    @pytest.mark.parametrize("answer", ["0", "3", "-1", "abc", "", " "])
    def test_invalid_selection_emits_nothing(self, make_resolver, config_path, display, answer):
        write_config(config_path, ["/a/dev", "/b/dev2"])
        resolver, _prompter = make_resolver(answer)

        assert resolver.resolve("dev") is None
        assert display.messages["error"] == ["Invalid choice."]

    def test_selection_tolerates_whitespace(self, make_resolver, config_path):
        write_config(config_path, ["/a/dev", "/b/dev2"])
        resolver, _prompter = make_resolver(" 1 \n")

        assert resolver.resolve("dev") == "/a/dev"

    def test_invalid_pattern_fails_before_writing_config(self, make_resolver, config_path):
        resolver, prompter = make_resolver()

        with pytest.raises(InvalidPatternError):
            resolver.resolve("[")

        assert not config_path.exists()
        assert prompter.questions == []

    def test_corrupt_config_fails(self, make_resolver, config_path):
        config_path.write_text("{broken")
        resolver, _prompter = make_resolver()

        with pytest.raises(ConfigCorruptError):
            resolver.resolve("dev")

    def test_case_insensitive_policy(self, make_resolver, config_path):
        from godir.api.platform.PlatformPolicy import PlatformPolicy

        write_config(config_path, ["/Users/cj/Dev"])
        resolver, _prompter = make_resolver(policy=PlatformPolicy(case_insensitive=True))

        assert resolver.resolve("dev") == "/Users/cj/Dev"


class TestLiteralPath:
    def test_current_directory_is_added_and_emitted(self, make_resolver, config_path, tmp_path, monkeypatch, display):
        monkeypatch.chdir(tmp_path)
        resolver, prompter = make_resolver()

        assert resolver.resolve(".") == str(tmp_path)
        assert stored(config_path) == [str(tmp_path)]
        assert display.messages["success"] == [f"Added directory to config: {tmp_path}"]
        assert prompter.questions == []

    def test_current_directory_added_only_once(self, make_resolver, config_path, tmp_path, monkeypatch, display):
        monkeypatch.chdir(tmp_path)
        resolver, _prompter = make_resolver()

        resolver.resolve(".")
        resolver.resolve(".")

        assert stored(config_path) == [str(tmp_path)]
        assert len(display.messages["success"]) == 1

    def test_relative_path_is_canonicalized(self, make_resolver, config_path, tmp_path, monkeypatch):
        make_tree(tmp_path, "project/src")
        monkeypatch.chdir(tmp_path / "project")
        resolver, _prompter = make_resolver()

        assert resolver.resolve("./src/../src") == str(tmp_path / "project" / "src")

    def test_home_marker_is_expanded(self, make_resolver, tmp_path, monkeypatch):
        make_tree(tmp_path, "work")
        monkeypatch.setenv("HOME", str(tmp_path))
        resolver, _prompter = make_resolver()

        assert resolver.resolve("~/work") == str(tmp_path / "work")

    def test_absolute_path_is_kept(self, make_resolver, config_path, tmp_path):
        target = make_tree(tmp_path / "abs")
        resolver, _prompter = make_resolver()

        assert resolver.resolve(str(target)) == str(target)
        assert stored(config_path) == [str(target)]

    def test_literal_path_keeps_store_sorted(self, make_resolver, config_path, tmp_path):
        write_config(config_path, ["/zzz"])
        target = make_tree(tmp_path / "abs")
        resolver, _prompter = make_resolver()

        resolver.resolve(str(target))

        assert stored(config_path) == sorted([str(target), "/zzz"])

    def test_invalid_literal_path_falls_through_to_matching(self, make_resolver, config_path, tmp_path, display):
        write_config(config_path, ["/srv/missing-x"])
        resolver, prompter = make_resolver()

        assert resolver.resolve("/missing-x") == "/srv/missing-x"
        assert display.messages["error"] == ["Not a valid directory: /missing-x"]
        assert prompter.questions == []

    def test_overlong_literal_path_falls_through_to_matching(self, make_resolver, config_path, display):
        literal = "/" + "x" * 300
        resolver, prompter = make_resolver("n", "n")

        assert resolver.resolve(literal) is None
        assert display.messages["error"] == [f"Not a valid directory: {literal}"]
        assert display.messages["warning"] == [f"No matching directories found for pattern: {literal}"]
        assert len(prompter.questions) == 2


class TestInteractiveFallback:
    def test_declining_everything_emits_nothing(self, make_resolver, config_path, display):
        resolver, prompter = make_resolver("n", "n")

        assert resolver.resolve("dev") is None
        assert display.messages["warning"] == ["No matching directories found for pattern: dev"]
        assert prompter.questions == [
            "Would you like to manually enter the directory path? [y/N]",
            "Would you like to perform a full directory scan? [y/N]",
        ]
        assert stored(config_path) == []

    def test_manual_entry_is_added(self, make_resolver, config_path, tmp_path):
        target = make_tree(tmp_path / "manual-dev")
        resolver, _prompter = make_resolver("y", str(target))

        assert resolver.resolve("dev") == str(target)
        assert stored(config_path) == [str(target)]

    def test_manual_entry_accepts_yes_in_any_case(self, make_resolver, tmp_path):
        target = make_tree(tmp_path / "manual")
        resolver, _prompter = make_resolver("YES", str(target))

        assert resolver.resolve("dev") == str(target)

    def test_invalid_manual_entry_offers_scan(self, make_resolver, config_path, tmp_path, display):
        root = make_tree(tmp_path / "root", "alpha/zebra-one", "beta")
        resolver, prompter = make_resolver("y", str(tmp_path / "nope"), "y", scan_root=root)

        assert resolver.resolve("zebra") == str(root / "alpha" / "zebra-one")
        assert display.messages["error"] == ["Invalid directory path."]
        assert len(prompter.questions) == 3
        assert stored(config_path) == [str(root / "alpha" / "zebra-one")]

    def test_empty_manual_entry_is_invalid(self, make_resolver, display):
        resolver, _prompter = make_resolver("y", "", "n")

        assert resolver.resolve("dev") is None
        assert display.messages["error"] == ["Invalid directory path."]

    def test_overlong_manual_entry_is_invalid(self, make_resolver, display):
        resolver, _prompter = make_resolver("y", "/" + "x" * 300, "n")

        assert resolver.resolve("dev") is None
        assert display.messages["error"] == ["Invalid directory path."]

    def test_scan_with_multiple_matches_lists_but_emits_nothing(self, make_resolver, config_path, tmp_path, display):
        root = make_tree(tmp_path / "root", "a/zebra-1", "b/zebra-2")
        resolver, _prompter = make_resolver("n", "y", scan_root=root)

        assert resolver.resolve("zebra") is None
        expected = [str(root / "a" / "zebra-1"), str(root / "b" / "zebra-2")]
        assert stored(config_path) == expected
        assert display.messages["success"] == ["Found 2 new matching directories:"]
        assert display.messages["info"] == [f"  {path}" for path in expected]

    def test_scan_without_matches(self, make_resolver, config_path, tmp_path, display):
        root = make_tree(tmp_path / "root", "a", "b")
        resolver, _prompter = make_resolver("n", "y", scan_root=root)

        assert resolver.resolve("zebra") is None
        assert display.messages["warning"][-1] == "No matching directories found after scan."
        assert stored(config_path) == []

    def test_scan_respects_config_excludes(self, make_resolver, config_path, tmp_path):
        root = make_tree(tmp_path / "root", "keep/zebra", "vendor/zebra")
        write_config(config_path, [], excludes=["vendor"])
        resolver, _prompter = make_resolver("n", "y", scan_root=root)

        assert resolver.resolve("zebra") == str(root / "keep" / "zebra")
        saved = GodirConfig.load_or_initialize(config_path)
        assert saved.directories == [str(root / "keep" / "zebra")]
        assert saved.excludes == ["vendor"]

    def test_scan_reports_progress(self, make_resolver, tmp_path, display):
        root = make_tree(tmp_path / "root", "a/zebra")
        resolver, _prompter = make_resolver("n", "y", scan_root=root)

        resolver.resolve("zebra")

        assert display.spinners_started == display.spinners_finished == 1
        assert display.spinner_updates[0] == f"Scanning: {root}"
        assert f"Scanning: {root / 'a'}" in display.spinner_updates

    def test_unreadable_scan_root_propagates(self, make_resolver, tmp_path, display):
        resolver, _prompter = make_resolver("n", "y", scan_root=tmp_path / "missing")

        with pytest.raises(ScanRootError):
            resolver.resolve("zebra")

        assert display.spinners_finished == 1

    def test_default_scan_root_is_filesystem_root(self, make_resolver):
        import os
        from pathlib import Path

        resolver, _prompter = make_resolver()

        assert resolver.scan_root == Path(os.path.abspath(os.sep))
