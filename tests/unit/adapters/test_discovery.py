"""Unit tests for test-module discovery."""

import sys
import textwrap

import pytest

from vctest.adapters.discovery import (
    DiscoveryError,
    find_test_files,
    load_file,
    load_module,
    load_tests,
)

# pylint: disable=redefined-outer-name,unused-argument

REGISTERING_MODULE = textwrap.dedent(
    """
    import vctest

    @vctest.define_test("{suite}", "{case}")
    def _case():
        vctest.expect_eq(1, 1)
    """
)


def write_test_file(directory, name, suite="Found", case="Case"):
    """Write a module registering one case and return its path."""
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(REGISTERING_MODULE.format(suite=suite, case=case), encoding="utf-8")
    return path


class TestFindTestFiles:
    """Directory scanning."""

    @staticmethod
    def test_sorted_recursive_match(tmp_path):
        """Matching files are found recursively, in sorted order."""
        write_test_file(tmp_path, "test_b.py")
        write_test_file(tmp_path, "test_a.py")
        write_test_file(tmp_path, "sub/test_c.py")
        write_test_file(tmp_path, "helpers.py")

        found = find_test_files(tmp_path)

        assert [p.relative_to(tmp_path).as_posix() for p in found] == [
            "sub/test_c.py",
            "test_a.py",
            "test_b.py",
        ]

    @staticmethod
    def test_custom_pattern(tmp_path):
        """A custom glob selects other files."""
        write_test_file(tmp_path, "math_check.py")
        write_test_file(tmp_path, "test_a.py")
        assert [p.name for p in find_test_files(tmp_path, "*_check.py")] == ["math_check.py"]


class TestLoad:
    """Importing files, directories and modules."""

    @staticmethod
    def test_load_file_registers_cases(tmp_path, fresh_default_registry):
        """Importing a file runs its registrations."""
        load_file(write_test_file(tmp_path, "test_one.py", "S", "C"))
        assert [case.qualified_name for case in fresh_default_registry.all_suites()[0][1]] == [
            "S.C"
        ]

    @staticmethod
    def test_load_file_is_idempotent(tmp_path, fresh_default_registry):
        """Loading the same path twice imports it once."""
        path = write_test_file(tmp_path, "test_once.py")
        first = load_file(path)
        assert load_file(path) is first
        assert len(fresh_default_registry) == 1

    @staticmethod
    def test_same_stem_in_two_directories(tmp_path, fresh_default_registry):
        """Files sharing a name in different directories both load."""
        load_file(write_test_file(tmp_path / "a", "test_x.py", "A", "X"))
        load_file(write_test_file(tmp_path / "b", "test_x.py", "B", "X"))
        assert [name for name, _ in fresh_default_registry.all_suites()] == ["A", "B"]

    @staticmethod
    def test_import_error_is_wrapped(tmp_path, fresh_default_registry):
        """An error raised while importing becomes a DiscoveryError."""
        path = tmp_path / "test_broken.py"
        path.write_text("raise RuntimeError('boom')\n", encoding="utf-8")

        with pytest.raises(DiscoveryError, match="RuntimeError: boom") as exc_info:
            load_file(path)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @staticmethod
    def test_sibling_helper_is_importable(tmp_path, fresh_default_registry):
        """A test file can import a helper module from its own directory."""
        (tmp_path / "vctest_sibling_helper.py").write_text(
            "EXPECTED = 3\n", encoding="utf-8"
        )
        path = tmp_path / "test_uses_helper.py"
        path.write_text(
            textwrap.dedent(
                """
                import vctest
                from vctest_sibling_helper import EXPECTED

                @vctest.define_test("Helper", "Sum")
                def _case():
                    vctest.expect_eq(1 + 2, EXPECTED)
                """
            ),
            encoding="utf-8",
        )
        path_before = list(sys.path)

        try:
            module = load_file(path)
        finally:
            sys.modules.pop("vctest_sibling_helper", None)

        assert module.EXPECTED == 3
        assert len(fresh_default_registry) == 1
        assert sys.path == path_before

    @staticmethod
    def test_load_module_missing():
        """A missing dotted module name is reported as not found."""
        with pytest.raises(DiscoveryError, match="module not found"):
            load_module("vctest_no_such_module_anywhere")

    @staticmethod
    def test_load_module_by_name():
        """Dotted names are imported normally."""
        assert load_module("vctest.checks").__name__ == "vctest.checks"

    @staticmethod
    def test_load_tests_mixed_targets(tmp_path, fresh_default_registry):
        """Directories and files are loaded in the order given."""
        write_test_file(tmp_path / "dir", "test_d.py", "Dir", "One")
        single = write_test_file(tmp_path, "single.py", "File", "Two")

        modules = load_tests([str(tmp_path / "dir"), str(single)])

        assert len(modules) == 2
        assert [name for name, _ in fresh_default_registry.all_suites()] == ["Dir", "File"]

    @staticmethod
    def test_load_tests_missing_file(tmp_path):
        """A .py target that does not exist fails before importing anything."""
        with pytest.raises(DiscoveryError, match="file does not exist"):
            load_tests([str(tmp_path / "test_missing.py")])

    @staticmethod
    def test_empty_directory_warns(tmp_path, caplog):
        """A directory without matching files logs a warning."""
        with caplog.at_level("WARNING", logger="vctest.adapters.discovery"):
            assert load_tests([str(tmp_path)]) == []
        assert any("No files matching" in message for message in caplog.messages)
