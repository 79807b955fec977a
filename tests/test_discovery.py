"""
Tests for candidate file discovery.

Test Perspectives Table:
| Case ID | Input / Precondition | Perspective | Expected Result | Notes |
|---------|---------------------|-------------|-----------------|-------|
| TC-D-01 | node_modules, bundle.js, .jsx, .css | Normal - filtering | Only src/app.jsx | - |
| TC-D-02 | Nested directories | Normal - recursion | Files at every depth | - |
| TC-D-03 | Ignored name nested deep | Normal - ignore | Whole subtree skipped | - |
| TC-D-04 | Explicit extensions/ignore_names | Normal - override | Arguments win over settings | - |
| TC-D-05 | Directory named like a source file | Boundary | Recursed, not included | - |
| TC-D-06 | Empty directory | Boundary - empty | Empty list | - |
| TC-D-07 | Missing root | Abnormal | FilesystemError | - |
| TC-D-08 | Root is a file | Abnormal | FilesystemError | - |
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from problemify.discovery import discover
from problemify.errors import ErrorCode, FilesystemError


def _relative(paths: list[Path], root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in paths}


class TestDiscover:
    """Tests for discover()."""

    def test_filters_ignored_and_foreign_files(
        self, make_tree: Callable[[dict[str, str]], Path]
    ) -> None:
        """TC-D-01: Dependency dirs, bundles and other extensions are excluded.

        Given: node_modules/foo.js, bundle.js, src/app.jsx, src/app.css
        When: discover is called on the root
        Then: Only src/app.jsx is returned
        """
        # Given
        root = make_tree(
            {
                "node_modules/foo.js": "",
                "bundle.js": "",
                "src/app.jsx": "",
                "src/app.css": "",
            }
        )

        # When
        found = discover(root)

        # Then
        assert _relative(found, root) == {"src/app.jsx"}

    def test_recurses_into_nested_directories(
        self, make_tree: Callable[[dict[str, str]], Path]
    ) -> None:
        """TC-D-02: Files at every depth are collected."""
        # Given
        root = make_tree(
            {
                "index.js": "",
                "a/b.js": "",
                "a/b/c/d.jsx": "",
                "a/readme.md": "",
            }
        )

        # When
        found = discover(root)

        # Then
        assert _relative(found, root) == {"index.js", "a/b.js", "a/b/c/d.jsx"}
        assert all(p.is_absolute() for p in found)

    def test_ignored_name_skips_subtree_anywhere(
        self, make_tree: Callable[[dict[str, str]], Path]
    ) -> None:
        """TC-D-03: An ignored directory deep in the tree is skipped with its contents."""
        # Given
        root = make_tree(
            {
                "pkg/node_modules/dep/index.js": "",
                "pkg/lib/bundle.js": "",
                "pkg/lib/main.js": "",
            }
        )

        # When
        found = discover(root)

        # Then
        assert _relative(found, root) == {"pkg/lib/main.js"}

    def test_explicit_filters_override_settings(
        self, make_tree: Callable[[dict[str, str]], Path]
    ) -> None:
        """TC-D-04: Arguments replace the configured extension and ignore sets."""
        # Given
        root = make_tree({"a.js": "", "b.mjs": "", "vendor/c.mjs": "", "node_modules/d.mjs": ""})

        # When
        found = discover(root, extensions=[".mjs"], ignore_names=["vendor"])

        # Then
        assert _relative(found, root) == {"b.mjs", "node_modules/d.mjs"}

    def test_directory_with_source_extension_is_walked(
        self, make_tree: Callable[[dict[str, str]], Path]
    ) -> None:
        """TC-D-05: A directory named *.js is recursed into, never returned itself."""
        # Given
        root = make_tree({"widget.js/inner.js": ""})

        # When
        found = discover(root)

        # Then
        assert _relative(found, root) == {"widget.js/inner.js"}

    def test_empty_directory(self, tmp_path: Path) -> None:
        """TC-D-06: An empty root yields no candidates."""
        assert discover(tmp_path) == []

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        """TC-D-07: A nonexistent root is a fatal filesystem error.

        Given: A path that does not exist
        When: discover is called
        Then: FilesystemError is raised, chained to the OSError
        """
        # Given
        missing = tmp_path / "does-not-exist"

        # When
        with pytest.raises(FilesystemError) as exc_info:
            discover(missing)

        # Then
        assert exc_info.value.code == ErrorCode.FILESYSTEM_ERROR
        assert exc_info.value.operation == "list"
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_root_is_file_raises(self, tmp_path: Path) -> None:
        """TC-D-08: A regular file cannot be walked."""
        # Given
        path = tmp_path / "app.js"
        path.write_text("", encoding="utf-8")

        # When / Then
        with pytest.raises(FilesystemError):
            discover(path)
