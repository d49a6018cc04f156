# tests/5_core/test_resolve_root.py

from pathlib import Path

import pytest

import solresolve.config.config_paths as mod_paths
import solresolve.errors as mod_errors
import solresolve.utils.utils_paths as mod_utils_paths


def test_resolve_root_canonicalizes_existing_directory(project_root: Path) -> None:
    """A relative-looking path with '..' resolves to the canonical directory."""
    # --- setup ---
    (project_root / "sub").mkdir()
    raw = project_root / "sub" / ".."

    # --- execute ---
    result = mod_paths.resolve_root(raw)

    # --- verify ---
    assert result == project_root
    assert result.is_absolute()


def test_resolve_root_accepts_strings(project_root: Path) -> None:
    assert mod_paths.resolve_root(str(project_root)) == project_root


def test_resolve_root_relative_path_uses_given_cwd(project_root: Path) -> None:
    """A relative root is anchored at the injected cwd, not the process cwd."""
    # --- setup ---
    (project_root / "packages" / "core").mkdir(parents=True)

    # --- execute ---
    result = mod_paths.resolve_root("packages/core", cwd=project_root)

    # --- verify ---
    assert result == project_root / "packages" / "core"


def test_resolve_root_missing_path_is_invalid(tmp_path: Path) -> None:
    """A root that does not exist raises InvalidRootError."""
    # --- execute and verify ---
    with pytest.raises(mod_errors.InvalidRootError, match="does not exist"):
        mod_paths.resolve_root(tmp_path / "nope")


def test_resolve_root_file_is_invalid(tmp_path: Path) -> None:
    """A root pointing at a file raises InvalidRootError."""
    # --- setup ---
    file_path = tmp_path / "foundry.toml"
    file_path.write_text("")

    # --- execute and verify ---
    with pytest.raises(mod_errors.InvalidRootError, match="not a directory"):
        mod_paths.resolve_root(file_path)


def test_resolve_root_defaults_to_git_root(project_root: Path) -> None:
    """Without a root, the closest directory holding .git is used."""
    # --- setup ---
    (project_root / ".git").mkdir()
    nested = project_root / "packages" / "core"
    nested.mkdir(parents=True)

    # --- execute ---
    result = mod_paths.resolve_root(None, cwd=nested)

    # --- verify ---
    assert result == project_root


def test_resolve_root_defaults_to_cwd_outside_git(
    project_root: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Without a root or a git repository, cwd is the root."""
    # --- setup ---
    monkeypatch.setattr(mod_paths, "find_git_root", lambda _start: None)

    # --- execute ---
    result = mod_paths.resolve_root(None, cwd=project_root)

    # --- verify ---
    assert result == project_root


def test_find_git_root_returns_none_without_repository(
    project_root: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """find_git_root walks up to the filesystem root before giving up."""
    # --- setup ---
    real_exists = Path.exists

    def fake_exists(self: Path) -> bool:
        if self.name == ".git":
            return False
        return real_exists(self)

    monkeypatch.setattr(Path, "exists", fake_exists)

    # --- execute and verify ---
    assert mod_utils_paths.find_git_root(project_root) is None
