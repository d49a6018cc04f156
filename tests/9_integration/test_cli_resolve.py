# tests/9_integration/test_cli_resolve.py

import json
from pathlib import Path

import pytest

import solresolve.cli as mod_cli
import solresolve.meta as mod_meta
from tests.utils import make_project_tree


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run(
    capsys: pytest.CaptureFixture[str],
    *argv: str,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    code = mod_cli.main(["-q", *argv], env=env or {})
    out, err = capsys.readouterr()
    return code, out, err


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_main_prints_resolved_config_as_json(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A plain run prints the full resolved configuration."""
    # --- setup ---
    make_project_tree(project_root, "src", "lib/forge-std/src")

    # --- execute ---
    code, out, _ = _run(
        capsys,
        "--root",
        str(project_root),
        "--optimize",
        "--optimize-runs",
        "10000",
        "--evm-version",
        "Berlin",
        "--ignored-error-codes",
        "1878",
        "1878",
        "--libraries",
        "src/A.sol:Lib1:0xdead",
        "src/A.sol:Lib1:0xbeef",
        "-r",
        "ds-test/=lib/ds-test/src/",
    )

    # --- verify ---
    assert code == 0
    data = json.loads(out)
    lib = project_root / "lib"
    assert data["paths"]["root"] == str(project_root)
    assert data["paths"]["sources"] == str(project_root / "src")
    assert data["paths"]["libraries"] == [str(lib)]
    assert data["remappings"] == [
        "ds-test/=lib/ds-test/src/",
        f"forge-std/={(lib / 'forge-std' / 'src').as_posix()}/",
    ]
    assert data["settings"]["optimizer"] == {"enabled": True, "runs": 10000}
    assert data["settings"]["evm_version"] == "berlin"
    assert data["settings"]["ignored_error_codes"] == [1878]
    assert data["settings"]["libraries"] == {"src/A.sol": {"Lib1": "0xbeef"}}
    assert data["no_auto_detect"] is False
    assert data["force_rebuild"] is False


def test_main_hardhat_flag(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- execute ---
    code, out, _ = _run(
        capsys,
        "--root",
        str(project_root),
        "--hh",
        "--lib-paths",
        str(project_root / "vendor"),
    )

    # --- verify ---
    assert code == 0
    data = json.loads(out)
    assert data["paths"]["sources"] == str(project_root / "contracts")
    assert data["paths"]["libraries"] == [
        str(project_root / "vendor"),
        str(project_root / "node_modules"),
    ]


def test_main_reads_environment_fallbacks(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """DAPP_SRC, DAPP_REMAPPINGS and DAPP_LIBRARIES come from the injected env."""
    # --- setup ---
    env = {
        "DAPP_SRC": "sol",
        "DAPP_REMAPPINGS": "b/=lib/b/\na/=lib/a/\n",
        "DAPP_LIBRARIES": "A.sol:L:0x1",
    }

    # --- execute ---
    code, out, _ = _run(capsys, "--root", str(project_root), env=env)

    # --- verify ---
    assert code == 0
    data = json.loads(out)
    assert data["paths"]["sources"] == str(project_root / "sol")
    assert data["remappings"] == ["a/=lib/a/", "b/=lib/b/"]
    assert data["settings"]["libraries"] == {"A.sol": {"L": "0x1"}}


def test_main_hardhat_conflicts_with_env_contracts(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """--hardhat plus DAPP_SRC is rejected like --hardhat plus --contracts."""
    code, out, _ = _run(
        capsys,
        "--root",
        str(project_root),
        "--hardhat",
        env={"DAPP_SRC": "src"},
    )
    assert code == 1
    assert out == ""


def test_main_malformed_library_link_fails(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A bad link exits 1, reports the entry and prints no configuration."""
    # --- execute ---
    code, out, err = _run(
        capsys,
        "--root",
        str(project_root),
        "--libraries",
        "A.sol:Lib1",
    )

    # --- verify ---
    assert code == 1
    assert out == ""
    assert "A.sol:Lib1" in err


def test_main_malformed_remappings_txt_fails(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    make_project_tree(project_root, files={"remappings.txt": "broken line\n"})

    # --- execute ---
    code, out, err = _run(capsys, "--root", str(project_root))

    # --- verify ---
    assert code == 1
    assert out == ""
    assert "broken line" in err


def test_main_invalid_root_fails(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    code, out, err = _run(capsys, "--root", str(tmp_path / "missing"))
    assert code == 1
    assert out == ""
    assert "missing" in err


def test_main_force_removes_artifacts(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    make_project_tree(project_root, files={"out/A.json": "{}"})

    # --- execute ---
    code, out, _ = _run(capsys, "--root", str(project_root), "--force")

    # --- verify ---
    assert code == 0
    assert json.loads(out)["force_rebuild"] is True
    assert not (project_root / "out").exists()


def test_main_repeated_list_flags_accumulate(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Repeating --lib-paths or --ignored-error-codes adds to earlier values."""
    # --- execute ---
    code, out, _ = _run(
        capsys,
        "--root",
        str(project_root),
        "--lib-paths",
        "lib",
        "--lib-paths",
        "vendor",
        "--ignored-error-codes",
        "1878",
        "--ignored-error-codes",
        "5574",
    )

    # --- verify ---
    assert code == 0
    data = json.loads(out)
    assert data["paths"]["libraries"] == ["lib", "vendor"]
    assert data["settings"]["ignored_error_codes"] == [1878, 5574]


@pytest.mark.parametrize(
    "verbosity",
    [[], ["--log-level", "info"], ["-v"], ["--log-level", "trace"]],
)
def test_main_stdout_is_only_json(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
    verbosity: list[str],
) -> None:
    """Log output never lands on stdout, so the result can be piped."""
    # --- setup ---
    make_project_tree(project_root, "src", "lib/forge-std/src")

    # --- execute ---
    code = mod_cli.main(["--root", str(project_root), *verbosity], env={})
    out, _ = capsys.readouterr()

    # --- verify ---
    assert code == 0
    assert json.loads(out)["paths"]["root"] == str(project_root)


def test_main_verbose_summary_goes_to_stderr_once(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- execute ---
    code = mod_cli.main(["--root", str(project_root), "-v"], env={})
    out, err = capsys.readouterr()

    # --- verify ---
    assert code == 0
    assert "Project root" not in out
    assert err.count("Project root") == 1


def test_main_rejects_contracts_with_hardhat(
    project_root: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """The two layout options are mutually exclusive at the CLI level."""
    with pytest.raises(SystemExit) as exc_info:
        mod_cli.main(
            ["--root", str(project_root), "--contracts", "src", "--hardhat"],
            env={},
        )
    assert exc_info.value.code == 2
    assert "not allowed with" in capsys.readouterr().err


def test_main_rejects_malformed_cli_remapping(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        mod_cli.main(["-r", "no-equals"], env={})
    assert exc_info.value.code == 2
    assert "no-equals" in capsys.readouterr().err


def test_main_hints_on_typo(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        mod_cli.main(["--optimise"], env={})
    assert "did you mean --optimize" in capsys.readouterr().err


def test_main_version(capsys: pytest.CaptureFixture[str]) -> None:
    # --- execute ---
    code = mod_cli.main(["--version"], env={})

    # --- verify ---
    assert code == 0
    out = capsys.readouterr().out
    assert mod_meta.PROGRAM_DISPLAY in out
    assert mod_meta.__version__ in out
