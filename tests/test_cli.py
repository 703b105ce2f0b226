"""
Tests for the struts2scaffold command line interface.
"""

import json
import sys

import pytest

from struts2scaffold.main import main


@pytest.fixture
def run_cli(monkeypatch, tmp_path):
    """Run the CLI with the given arguments and return its exit code."""
    monkeypatch.chdir(tmp_path)
    # --machine-readable swaps sys.stdout for the duration of the command
    monkeypatch.setattr(sys, "stdout", sys.stdout)

    def _run(*argv):
        monkeypatch.setattr(sys, "argv", ["struts2scaffold", *[str(a) for a in argv]])
        return main()

    return _run


class TestVersions:
    """Tests for the versions command."""

    def test_plain_listing(self, run_cli, capsys):
        assert run_cli("--no-rich", "versions") == 0
        out = capsys.readouterr().out
        for name in ("2.0.14", "2.1.8.1", "2.3.37"):
            assert name in out

    def test_machine_readable(self, run_cli, capsys):
        assert run_cli("--machine-readable", "versions") == 0
        versions = json.loads(capsys.readouterr().out)
        assert [v["version"] for v in versions] == ["2.0.14", "2.1.8.1", "2.3.37"]

    def test_libraries(self, run_cli, capsys):
        assert run_cli("--no-rich", "versions", "--libraries") == 0
        assert "struts2-core-2.0.14.jar" in capsys.readouterr().out


class TestAddFramework:
    """Tests for the add-framework command."""

    def test_machine_readable_success(self, run_cli, capsys, web_project):
        code = run_cli(
            "--machine-readable", "add-framework", web_project, "--framework-version", "2.0.14"
        )

        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["status"] == "success"
        assert result["file_set_id"] == "s2fileset1"
        assert (web_project / "src" / "struts.xml").is_file()

    def test_plain_output(self, run_cli, capsys, web_project):
        assert run_cli("--no-rich", "add-framework", web_project) == 0
        out = capsys.readouterr().out
        assert "Struts 2 support added" in out
        assert "StrutsPrepareAndExecuteFilter" in out
        assert "please setup fileset(s)" in out
        assert "[bold underline]" not in out

    def test_open_settings(self, run_cli, capsys, web_project):
        assert run_cli("--no-rich", "add-framework", web_project, "--open-settings") == 0
        out = capsys.readouterr().out
        assert "Struts 2 (shop)" in out
        assert "src/struts.xml" in out

    def test_second_run_is_skipped(self, run_cli, capsys, web_project):
        assert run_cli("--no-rich", "add-framework", web_project) == 0
        assert run_cli("--no-rich", "add-framework", web_project) == 0
        assert "Nothing to do" in capsys.readouterr().out

    def test_failure_exit_code(self, run_cli, capsys, web_project):
        (web_project / "web" / "WEB-INF" / "web.xml").unlink()

        assert run_cli("--machine-readable", "add-framework", web_project) == 1
        result = json.loads(capsys.readouterr().out)
        assert result["status"] == "failure"
        assert not (web_project / "src" / "struts.xml").exists()

    def test_missing_project(self, run_cli, capsys, tmp_path):
        assert run_cli("add-framework", tmp_path / "missing") == 1
        assert "Project directory not found" in capsys.readouterr().err


class TestFacetCommands:
    """Tests for the facet and fileset commands."""

    def test_facet_show(self, run_cli, capsys, web_project):
        run_cli("--no-rich", "add-framework", web_project)
        capsys.readouterr()

        assert run_cli("--machine-readable", "facet", "show", web_project) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["module"]["name"] == "shop"
        assert data["file_sets"][0]["files"] == ["src/struts.xml"]

    def test_fileset_add(self, run_cli, capsys, web_project):
        run_cli("--no-rich", "add-framework", web_project)
        (web_project / "src" / "struts-admin.xml").write_text("<struts/>", encoding="utf-8")
        capsys.readouterr()

        assert run_cli("--machine-readable", "fileset", "add", web_project, "src/struts-admin.xml") == 0
        data = json.loads(capsys.readouterr().out)
        assert data["files"] == ["src/struts.xml", "src/struts-admin.xml"]


class TestConfigCommands:
    """Tests for the config command."""

    def test_init_and_validate(self, run_cli, capsys, tmp_path):
        assert run_cli("config", "init", "--format", "yaml", "--path", "s2.yaml") == 0
        assert (tmp_path / "s2.yaml").is_file()

        assert run_cli("config", "validate", "s2.yaml") == 0
        assert "is valid" in capsys.readouterr().out

    def test_validate_invalid(self, run_cli, capsys, tmp_path):
        (tmp_path / "bad.json").write_text(
            json.dumps({"scaffold": {"default_version": "9.9"}}), encoding="utf-8"
        )
        assert run_cli("config", "validate", "bad.json") == 1
        assert "invalid" in capsys.readouterr().err

    def test_show(self, run_cli, capsys):
        assert run_cli("config", "show") == 0
        assert "Default version: 2.1.8.1" in capsys.readouterr().out
