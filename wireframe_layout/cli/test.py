"""Tests for the command-line interface."""

import json

import pytest

from wireframe_layout.cli import cmd_test, main


@pytest.fixture
def wireframe_file(tmp_path, sample_document_dict):
    """Write the sample document to disk."""
    path = tmp_path / "wireframe.json"
    path.write_text(json.dumps(sample_document_dict), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer settings out of CLI runs."""
    for name in ("WIREFRAME_VIEWPORT", "WIREFRAME_DIRECTION", "WIREFRAME_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)


class TestMain:
    """Tests for command dispatch."""

    @pytest.mark.unit
    def test_no_arguments(self, capsys):
        """Running without a command shows help and fails."""
        assert main([]) == 1
        assert "Usage: python . {command}" in capsys.readouterr().out

    @pytest.mark.unit
    def test_help(self, capsys):
        """--help shows help and succeeds."""
        assert main(["--help"]) == 0
        assert "validate" in capsys.readouterr().out

    @pytest.mark.unit
    def test_unknown_command(self):
        """Unknown commands fail."""
        assert main(["render"]) == 1


class TestLayoutCommand:
    """Tests for the layout command."""

    @pytest.mark.integration
    def test_json_to_stdout(self, wireframe_file, capsys):
        """JSON layout is printed by default."""
        assert main(["layout", str(wireframe_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert (data["width"], data["height"]) == (800, 1360)
        assert {n["id"] for n in data["nodes"]} >= {"login", "submit", "feed"}

    @pytest.mark.integration
    def test_tree_to_file(self, wireframe_file, tmp_path, capsys):
        """Tree output can be written to a file."""
        out = tmp_path / "layout.txt"
        assert main(["layout", str(wireframe_file), "-f", "tree", "-o", str(out)]) == 0
        assert capsys.readouterr().out == ""
        text = out.read_text(encoding="utf-8")
        assert text.startswith("Canvas 800x1360")
        assert "Sign in [button, flex 0] (320, 188) 160x44" in text

    @pytest.mark.integration
    def test_overrides(self, wireframe_file, capsys):
        """Command-line flags beat the document's own settings."""
        assert main(["layout", str(wireframe_file), "-v", "mobile", "-d", "LR"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert (data["width"], data["height"]) == (846, 664)

    @pytest.mark.integration
    def test_environment_defaults(
        self, tmp_path, sample_document_dict, capsys, monkeypatch
    ):
        """Missing document settings come from the environment."""
        del sample_document_dict["viewport"]
        del sample_document_dict["direction"]
        path = tmp_path / "bare.json"
        path.write_text(json.dumps(sample_document_dict), encoding="utf-8")
        monkeypatch.setenv("WIREFRAME_VIEWPORT", "desktop")

        assert main(["layout", str(path)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert (data["width"], data["height"]) == (2496, 664)

    @pytest.mark.integration
    def test_missing_file(self, tmp_path):
        """Unreadable files fail cleanly."""
        assert main(["layout", str(tmp_path / "missing.json")]) == 1

    @pytest.mark.integration
    def test_invalid_json(self, tmp_path):
        """Unparseable files fail cleanly."""
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        assert main(["layout", str(path)]) == 1

    @pytest.mark.integration
    def test_no_screens(self, tmp_path):
        """Documents without screens fail cleanly."""
        path = tmp_path / "empty.json"
        path.write_text('{"viewport": "mobile", "direction": "LR", "screens": []}')
        assert main(["layout", str(path)]) == 1

    @pytest.mark.unit
    def test_invalid_choice(self, wireframe_file):
        """argparse rejects unknown viewports."""
        with pytest.raises(SystemExit):
            main(["layout", str(wireframe_file), "--viewport", "watch"])


class TestValidateCommand:
    """Tests for the validate command."""

    @pytest.mark.integration
    def test_valid(self, wireframe_file, capsys):
        """Valid documents pass."""
        assert main(["validate", str(wireframe_file)]) == 0
        assert capsys.readouterr().out.strip().endswith(": valid")

    @pytest.mark.integration
    def test_structural_error(self, tmp_path, sample_document_dict, capsys):
        """Raw structure errors are printed with their path."""
        del sample_document_dict["screens"][0]["children"][0]["children"][2]["label"]
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(sample_document_dict), encoding="utf-8")

        assert main(["validate", str(path)]) == 1
        out = capsys.readouterr().out
        assert (
            "screens[0].children[0].children[2]: "
            "Missing required field 'label' for button component [missing_field]"
        ) in out

    @pytest.mark.integration
    def test_model_error(self, tmp_path, sample_document_dict, capsys):
        """Values the models reject are reported."""
        sample_document_dict["screens"][1]["children"][1]["flex"] = "wide"
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(sample_document_dict), encoding="utf-8")

        assert main(["validate", str(path)]) == 1
        assert "flex" in capsys.readouterr().out

    @pytest.mark.integration
    def test_fill_error(self, tmp_path, sample_document_dict, capsys):
        """Containers whose children overflow are reported."""
        email = sample_document_dict["screens"][0]["children"][0]["children"][1]
        email["bounds"]["height"] = 0
        path = tmp_path / "overflow.json"
        path.write_text(json.dumps(sample_document_dict), encoding="utf-8")

        assert main(["validate", str(path)]) == 1
        out = capsys.readouterr().out
        assert "login-form:" in out
        assert "[fill_mismatch]" in out

    @pytest.mark.integration
    def test_missing_settings_filled(self, tmp_path, sample_document_dict, capsys):
        """Documents the layout command accepts also validate."""
        del sample_document_dict["viewport"]
        del sample_document_dict["direction"]
        path = tmp_path / "bare.json"
        path.write_text(json.dumps(sample_document_dict), encoding="utf-8")

        assert main(["validate", str(path)]) == 0
        assert capsys.readouterr().out.strip().endswith(": valid")
        assert main(["layout", str(path)]) == 0

    @pytest.mark.integration
    def test_settings_override(self, wireframe_file, capsys):
        """Command-line flags replace the document's settings."""
        assert main(["validate", str(wireframe_file), "-v", "desktop", "-d", "LR"]) == 0
        assert capsys.readouterr().out.strip().endswith(": valid")

    @pytest.mark.integration
    def test_invalid_document_setting_reported(
        self, tmp_path, sample_document_dict, capsys
    ):
        """A present but unknown viewport is still an error."""
        sample_document_dict["viewport"] = "watch"
        path = tmp_path / "watch.json"
        path.write_text(json.dumps(sample_document_dict), encoding="utf-8")

        assert main(["validate", str(path)]) == 1
        assert "viewport:" in capsys.readouterr().out

    @pytest.mark.integration
    def test_invalid_json(self, tmp_path, capsys):
        """Unparseable files are reported, not raised."""
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        assert main(["validate", str(path)]) == 1
        assert "Invalid JSON" in capsys.readouterr().out

    @pytest.mark.integration
    def test_missing_file(self, tmp_path):
        """Unreadable files fail cleanly."""
        assert main(["validate", str(tmp_path / "missing.json")]) == 1


class TestViewportCommand:
    """Tests for the viewport command."""

    @pytest.mark.unit
    def test_dimensions(self, capsys):
        """Canvas size and screen origins are printed."""
        assert main(["viewport", "mobile", "LR", "2"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Canvas: 846x664",
            "  screen 0: origin (0, 0)",
            "  screen 1: origin (439, 0)",
        ]

    @pytest.mark.unit
    def test_stacked(self, capsys):
        """TD stacks screens vertically."""
        assert main(["viewport", "desktop", "TD", "3"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Canvas: 1232x2056")

    @pytest.mark.unit
    def test_zero_screens(self):
        """A canvas needs at least one screen."""
        assert main(["viewport", "tablet", "LR", "0"]) == 1


class TestTestCommand:
    """Tests for cmd_test function."""

    @pytest.mark.unit
    def test_tier_flags(self, monkeypatch):
        """Tier flags become marker expressions."""
        calls = []

        def fake_call(cmd):
            calls.append(cmd)
            return 0

        monkeypatch.setattr("wireframe_layout.cli.lib.subprocess.call", fake_call)
        assert cmd_test(["--unit", "-k", "flex"]) == 0
        assert calls[0][1:] == ["-m", "pytest", "-m", "unit", "-k", "flex"]

    @pytest.mark.unit
    def test_exit_code_forwarded(self, monkeypatch):
        """pytest's exit code is returned."""
        monkeypatch.setattr("wireframe_layout.cli.lib.subprocess.call", lambda cmd: 5)
        assert cmd_test(["--all"]) == 5
