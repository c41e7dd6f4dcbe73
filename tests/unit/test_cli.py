"""Tests for the ecc-install command line flows."""

import json

import pytest
from typer.testing import CliRunner

from ecc_installer.cli import app
from ecc_installer.settings import AVAILABLE_LANGUAGES
from tests.fixtures import HOOKS_CONTENT, create_bundle


runner = CliRunner()


def invoke(bundle, *args, input=None):
    return runner.invoke(app, ["--source", str(bundle), *args], input=input)


@pytest.fixture
def claude_dir(fake_home):
    return fake_home / ".claude"


class TestHelp:

    @pytest.mark.parametrize("flag", ["--help", "-h"])
    def test_help_lists_languages(self, flag):
        result = runner.invoke(app, [flag])
        assert result.exit_code == 0
        for lang in AVAILABLE_LANGUAGES:
            assert lang in result.output

    def test_help_installs_nothing(self, claude_dir):
        runner.invoke(app, ["--help"])
        assert not claude_dir.exists()


class TestFlags:

    def test_core(self, bundle, claude_dir):
        result = invoke(bundle, "--core")
        assert result.exit_code == 0, result.output
        assert "Installation Complete!" in result.output
        assert (claude_dir / "agents" / "alpha.md").exists()
        assert (claude_dir / "skills" / "alpha.md").exists()
        assert not (claude_dir / "skills" / "languages").exists()
        assert json.loads((claude_dir / "settings.json").read_text()) == HOOKS_CONTENT

    def test_lang(self, bundle, claude_dir):
        result = invoke(bundle, "--lang", "go", "rust")
        assert result.exit_code == 0, result.output
        languages = sorted(p.name for p in (claude_dir / "skills" / "languages").iterdir())
        assert languages == ["go.md", "rust.md"]
        assert "Enter choices" not in result.output

    def test_lang_short_flag_with_unknown(self, bundle, claude_dir):
        result = invoke(bundle, "-l", "python", "cobol")
        assert result.exit_code == 0
        assert "Language skill not found: cobol" in result.output
        assert [p.name for p in (claude_dir / "skills" / "languages").iterdir()] == ["python.md"]

    def test_lang_without_languages(self, bundle, claude_dir):
        result = invoke(bundle, "-l")
        assert result.exit_code == 0
        assert "Enter choices" not in result.output
        assert not (claude_dir / "skills" / "languages").exists()

    def test_full_prompts_for_languages(self, bundle, claude_dir):
        result = invoke(bundle, "--full", input="1 3\n")
        assert result.exit_code == 0, result.output
        assert "Enter choices" in result.output
        languages = sorted(p.name for p in (claude_dir / "skills" / "languages").iterdir())
        assert languages == ["go.md", "typescript.md"]

    def test_languages_without_lang_flag_is_usage_error(self, bundle, claude_dir):
        result = invoke(bundle, "go")
        assert result.exit_code == 2
        assert not claude_dir.exists()

    def test_uninstall_wins_over_install_flags(self, bundle, claude_dir):
        invoke(bundle, "--core")
        result = invoke(bundle, "--full", "--uninstall", input="y\n")
        assert result.exit_code == 0
        assert not (claude_dir / "agents").exists()

    def test_target_override(self, bundle, tmp_path, fake_home):
        target = tmp_path / "elsewhere"
        result = invoke(bundle, "--core", "--target", str(target))
        assert result.exit_code == 0
        assert (target / "rules" / "alpha.md").exists()
        assert not (fake_home / ".claude").exists()

    def test_verbose(self, bundle, claude_dir):
        result = invoke(bundle, "--core", "--verbose")
        assert result.exit_code == 0
        assert (claude_dir / "rules").is_dir()


class TestSourceBundleCheck:

    def test_missing_bundle_fails(self, tmp_path, claude_dir):
        bundle = create_bundle(tmp_path / "partial", components=("skills",))
        result = invoke(bundle, "--core")
        assert result.exit_code == 1
        assert "Source files not found" in result.output
        assert not claude_dir.exists()
        assert "--source" in result.output

    def test_default_source_is_working_directory(self, bundle, claude_dir, monkeypatch):
        monkeypatch.chdir(bundle)
        result = runner.invoke(app, ["--core"])
        assert result.exit_code == 0, result.output
        assert (claude_dir / "agents" / "alpha.md").exists()
        assert (claude_dir / "rules" / "alpha.md").exists()

    def test_short_source_option(self, bundle, claude_dir):
        result = runner.invoke(app, ["-s", str(bundle), "--core"])
        assert result.exit_code == 0, result.output
        assert (claude_dir / "commands" / "alpha.md").exists()

    def test_source_option_in_help(self):
        result = runner.invoke(app, ["--help"])
        assert "--source" in result.output

    def test_uninstall_does_not_need_bundle(self, tmp_path, claude_dir):
        (claude_dir / "rules").mkdir(parents=True)
        result = invoke(tmp_path / "nowhere", "--uninstall", input="y\n")
        assert result.exit_code == 0
        assert not (claude_dir / "rules").exists()


class TestInteractive:

    def test_cancel(self, bundle, claude_dir):
        result = invoke(bundle, input="4\n")
        assert result.exit_code == 0
        assert "Installation cancelled" in result.output
        assert not claude_dir.exists()

    def test_invalid_choice_exits_nonzero(self, bundle, claude_dir):
        result = invoke(bundle, input="7\n")
        assert result.exit_code == 1
        assert "Invalid choice" in result.output

    def test_no_input_is_invalid_choice(self, bundle, claude_dir):
        result = invoke(bundle, input="")
        assert result.exit_code == 1

    def test_full_with_no_languages(self, bundle, claude_dir):
        result = invoke(bundle, input="1\nn\n")
        assert result.exit_code == 0, result.output
        assert (claude_dir / "commands" / "alpha.md").exists()
        assert not (claude_dir / "skills" / "languages").exists()

    def test_core(self, bundle, claude_dir):
        result = invoke(bundle, input="2\n")
        assert result.exit_code == 0
        assert (claude_dir / "rules").is_dir()
        assert "Enter choices" not in result.output

    def test_custom_only_rules(self, bundle, claude_dir):
        result = invoke(bundle, input="3\nn\nn\nn\ny\nn\nn\n")
        assert result.exit_code == 0, result.output
        assert (claude_dir / "rules" / "alpha.md").exists()
        for component in ("agents", "commands", "skills"):
            assert not (claude_dir / component).exists()
        assert not (claude_dir / "settings.json").exists()
        assert (claude_dir / "mcp-servers.example.json").exists()

    def test_custom_skills_with_languages(self, bundle, claude_dir):
        result = invoke(bundle, input="3\nn\nn\ny\nn\nn\nn\ny\n5 5 2\n")
        assert result.exit_code == 0, result.output
        languages = sorted(p.name for p in (claude_dir / "skills" / "languages").iterdir())
        assert languages == ["java.md", "python.md"]


class TestUninstallFlow:

    def test_uninstall_confirmed(self, bundle, claude_dir):
        invoke(bundle, "--lang", "go")
        result = invoke(bundle, "-u", input="y\n")

        assert result.exit_code == 0
        assert "Removed agents" in result.output
        for component in ("agents", "commands", "skills", "rules"):
            assert not (claude_dir / component).exists()
        assert (claude_dir / "CLAUDE.md").exists()
        assert (claude_dir / "settings.json").exists()
        assert len(list((claude_dir / "backups").iterdir())) == 1

    def test_uninstall_declined(self, bundle, claude_dir):
        invoke(bundle, "--core")
        result = invoke(bundle, "--uninstall", input="n\n")

        assert result.exit_code == 0
        assert "cancelled" in result.output
        assert (claude_dir / "agents").exists()
        assert not (claude_dir / "backups").exists()


def test_unwritable_target_fails(bundle, tmp_path, monkeypatch):
    import os

    if os.geteuid() == 0:
        pytest.skip("root ignores directory permissions")
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0o500)
    try:
        result = invoke(bundle, "--core", "--target", str(locked / ".claude"))
        assert result.exit_code == 1
        assert "Filesystem error" in result.output
    finally:
        locked.chmod(0o700)
