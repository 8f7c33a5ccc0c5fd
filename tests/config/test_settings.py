"""Tests for ShortcutSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from shortcutd.config.settings import ShortcutSettings


class TestDefaults:
    def test_all_defaults(self) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = ShortcutSettings.from_cli()
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.server.host == "127.0.0.1"
        assert settings.server.port == 5050
        assert settings.rules.path is None
        assert settings.rules.builtins is False
        assert settings.rules.search_host == "www.google.com"

    def test_frozen(self) -> None:
        settings = ShortcutSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_discovered_in_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "shortcutd.toml").write_text("[server]\nport = 8080\n")
        settings = ShortcutSettings.from_cli()
        assert settings.server.port == 8080
        assert settings.server.host == "127.0.0.1"  # default preserved

    def test_discovered_by_walk_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "shortcutd.toml").write_text("[rules]\nbuiltins = true\n")
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        monkeypatch.chdir(deep)
        assert ShortcutSettings.from_cli().rules.builtins is True

    def test_rules_path_relative_to_toml(self, tmp_path: Path) -> None:
        conf_dir = tmp_path / "conf"
        conf_dir.mkdir()
        toml = conf_dir / "shortcutd.toml"
        toml.write_text('[rules]\npath = "rules.txt"\n')
        settings = ShortcutSettings.from_cli(config_path=str(toml))
        assert settings.rules.path == conf_dir / "rules.txt"
        assert settings.config_path == toml

    def test_absolute_rules_path_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "rules.txt"
        toml = tmp_path / "shortcutd.toml"
        toml.write_text(f'[rules]\npath = "{target.as_posix()}"\n')
        assert ShortcutSettings.from_cli().rules.path == target

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "shortcutd.toml").write_text("")
        assert ShortcutSettings.from_cli().server.port == 5050

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "shortcutd.toml").write_text("[server\nport = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ShortcutSettings.from_cli()

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            ShortcutSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_port_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "shortcutd.toml").write_text("[server]\nport = 70000\n")
        with pytest.raises(Exception):
            ShortcutSettings.from_cli()


class TestPriority:
    def test_cli_flags_override(self) -> None:
        settings = ShortcutSettings.from_cli(json_output=True, quiet=True, verbose=True)
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHORTCUTD_LOG_JSON", "true")
        assert ShortcutSettings.from_cli().log_json is True

    def test_nested_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "shortcutd.toml").write_text("[server]\nport = 8080\n")
        monkeypatch.setenv("SHORTCUTD_SERVER__PORT", "9090")
        assert ShortcutSettings.from_cli().server.port == 9090
