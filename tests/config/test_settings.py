"""Tests for CoatcheckSettings — flags, env vars, and TOML source."""

from pathlib import Path

import click
import pytest

from coatcheck.config.settings import CoatcheckSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = CoatcheckSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.venue.name == "The Grand Venue"
        assert [g.name for g in settings.scenario.guests] == [
            "Albert Einstein",
            "Donald Trump",
            "Michael Jackson",
        ]
        assert settings.scenario.departures == ["Donald Trump", "Albert Einstein"]
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = CoatcheckSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "coatcheck.toml").write_text(
            '[venue]\nname = "Opera"\n'
            "[scenario]\n"
            'guests = [{name = "Ann", coat_type = "Cape"}, {name = "Ben"}]\n'
            'departures = ["Ann"]\n'
        )
        settings = CoatcheckSettings.from_cli(start=tmp_path)
        assert settings.venue.name == "Opera"
        assert settings.scenario.guests[0].coat_type == "Cape"
        assert settings.scenario.guests[1].coat_type is None
        assert settings.scenario.departures == ["Ann"]
        assert settings.config_path == tmp_path / "coatcheck.toml"

    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "coatcheck.toml").write_text('[venue]\nname = "Opera"\n')
        settings = CoatcheckSettings.from_cli(start=tmp_path)
        assert len(settings.scenario.guests) == 3

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "party.toml"
        custom.parent.mkdir()
        custom.write_text("[plugins]\nenabled = false\n")
        settings = CoatcheckSettings.from_cli(config_path=str(custom))
        assert settings.plugins.enabled is False
        assert settings.config_path == custom

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="not found"):
            CoatcheckSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "coatcheck.toml").write_text("[venue\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            CoatcheckSettings.from_cli(start=tmp_path)

    def test_departure_of_unknown_guest_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "coatcheck.toml").write_text(
            '[scenario]\nguests = [{name = "Ann"}]\ndepartures = ["Zed"]\n'
        )
        with pytest.raises(click.ClickException, match="Zed"):
            CoatcheckSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "coatcheck.toml").write_text('[venue]\nname = "Opera"\n')
        monkeypatch.setenv("COATCHECK_VENUE__NAME", "Ballroom")
        settings = CoatcheckSettings.from_cli(start=tmp_path)
        assert settings.venue.name == "Ballroom"

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COATCHECK_QUIET", "false")
        settings = CoatcheckSettings.from_cli(start=tmp_path, quiet=True)
        assert settings.quiet is True

    def test_explicit_config_beats_env_var(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from_env = tmp_path / "env.toml"
        from_env.write_text('[venue]\nname = "Env"\n')
        explicit = tmp_path / "flag.toml"
        explicit.write_text('[venue]\nname = "Flag"\n')
        monkeypatch.setenv("COATCHECK_CONFIG", str(from_env))
        settings = CoatcheckSettings.from_cli(config_path=str(explicit))
        assert settings.venue.name == "Flag"

    def test_guests_only_toml(self, tmp_path: Path) -> None:
        (tmp_path / "coatcheck.toml").write_text('[scenario]\nguests = [{name = "Ann"}]\n')
        settings = CoatcheckSettings.from_cli(start=tmp_path)
        assert settings.scenario.departures == []
