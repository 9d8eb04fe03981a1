"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, coatcheck.toml only contains
overrides. With no config file the demo scenario runs unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

# --- coatcheck.toml sections ---


class VenueConfig(BaseModel):
    """[venue] section."""

    model_config = {"frozen": True}

    name: str = "The Grand Venue"


class GuestSpec(BaseModel):
    """One entry of ``[scenario] guests``."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    coat_type: str | None = None


DEMO_DEPARTURES = ("Donald Trump", "Albert Einstein")


def _default_guests() -> list[GuestSpec]:
    return [
        GuestSpec(name="Albert Einstein"),
        GuestSpec(name="Donald Trump", coat_type="Black Business Coat"),
        GuestSpec(name="Michael Jackson", coat_type="Red Poncho Coat"),
    ]


class ScenarioConfig(BaseModel):
    """[scenario] section — who arrives, in order, and who departs."""

    model_config = {"frozen": True}

    guests: list[GuestSpec] = Field(default_factory=_default_guests)
    departures: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def default_departures(cls, data: Any) -> Any:
        """Demo departures apply only when guests are left at their defaults too."""
        if isinstance(data, dict) and "departures" not in data and "guests" not in data:
            return {**data, "departures": list(DEMO_DEPARTURES)}
        return data

    @model_validator(mode="after")
    def check_departures(self) -> ScenarioConfig:
        known = {g.name for g in self.guests}
        unknown = [name for name in self.departures if name not in known]
        if unknown:
            msg = f"departures name guests that never arrive: {', '.join(unknown)}"
            raise ValueError(msg)
        return self


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
