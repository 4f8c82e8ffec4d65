"""
Data models for the wttr.in JSON (format=j1) response.

Only the parts of the payload the CLI prints are modelled; everything else
(forecast days, nearest area, astronomy...) is ignored on decode.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _WttrModel(BaseModel):
    """Base model that matches wttr.in keys regardless of their casing."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        # null decodes like a missing value: the model or field default
        if data is None:
            return {}
        # wttr.in is not consistent about casing (FeelsLikeC vs feelsLikeC)
        if not isinstance(data, dict):
            return data
        canonical = {
            (field.alias or name).lower(): field.alias or name
            for name, field in cls.model_fields.items()
        }
        return {
            canonical.get(key.lower(), key) if isinstance(key, str) else key: value
            for key, value in data.items()
            if value is not None
        }


class WeatherDescription(_WttrModel):
    """One wttr.in text entry, such as "Partly cloudy"."""

    value: str = ""


class CurrentCondition(_WttrModel):
    """Snapshot of the present weather. Temperatures stay strings, as sent."""

    temp_c: str = Field(default="", alias="temp_C")
    feels_like_c: str = Field(default="", alias="FeelsLikeC")
    weather_desc: list[WeatherDescription] = Field(default_factory=list, alias="weatherDesc")

    @property
    def description(self) -> str | None:
        if not self.weather_desc:
            return None
        return self.weather_desc[0].value


class WeatherReport(_WttrModel):
    """Decoded format=j1 response; only current conditions are kept."""

    current_condition: list[CurrentCondition] = Field(default_factory=list)

    @property
    def current(self) -> CurrentCondition | None:
        """First current condition, or None when wttr.in sent none."""
        return self.current_condition[0] if self.current_condition else None
