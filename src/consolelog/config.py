"""Configuration values for the consolelog package."""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from consolelog.fields import FieldNames
from consolelog.timefmt import KITCHEN


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CONSOLELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    time_format: str = Field(KITCHEN, description="strftime layout for timestamps")
    timestamp_field: str = Field(
        "time", description="Name of the timestamp field (e.g. 'time', 'timestamp')"
    )
    parts_order: list[str] | None = Field(
        None, description="Known fields in display order (None for the default order)"
    )
    exclude_fields: list[str] = Field(
        default_factory=list,
        description="Fields never rendered as name=value pairs (e.g. 'build')",
    )
    no_color: bool | None = Field(
        None, description="Disable (True) or force (False) colors; None auto-detects"
    )

    log_level: str = Field("WARNING", description="Log level for diagnostics")

    def writer_kwargs(self) -> dict[str, Any]:
        """Keyword configuration for ConsoleWriter."""
        return {
            "time_format": self.time_format,
            "field_names": FieldNames(timestamp=self.timestamp_field),
            "parts_order": self.parts_order,
            "exclude_fields": self.exclude_fields,
            "no_color": self.no_color,
        }


settings = Settings()
