"""Environment-driven defaults for multiplexers built by logtribe.

Reads ``LOGTRIBE_*`` environment variables through pydantic-settings.
Only the environment is consulted; logtribe does not load config files.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logtribe.models.profile import SinkSpec, TribeProfile
from logtribe.severity import Severity


class TribeSettings(BaseSettings):
    """Multiplexer defaults with environment variable overrides.

    Examples
    --------
    ::

        export LOGTRIBE_LEVEL=warn
        export LOGTRIBE_TAG_NAME=billing.worker
        export LOGTRIBE_PROGNAME=billing
    """

    model_config = SettingsConfigDict(env_prefix="LOGTRIBE_")

    level: Severity = Severity.INFO
    progname: str | None = None
    datetime_format: str | None = None
    tag_name: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: object) -> Severity:
        return Severity.coerce(value)  # type: ignore[arg-type]

    def to_profile(self, sinks: list[SinkSpec]) -> TribeProfile:
        """Combine these settings with a sink list into a profile."""
        return TribeProfile(
            tag_name=self.tag_name,
            level=self.level,
            progname=self.progname,
            datetime_format=self.datetime_format,
            sinks=sinks,
        )
