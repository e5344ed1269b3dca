"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with MAPEXT_ prefix
3. Field defaults

Nested config uses double underscore delimiter:
  MAPEXT_MERGE__SELF_MERGE=error
  MAPEXT_LOGGING__TRACE_CALLBACKS=true
"""

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import mapext.config.types as types


class Settings(_pydantic_settings.BaseSettings):
    """
    mapext configuration settings.

    All settings can be overridden via environment variables with MAPEXT_ prefix.
    For nested config, use double underscore: MAPEXT_MERGE__SELF_MERGE=error
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="MAPEXT_",
        env_nested_delimiter="__",  # MAPEXT_MERGE__SELF_MERGE
        extra="allow",  # Preserve unknown fields for auditing
    )

    merge: types.MergeConfig = _pydantic.Field(default_factory=types.MergeConfig)
    """merge_into() behavior."""

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Logging behavior."""

    def collect_extra_fields(self) -> dict[str, object]:
        """
        Collect unknown fields from all sections as dotted paths.

        Returns:
            Flat dict of path → value, e.g. {"merge.self_merg": "error"}.
        """
        result: dict[str, object] = {}
        if self.model_extra:
            result.update(self.model_extra)
        for name in ("merge", "logging"):
            section = getattr(self, name)
            for key, value in section.get_extra_fields().items():
                result[f"{name}.{key}"] = value
        return result


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Return the process settings, building them on first use.

    Environment changes after the first call are not seen until
    reset_settings() is called.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
