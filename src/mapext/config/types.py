"""Configuration type definitions for mapext settings.

This module defines the Pydantic models for the config sections nested
within the main Settings class:

- MergeConfig: self_merge policy
- LoggingConfig: trace_callbacks

Design decision: All types use `extra="allow"` to preserve unknown fields.
Use `get_extra_fields()` to inspect them when auditing config for typos.
"""

import typing as _typing

import pydantic as _pydantic

# =============================================================================
# Base class with introspection
# =============================================================================


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    All config types use `extra="allow"` so unknown fields are preserved
    rather than silently dropped.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}

    def has_extra_fields(self) -> bool:
        """Check if this config has any unrecognized fields."""
        return bool(self.model_extra)


# =============================================================================
# Merge Settings
# =============================================================================


SelfMergePolicy = _typing.Literal["snapshot", "error"]


class MergeConfig(ConfigBase):
    """
    Settings for merge_into().

    Env: MAPEXT_MERGE__*
    """

    self_merge: SelfMergePolicy = "snapshot"
    """What merge_into() does when source is target.

    "snapshot": allowed; the source pairs are copied before writing.
    "error": raise SelfMergeError before any mutation.
    """


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingConfig(ConfigBase):
    """
    Logging settings.

    Env: MAPEXT_LOGGING__*
    """

    trace_callbacks: bool = False
    """Log every resolver / predicate / on_missing call at debug level."""
