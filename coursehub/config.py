"""
Configuration for catalog instances.
"""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.enums import DuplicatePolicy
from .core.exceptions import ConfigurationError


ENV_PREFIX = "COURSEHUB_"


class CatalogSettings(BaseModel):
    """Settings applied when a catalog is created."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    duplicate_policy: DuplicatePolicy = Field(
        default=DuplicatePolicy.VALUE,
        description="Equality used by add_course to detect an already stored course",
    )
    thread_safe: bool = Field(
        default=True,
        description="Guard both collections with a single re-entrant lock",
    )

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "CatalogSettings":
        """Build settings from a plain mapping, e.g. a parsed config file."""
        try:
            return cls.model_validate(dict(config))
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid catalog configuration: {e.error_count()} error(s)",
                error_code="invalid_config",
                details={'errors': e.errors(include_url=False)},
            ) from e

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CatalogSettings":
        """Get catalog settings from environment variables"""
        environ = os.environ if environ is None else environ
        config: Dict[str, Any] = {}

        duplicate_policy = environ.get(f"{ENV_PREFIX}DUPLICATE_POLICY")
        if duplicate_policy:
            config['duplicate_policy'] = duplicate_policy.strip().lower()

        thread_safe = environ.get(f"{ENV_PREFIX}THREAD_SAFE")
        if thread_safe:
            config['thread_safe'] = thread_safe.strip().lower()

        return cls.from_dict(config)
