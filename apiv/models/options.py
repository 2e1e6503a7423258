"""Plugin option models.

This module defines the schema for the top-level plugin options and for
the per-route overrides attached to individual endpoints.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from apiv.core.config import settings
from apiv.exceptions import InvalidPluginOptionsError


class ApiVersionOptions(BaseModel):
    """
    Validated top-level options.

    Missing ``version`` and ``prefix`` fall back to the configured defaults
    (``v1`` and ``api`` unless overridden through ``APIV_DEFAULT_*``).
    An explicit empty string is kept as-is and turns that segment off.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str = Field(
        default_factory=lambda: settings.DEFAULT_VERSION,
        max_length=255,
        description="Version segment, e.g. v1"
    )
    prefix: str = Field(
        default_factory=lambda: settings.DEFAULT_PREFIX,
        max_length=255,
        description="Prefix segment placed before the version, e.g. api"
    )
    enabled: Optional[bool] = Field(
        default=None,
        description="False disables prefixing and aliasing entirely"
    )

    @property
    def is_disabled(self) -> bool:
        return self.enabled is False

    @classmethod
    def from_input(
        cls, options: Union["ApiVersionOptions", Mapping[str, Any], None] = None
    ) -> "ApiVersionOptions":
        """
        Validate raw options and merge them onto the defaults.

        Raises:
            InvalidPluginOptionsError: If validation fails
        """
        if isinstance(options, cls):
            return options
        if options is None:
            options = {}
        try:
            return cls.model_validate(options)
        except ValidationError as e:
            raise InvalidPluginOptionsError(f"Invalid plugin options: {e}") from e


class RouteVersionConfig(BaseModel):
    """
    Per-route override.

    Which keys were given is tracked through ``model_fields_set`` so that
    ``{"prefix": ""}`` (opt out of the prefix) stays distinct from ``{}``
    (inherit the global prefix). Keys other than ``enabled``, ``prefix`` and
    ``version`` are ignored.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    version: Optional[str] = Field(default=None, max_length=255)
    prefix: Optional[str] = Field(default=None, max_length=255)
    enabled: Optional[bool] = None

    @property
    def has_prefix(self) -> bool:
        return "prefix" in self.model_fields_set

    @property
    def has_version(self) -> bool:
        return "version" in self.model_fields_set

    @property
    def is_disabled(self) -> bool:
        return self.enabled is False

    def effective_prefix(self, options: ApiVersionOptions) -> Optional[str]:
        return self.prefix if self.has_prefix else options.prefix

    def effective_version(self, options: ApiVersionOptions) -> Optional[str]:
        return self.version if self.has_version else options.version

    @classmethod
    def coerce(cls, value: Any) -> Optional["RouteVersionConfig"]:
        """
        Normalise raw route metadata.

        ``None`` means no override, ``False`` disables versioning for the
        route and ``True`` keeps the global settings. Anything else is
        parsed as a mapping.

        Raises:
            pydantic.ValidationError: If a known key has the wrong type
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if value is False:
            return cls(enabled=False)
        if value is True:
            return cls()
        return cls.model_validate(value)
