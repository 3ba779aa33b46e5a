"""Configuration module for the versioned URI plugin.

This module provides the VersionedURIConfig class describing which URIs get a
version component and how it is embedded.

Example:
    Query parameter mode (the default):

        >>> config = VersionedURIConfig(uri="static/", version="1.2.3")
        >>> config.patterns
        ('static/',)

    Path segment mode with several prefixes:

        >>> config = VersionedURIConfig(
        ...     uri=["/static", "media/"],
        ...     in_path=True,
        ...     version="1.2.3",
        ... )
        >>> config.patterns
        ('static/', 'media/')

    Loading from environment:

        >>> import os
        >>> os.environ['VERSIONED_URI_URI'] = 'static,media'
        >>> os.environ['VERSIONED_URI_VERSION'] = '1.2.3'
        >>> config = VersionedURIConfig.from_env()

    Taking the version from the installed application:

        >>> config = VersionedURIConfig.from_package("myapp", uri="static")
"""

import os
import re
from importlib import metadata
from typing import Any

from pydantic import BaseModel, Field, field_validator

from versioned_uri.exceptions import ConfigurationError
from versioned_uri.matcher import join_patterns, normalize_patterns

# Characters that would break out of a path segment or query value
FORBIDDEN_VERSION_CHARS = {"/", "?", "#", "&", "="}


class VersionedURIConfig(BaseModel):
    """Configuration for versioned URIs.

    The configuration is read once at application startup and shared by every
    rewrite call afterwards.

    Attributes:
        uri: Path prefixes whose URIs get versioned. Accepts a list or a single
            string, stored as a tuple. Each entry loses one leading '/'
            and gains a trailing '/' if missing. Entries are regular expressions,
            implicitly anchored right after the request base and terminated by
            '/'. No entries means the plugin does nothing.
        in_path: If True, insert ``v<version>/`` right after the matched prefix.
            If False, set a query parameter instead. Default is False.
        param: Query parameter name used when in_path is False. Default is "v".
        version: Application version to embed.

    Example:
        >>> config = VersionedURIConfig(uri=["foo/", "bar"], param="version", version="1.2.3")
        >>> config.uri
        ('foo/', 'bar/')
        >>> config.enabled
        True

    Note:
        This class is immutable (frozen=True). Build a new instance to change
        settings, typically only when the application restarts.
    """

    uri: tuple[str, ...] = Field(
        default=(),
        description="Path prefixes to version (absent disables rewriting)",
    )
    in_path: bool = Field(
        default=False,
        description="Embed the version as a path segment instead of a query parameter",
    )
    param: str = Field(
        default="v",
        description="Query parameter name, ignored when in_path is true",
    )
    version: str = Field(
        description="Application version to embed in matching URIs",
    )

    model_config = {"frozen": True}

    @field_validator("uri", mode="before")
    @classmethod
    def validate_uri(cls, v: Any) -> tuple[str, ...]:
        """Normalize configured path prefixes and compile them once.

        A single string is a single prefix; commas inside it are kept, since
        they are legal in paths and in regex quantifiers.

        Args:
            v: None, a single prefix, or a list of prefixes.

        Returns:
            Tuple of normalized prefixes, each without leading '/' and with
            exactly one trailing '/'.

        Raises:
            ValueError: If the value is neither a string nor a list of strings,
                or the prefixes do not form a valid regular expression.

        Example:
            >>> VersionedURIConfig(uri="/static", version="1").uri
            ('static/',)
        """
        if v is not None and not isinstance(v, (str, list, tuple)):
            raise ValueError("uri must be a string or a list of strings")

        if isinstance(v, (list, tuple)) and not all(isinstance(item, str) for item in v):
            raise ValueError("uri entries must be strings")

        patterns = normalize_patterns(v)

        alternation = join_patterns(patterns)
        if alternation is not None:
            try:
                re.compile(alternation)
            except re.error as e:
                raise ValueError(f"Invalid uri pattern in {list(patterns)!r}: {e}") from e

        return patterns

    @field_validator("param")
    @classmethod
    def validate_param(cls, v: str) -> str:
        """Validate the query parameter name is usable.

        Raises:
            ValueError: If the name is empty or blank.
        """
        v = v.strip()
        if not v:
            raise ValueError("param must be a non-empty string")
        return v

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate the version can be embedded in a path segment.

        Args:
            v: Version string.

        Returns:
            The stripped version string.

        Raises:
            ValueError: If the version is empty or contains URI delimiters or
                whitespace.

        Example:
            >>> VersionedURIConfig(version=" 1.2.3 ").version
            '1.2.3'
        """
        v = v.strip()
        if not v:
            raise ValueError("version must be a non-empty string")

        bad = {c for c in v if c in FORBIDDEN_VERSION_CHARS or c.isspace()}
        if bad:
            raise ValueError(
                f"version contains characters not allowed in a URI segment: "
                f"{', '.join(repr(c) for c in sorted(bad))}"
            )
        return v

    @property
    def patterns(self) -> tuple[str, ...]:
        """Normalized prefixes as a hashable tuple."""
        return self.uri

    @property
    def enabled(self) -> bool:
        """Whether any prefix is configured."""
        return bool(self.uri)

    @property
    def mode(self) -> str:
        """Rewrite mode label, "path" or "query"."""
        return "path" if self.in_path else "query"

    @property
    def segment(self) -> str:
        """Path segment inserted in in-path mode, e.g. ``v1.2.3/``."""
        return f"v{self.version}/"

    @classmethod
    def from_env(cls, prefix: str = "VERSIONED_URI_") -> "VersionedURIConfig":
        """Create configuration from environment variables.

        Reads ``<prefix>URI`` (comma-separated), ``<prefix>IN_PATH``,
        ``<prefix>PARAM`` and ``<prefix>VERSION``. Missing variables fall back
        to the model defaults; ``VERSION`` is required.

        Args:
            prefix: Prefix for environment variable names. Default is "VERSIONED_URI_".

        Returns:
            VersionedURIConfig instance populated from environment variables.

        Example:
            >>> import os
            >>> os.environ['VERSIONED_URI_URI'] = 'static'
            >>> os.environ['VERSIONED_URI_IN_PATH'] = 'true'
            >>> os.environ['VERSIONED_URI_VERSION'] = '2.0'
            >>> VersionedURIConfig.from_env().segment
            'v2.0/'
        """
        config_dict: dict[str, Any] = {}

        for field_name in ("uri", "in_path", "param", "version"):
            env_value = os.environ.get(f"{prefix}{field_name.upper()}")
            if env_value is None:
                continue

            if field_name == "uri":
                # Comma-separated list of prefixes
                config_dict[field_name] = env_value.split(",")
            else:
                # pydantic coerces "true"/"1"/"yes"/"on" for in_path
                config_dict[field_name] = env_value

        return cls(**config_dict)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "VersionedURIConfig":
        """Create configuration from a dictionary.

        Args:
            config_dict: Dictionary with configuration values.

        Returns:
            VersionedURIConfig instance populated from the dictionary.

        Raises:
            ValidationError: If the dictionary contains invalid values.

        Example:
            >>> config = VersionedURIConfig.from_dict(
            ...     {'uri': ['foo/', 'bar'], 'param': 'version', 'version': '1.2.3'}
            ... )
            >>> config.param
            'version'
        """
        return cls(**config_dict)

    @classmethod
    def from_package(cls, distribution: str, **options: Any) -> "VersionedURIConfig":
        """Create configuration using an installed distribution's version.

        Args:
            distribution: Name of the installed distribution, typically the
                application itself.
            **options: Remaining configuration options (uri, in_path, param).

        Returns:
            VersionedURIConfig with ``version`` set from package metadata.

        Raises:
            ConfigurationError: If the distribution is not installed.
        """
        try:
            version = metadata.version(distribution)
        except metadata.PackageNotFoundError as e:
            raise ConfigurationError(
                f"Cannot resolve version: distribution {distribution!r} is not installed",
                option="version",
            ) from e

        return cls(version=version, **options)
