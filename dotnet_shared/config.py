from __future__ import annotations

"""
Plugin configuration: which .NET languages are declared and which host API
version the catalog is built for.

Each language plugin only differs by data (key, display name, default file
suffixes), so languages are plain LanguageConfig records instead of
subclasses. Adding a language means adding a record here.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Sequence

from dotnet_shared.version import Version

logger = logging.getLogger(__name__)

API_VERSION_ENV_VAR = "DOTNET_SHARED_API_VERSION"
DEFAULT_API_VERSION = Version.create(7, 4)


@dataclass(frozen=True)
class LanguageConfig:
    """Per-language inputs of the property catalog."""

    key: str
    name: str
    file_suffixes_default: str


CSHARP = LanguageConfig(key="cs", name="C#", file_suffixes_default=".cs")
VBNET = LanguageConfig(key="vbnet", name="VB.NET", file_suffixes_default=".vb")


@dataclass
class Config:
    """
    Catalog configuration.

    Carries the declared languages and the host API version used when the
    caller does not supply one.
    """

    languages: Sequence[LanguageConfig] = field(default_factory=list)
    api_version: Version = DEFAULT_API_VERSION

    @classmethod
    def from_env(cls) -> "Config":
        """Default configuration, with the API version overridable from the environment."""
        config = get_default_config()
        raw = os.getenv(API_VERSION_ENV_VAR)
        if raw:
            config.api_version = Version.parse(raw)
            logger.debug("Host API version %s taken from %s", config.api_version, API_VERSION_ENV_VAR)
        return config


def get_default_config() -> Config:
    """Return the default configuration with every built-in language."""
    languages: List[LanguageConfig] = [CSHARP, VBNET]
    return Config(languages=languages)


def get_language(key: str, config: Config | None = None) -> LanguageConfig:
    """
    Look up a declared language by key.

    Raises KeyError if the configuration does not declare it.
    """
    if config is None:
        config = get_default_config()
    for language in config.languages:
        if language.key == key:
            return language
    raise KeyError(key)
