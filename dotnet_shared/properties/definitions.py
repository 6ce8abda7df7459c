# Property catalog of a .NET language plugin: the settings the host registers and shows.

from __future__ import annotations

import logging
from typing import Union

from dotnet_shared.config import LanguageConfig
from dotnet_shared.properties.keys import (
    analyzer_work_dir_property,
    bug_categories_property,
    code_smell_categories_property,
    file_suffix_property,
    ignore_header_comments_property,
    import_all_issues_property,
    roslyn_json_report_path_property,
    vulnerability_categories_property,
)
from dotnet_shared.properties.models import PropertyDefinition, PropertyType, Qualifier
from dotnet_shared.version import HostRuntime, Version

logger = logging.getLogger(__name__)

EXTERNAL_ANALYZERS_CATEGORY = "External Analyzers"

# First host API able to import issues from third party Roslyn analyzers
EXTERNAL_ISSUES_MIN_API_VERSION = Version.create(7, 4)

IGNORE_HEADER_COMMENTS_DESCRIPTION = (
    'If set to "true", the file headers (that are usually the same on each file: '
    'licensing information for example) are not considered as comments. Thus metrics such as "Comment lines" '
    'do not get incremented. If set to "false", those file headers are considered as comments and metrics such as '
    '"Comment lines" get incremented.'
)

_PROJECT = (Qualifier.PROJECT,)


def supports_external_issues(api_version: Version) -> bool:
    """True if a host with this API version knows about external analyzer settings."""
    return api_version.is_greater_than_or_equal(EXTERNAL_ISSUES_MIN_API_VERSION)


def _as_runtime(runtime: Union[HostRuntime, Version, str]) -> HostRuntime:
    if isinstance(runtime, HostRuntime):
        return runtime
    if isinstance(runtime, str):
        runtime = Version.parse(runtime)
    return HostRuntime(api_version=runtime)


class PropertyDefinitions:
    """
    Builds the property declarations of one .NET language plugin.

    The inputs are fixed at construction; create() can be called any number
    of times and returns a new list each time. Keys are embedded verbatim,
    the language key is not validated.
    """

    def __init__(
        self,
        language_key: str,
        language_name: str,
        file_suffix_default_value: str,
        runtime: Union[HostRuntime, Version, str],
    ) -> None:
        self._language_key = language_key
        self._language_name = language_name
        self._file_suffix_default_value = file_suffix_default_value
        self._runtime = _as_runtime(runtime)

    @classmethod
    def from_config(
        cls,
        language: LanguageConfig,
        runtime: Union[HostRuntime, Version, str],
    ) -> PropertyDefinitions:
        return cls(language.key, language.name, language.file_suffixes_default, runtime)

    @property
    def language_key(self) -> str:
        return self._language_key

    @property
    def language_name(self) -> str:
        return self._language_name

    @property
    def runtime(self) -> HostRuntime:
        return self._runtime

    def create(self) -> list[PropertyDefinition]:
        """
        Return the property declarations in registration order.

        The four external analyzer properties are only part of the list when
        the host API version is at least EXTERNAL_ISSUES_MIN_API_VERSION.
        """
        key = self._language_key
        result: list[PropertyDefinition] = [
            PropertyDefinition(
                key=roslyn_json_report_path_property(key),
                multi_values=True,
                hidden=True,
            ),
            PropertyDefinition(
                key=analyzer_work_dir_property(key),
                multi_values=True,
                hidden=True,
            ),
            PropertyDefinition(
                key=file_suffix_property(key),
                category=self._language_name,
                default_value=self._file_suffix_default_value,
                name="File suffixes",
                description="Comma-separated list of suffixes of files to analyze.",
                multi_values=True,
                qualifiers=_PROJECT,
            ),
            PropertyDefinition(
                key=ignore_header_comments_property(key),
                category=self._language_name,
                default_value="true",
                name="Ignore header comments",
                description=IGNORE_HEADER_COMMENTS_DESCRIPTION,
                qualifiers=_PROJECT,
                type=PropertyType.BOOLEAN,
            ),
        ]

        api_version = self._runtime.api_version
        if supports_external_issues(api_version):
            result.extend(self._external_analyzer_properties())
        else:
            logger.debug(
                "Host API %s is older than %s: external analyzer properties of %s omitted",
                api_version,
                EXTERNAL_ISSUES_MIN_API_VERSION,
                key,
            )

        logger.debug("Built %d property definitions for language %s", len(result), key)
        return result

    def _external_analyzer_properties(self) -> list[PropertyDefinition]:
        key = self._language_key
        return [
            PropertyDefinition(
                key=import_all_issues_property(key),
                type=PropertyType.BOOLEAN,
                category=EXTERNAL_ANALYZERS_CATEGORY,
                sub_category=self._language_name,
                index=0,
                default_value="true",
                name="Import all Roslyn Issues",
                description="Should issues coming from third party Roslyn analyzers be reported as external issues?",
                qualifiers=_PROJECT,
            ),
            PropertyDefinition(
                key=code_smell_categories_property(key),
                type=PropertyType.STRING,
                multi_values=True,
                category=EXTERNAL_ANALYZERS_CATEGORY,
                sub_category=self._language_name,
                index=1,
                name="Code Smell Roslyn Categories",
                description="List of Roslyn rule categories that will be mapped to code smells",
                qualifiers=_PROJECT,
            ),
            PropertyDefinition(
                key=bug_categories_property(key),
                type=PropertyType.STRING,
                multi_values=True,
                category=EXTERNAL_ANALYZERS_CATEGORY,
                sub_category=self._language_name,
                index=2,
                name="Bug Roslyn Categories",
                description="List of Roslyn rule categories that will be mapped to bugs",
                qualifiers=_PROJECT,
            ),
            PropertyDefinition(
                key=vulnerability_categories_property(key),
                type=PropertyType.STRING,
                multi_values=True,
                category=EXTERNAL_ANALYZERS_CATEGORY,
                sub_category=self._language_name,
                index=3,
                name="Vulnerability Roslyn Categories",
                description="List of Roslyn rule categories that will be mapped to vulnerabilities",
                qualifiers=_PROJECT,
            ),
        ]
