"""
Property key derivation.

Every key is "sonar.<language_key>.<suffix>". The analyzer integration and the
settings readers call these directly to look up values the user configured,
so a key must only ever depend on the language key.
"""

from __future__ import annotations

from typing import Callable

PROP_PREFIX = "sonar."


def _key(language_key: str, suffix: str) -> str:
    return f"{PROP_PREFIX}{language_key}.{suffix}"


def ignore_header_comments_property(language_key: str) -> str:
    return _key(language_key, "ignoreHeaderComments")


def file_suffix_property(language_key: str) -> str:
    return _key(language_key, "file.suffixes")


def roslyn_json_report_path_property(language_key: str) -> str:
    """Key under which the scanner passes the Roslyn JSON report paths."""
    return _key(language_key, "roslyn.reportFilePaths")


def analyzer_work_dir_property(language_key: str) -> str:
    """Key under which the scanner passes the per-project analyzer output dirs."""
    return _key(language_key, "analyzer.projectOutPaths")


def import_all_issues_property(language_key: str) -> str:
    return _key(language_key, "roslyn.importAllIssues")


def bug_categories_property(language_key: str) -> str:
    return _key(language_key, "roslyn.bugCategories")


def code_smell_categories_property(language_key: str) -> str:
    return _key(language_key, "roslyn.codeSmellCategories")


def vulnerability_categories_property(language_key: str) -> str:
    return _key(language_key, "roslyn.vulnerabilityCategories")


# Short names used by the CLI, in catalog order
KEY_FUNCTIONS: dict[str, Callable[[str], str]] = {
    "reportFilePaths": roslyn_json_report_path_property,
    "projectOutPaths": analyzer_work_dir_property,
    "fileSuffixes": file_suffix_property,
    "ignoreHeaderComments": ignore_header_comments_property,
    "importAllIssues": import_all_issues_property,
    "codeSmellCategories": code_smell_categories_property,
    "bugCategories": bug_categories_property,
    "vulnerabilityCategories": vulnerability_categories_property,
}
