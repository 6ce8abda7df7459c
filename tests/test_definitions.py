"""Tests for the property catalog built by PropertyDefinitions.create()."""

import logging

import pytest

from dotnet_shared.config import CSHARP, VBNET
from dotnet_shared.properties.definitions import (
    EXTERNAL_ANALYZERS_CATEGORY,
    EXTERNAL_ISSUES_MIN_API_VERSION,
    PropertyDefinitions,
    supports_external_issues,
)
from dotnet_shared.properties.models import PropertyType, Qualifier
from dotnet_shared.version import HostRuntime, Version


def _create(language_key="cs", language_name="C#", suffixes=".cs", version="7.4"):
    return PropertyDefinitions(language_key, language_name, suffixes, version).create()


class TestVersionGate:
    """External analyzer properties depend on the host API version."""

    def test_old_host_gets_four_properties(self):
        assert len(_create(version="6.7")) == 4

    def test_new_host_gets_eight_properties(self):
        assert len(_create(version="7.4")) == 8
        assert len(_create(version="8.9.1.12345")) == 8

    def test_boundary_is_inclusive(self):
        assert len(_create(version=Version.create(7, 4))) == 8
        assert len(_create(version=Version.create(7, 3, 99))) == 4
        assert len(_create(version="7.3.99.99999")) == 4

    def test_snapshot_of_threshold_is_below_it(self):
        assert len(_create(version="7.4-SNAPSHOT")) == 4
        assert len(_create(version="7.4.0.1-SNAPSHOT")) == 8

    def test_first_four_identical_across_versions(self):
        old = _create(version="7.3")
        new = _create(version="7.4")
        assert new[:4] == old

    def test_supports_external_issues(self):
        assert supports_external_issues(EXTERNAL_ISSUES_MIN_API_VERSION)
        assert supports_external_issues(Version.parse("10.0"))
        assert not supports_external_issues(Version.parse("7.3"))

    def test_accepts_host_runtime(self):
        runtime = HostRuntime(api_version=Version.create(7, 4))
        definitions = PropertyDefinitions("cs", "C#", ".cs", runtime)
        assert definitions.runtime is runtime
        assert len(definitions.create()) == 8

    def test_gated_out_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="dotnet_shared.properties.definitions"):
            _create(version="7.2")
        assert "omitted" in caplog.text


class TestKeys:
    def test_csharp_always_present_keys(self):
        keys = [d.key for d in _create(version="7.0")]
        assert keys == [
            "sonar.cs.roslyn.reportFilePaths",
            "sonar.cs.analyzer.projectOutPaths",
            "sonar.cs.file.suffixes",
            "sonar.cs.ignoreHeaderComments",
        ]

    def test_all_keys_prefixed_with_language_key(self):
        for d in _create(language_key="vbnet", language_name="VB.NET", suffixes=".vb"):
            assert d.key.startswith("sonar.vbnet.")

    def test_keys_unique(self):
        keys = [d.key for d in _create()]
        assert len(keys) == len(set(keys))

    def test_language_key_embedded_verbatim(self):
        keys = [d.key for d in _create(language_key="")]
        assert keys[0] == "sonar..roslyn.reportFilePaths"


class TestDescriptors:
    def test_hidden_properties(self):
        hidden = [d for d in _create() if d.hidden]
        assert [d.key for d in hidden] == [
            "sonar.cs.roslyn.reportFilePaths",
            "sonar.cs.analyzer.projectOutPaths",
        ]
        for d in hidden:
            assert d.multi_values
            assert d.name is None
            assert d.description is None
            assert d.default_value is None
            assert d.qualifiers == ()

    def test_visible_properties_have_display_metadata(self):
        for d in _create():
            if not d.hidden:
                assert d.name
                assert d.description
                assert d.qualifiers == (Qualifier.PROJECT,)

    def test_file_suffixes_for_vbnet(self):
        definitions = PropertyDefinitions.from_config(VBNET, "7.4").create()
        suffixes = definitions[2]
        assert suffixes.key == "sonar.vbnet.file.suffixes"
        assert suffixes.default_value == ".vb"
        assert suffixes.category == "VB.NET"
        assert suffixes.name == "File suffixes"
        assert suffixes.multi_values
        assert suffixes.type == PropertyType.STRING

    def test_ignore_header_comments(self):
        d = _create()[3]
        assert d.key == "sonar.cs.ignoreHeaderComments"
        assert d.type == PropertyType.BOOLEAN
        assert d.default_value == "true"
        assert d.category == "C#"
        assert d.name == "Ignore header comments"
        assert not d.multi_values

    def test_external_analyzer_properties(self):
        gated = PropertyDefinitions.from_config(CSHARP, "7.4").create()[4:]
        assert [d.key for d in gated] == [
            "sonar.cs.roslyn.importAllIssues",
            "sonar.cs.roslyn.codeSmellCategories",
            "sonar.cs.roslyn.bugCategories",
            "sonar.cs.roslyn.vulnerabilityCategories",
        ]
        assert [d.index for d in gated] == [0, 1, 2, 3]
        for d in gated:
            assert d.category == EXTERNAL_ANALYZERS_CATEGORY
            assert d.sub_category == "C#"
            assert d.qualifiers == (Qualifier.PROJECT,)

    def test_import_all_issues_is_boolean_true(self):
        d = _create()[4]
        assert d.type == PropertyType.BOOLEAN
        assert d.default_value == "true"
        assert d.name == "Import all Roslyn Issues"
        assert not d.multi_values

    @pytest.mark.parametrize("position, name", [
        (5, "Code Smell Roslyn Categories"),
        (6, "Bug Roslyn Categories"),
        (7, "Vulnerability Roslyn Categories"),
    ])
    def test_category_lists_are_multi_valued_without_default(self, position, name):
        d = _create()[position]
        assert d.name == name
        assert d.type == PropertyType.STRING
        assert d.multi_values
        assert d.default_value is None

    def test_create_returns_fresh_list(self):
        builder = PropertyDefinitions("cs", "C#", ".cs", "7.4")
        first = builder.create()
        first.clear()
        assert len(builder.create()) == 8
