"""Unit tests for causal_cmd.catalogs.loader module."""

import json
from pathlib import Path

import pytest

from causal_cmd.catalogs.loader import bundle_from_mapping, load_catalog_bundle
from causal_cmd.catalogs.params import ArgumentType
from causal_cmd.cli.options.definition import build_from_param
from causal_cmd.configs.constants import (
    CATALOG_PATH_ENV_VAR,
    DEFAULT_DATA_TYPES,
    DEFAULT_DELIMITERS,
)
from causal_cmd.configs.errors import CatalogParseError, CatalogUnavailableError

YAML_CATALOG = """
algorithms:
  fges: Fast Greedy Equivalence Search
scores: [sem-bic-score]
independence_tests: [fisher-z-test]
delimiters: [comma]
parameters:
  alpha:
    description: Significance level.
    default: 0.05
  verbose:
    description: Verbose output.
    default: false
"""


class TestLoadCatalogBundle:
    """Tests for loading catalog files."""

    def test_load_packaged_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the packaged default catalogs."""
        monkeypatch.delenv(CATALOG_PATH_ENV_VAR, raising=False)

        bundle = load_catalog_bundle()

        assert "fges" in bundle.algorithms.command_tokens()
        assert len(bundle.scores) > 0
        assert len(bundle.tests) > 0
        assert bundle.delimiters.names() == DEFAULT_DELIMITERS
        assert bundle.data_types.names() == DEFAULT_DATA_TYPES
        assert bundle.params.get("alpha").default_value.kind is ArgumentType.FLOAT
        assert bundle.params.get("faithfulnessAssumed").default_value.kind is ArgumentType.BOOLEAN

    def test_load_yaml_file(self, tmp_path: Path) -> None:
        """Test loading a YAML catalog."""
        catalog_file = tmp_path / "catalogs.yml"
        catalog_file.write_text(YAML_CATALOG, encoding="utf-8")

        bundle = load_catalog_bundle(str(catalog_file))

        assert bundle.algorithms.full_names() == {"fges": "Fast Greedy Equivalence Search"}
        assert bundle.delimiters.names() == ["comma"]
        assert bundle.data_types.names() == DEFAULT_DATA_TYPES
        assert [param.name for param in bundle.params] == ["alpha", "verbose"]

    def test_load_json_file(self, tmp_path: Path) -> None:
        """Test loading a JSON catalog."""
        catalog_file = tmp_path / "catalogs.json"
        catalog_file.write_text(
            json.dumps(
                {
                    "algorithms": ["fci"],
                    "parameters": {"depth": {"description": "Depth.", "default": 3}},
                }
            ),
            encoding="utf-8",
        )

        bundle = load_catalog_bundle(str(catalog_file))

        assert bundle.algorithms.command_tokens() == ["fci"]
        assert bundle.params.get("depth").default_value.value == 3

    def test_env_var_selects_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the environment variable overrides the default path."""
        catalog_file = tmp_path / "catalogs.yaml"
        catalog_file.write_text(YAML_CATALOG, encoding="utf-8")
        monkeypatch.setenv(CATALOG_PATH_ENV_VAR, str(catalog_file))

        bundle = load_catalog_bundle()

        assert bundle.delimiters.names() == ["comma"]

    def test_missing_file_raises_unavailable(self, tmp_path: Path) -> None:
        """Test that a missing file is reported as unavailable."""
        with pytest.raises(CatalogUnavailableError, match="catalog file not found"):
            load_catalog_bundle(str(tmp_path / "missing.yaml"))

    def test_unsupported_extension_raises_parse_error(self, tmp_path: Path) -> None:
        """Test that only YAML and JSON are accepted."""
        catalog_file = tmp_path / "catalogs.ini"
        catalog_file.write_text("[algorithms]\n", encoding="utf-8")

        with pytest.raises(CatalogParseError, match="Unsupported catalog file format"):
            load_catalog_bundle(str(catalog_file))

    def test_malformed_yaml_raises_parse_error(self, tmp_path: Path) -> None:
        """Test that YAML syntax errors are wrapped."""
        catalog_file = tmp_path / "catalogs.yaml"
        catalog_file.write_text("algorithms: [fges\n", encoding="utf-8")

        with pytest.raises(CatalogParseError):
            load_catalog_bundle(str(catalog_file))

    def test_non_mapping_document_raises_parse_error(self, tmp_path: Path) -> None:
        """Test that the top level must be a mapping."""
        catalog_file = tmp_path / "catalogs.yaml"
        catalog_file.write_text("- fges\n- fci\n", encoding="utf-8")

        with pytest.raises(CatalogParseError, match="mapping"):
            load_catalog_bundle(str(catalog_file))


def test_bundle_from_empty_mapping_has_empty_providers() -> None:
    """Test that absent sections produce empty catalogs."""
    bundle = bundle_from_mapping({})

    assert bundle.algorithms.command_tokens() == []
    assert len(bundle.params) == 0
    assert bundle.delimiters.names() == DEFAULT_DELIMITERS


class TestCatalogShape:
    """Tests for rejecting badly shaped catalog sections."""

    @pytest.mark.parametrize(
        ("raw_catalogs", "section"),
        [
            ({"parameters": ["alpha"]}, "parameters"),
            ({"algorithms": 5}, "algorithms"),
            ({"scores": "sem-bic-score"}, "scores"),
            ({"independence_tests": 1.5}, "independence_tests"),
            ({"delimiters": "comma"}, "delimiters"),
            ({"data_types": {"continuous": "Continuous"}}, "data_types"),
        ],
    )
    def test_wrong_section_type_raises_parse_error(
        self, raw_catalogs: dict, section: str
    ) -> None:
        """Test that a section of the wrong type is named in the error."""
        with pytest.raises(CatalogParseError, match=f"'{section}'"):
            bundle_from_mapping(raw_catalogs)

    def test_scalar_delimiters_in_file_raise_parse_error(self, tmp_path: Path) -> None:
        """Test that a scalar static section is not split into characters."""
        catalog_file = tmp_path / "catalogs.yaml"
        catalog_file.write_text(YAML_CATALOG.replace("[comma]", "comma"), encoding="utf-8")

        with pytest.raises(CatalogParseError, match="'delimiters' must be a list"):
            load_catalog_bundle(str(catalog_file))

    def test_undecodable_file_raises_parse_error(self, tmp_path: Path) -> None:
        """Test that non UTF-8 bytes are reported as a parse failure."""
        catalog_file = tmp_path / "catalogs.yaml"
        catalog_file.write_bytes(b"\xff\xfe")

        with pytest.raises(CatalogParseError):
            load_catalog_bundle(str(catalog_file))

    def test_undecodable_json_file_raises_parse_error(self, tmp_path: Path) -> None:
        """Test that non UTF-8 JSON bytes are reported as a parse failure."""
        catalog_file = tmp_path / "catalogs.json"
        catalog_file.write_bytes(b"\xff\xfe")

        with pytest.raises(CatalogParseError):
            load_catalog_bundle(str(catalog_file))


class TestYamlNumbers:
    """Tests for numeric defaults written in YAML."""

    @pytest.mark.parametrize(
        ("literal", "expected"),
        [("1e-5", 1e-5), ("2E3", 2000.0), ("-3e+2", -300.0), ("1.5e-3", 1.5e-3)],
    )
    def test_exponent_default_is_float(
        self, tmp_path: Path, literal: str, expected: float
    ) -> None:
        """Test that scientific notation defaults load as floats."""
        catalog_file = tmp_path / "catalogs.yaml"
        catalog_file.write_text(
            f"parameters:\n  alpha:\n    description: Alpha.\n    default: {literal}\n",
            encoding="utf-8",
        )

        bundle = load_catalog_bundle(str(catalog_file))

        default = bundle.params.get("alpha").default_value
        assert default.kind is ArgumentType.FLOAT
        assert default.value == pytest.approx(expected)
        assert build_from_param(bundle.params.get("alpha")).argument_label == "double"

    def test_plain_integer_stays_integer(self, tmp_path: Path) -> None:
        """Test that integers are not read as floats."""
        catalog_file = tmp_path / "catalogs.yaml"
        catalog_file.write_text(
            "parameters:\n  depth:\n    description: Depth.\n    default: 10\n",
            encoding="utf-8",
        )

        bundle = load_catalog_bundle(str(catalog_file))

        assert bundle.params.get("depth").default_value.kind is ArgumentType.INTEGER
