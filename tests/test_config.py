#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandLink v0.1.0

Tests for configuration loading and validation.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
import yaml

from strandlink.config import (
    DEFAULT_CONFIG,
    apply_overrides,
    load_config,
    overlap_config_from,
    save_config_template,
    validate_config,
)
from strandlink.errors import ConfigError


class TestLoadConfig:

    def test_defaults(self):
        config = load_config()
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_merge_user_file(self, temp_output_dir):
        path = temp_output_dir / "config.yaml"
        path.write_text("overlap:\n  k: 31\noutput:\n  format: dot\n")
        config = load_config(path)
        assert config['overlap']['k'] == 31
        assert config['overlap']['colour_space'] is None
        assert config['output']['format'] == 'dot'
        assert config['output']['logging']['level'] == 'WARNING'

    def test_empty_file(self, temp_output_dir):
        path = temp_output_dir / "empty.yaml"
        path.write_text("")
        assert load_config(path) == DEFAULT_CONFIG

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(ConfigError):
            load_config(temp_output_dir / "missing.yaml")

    def test_not_a_mapping(self, temp_output_dir):
        path = temp_output_dir / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_yaml(self, temp_output_dir):
        path = temp_output_dir / "bad.yaml"
        path.write_text("overlap: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(path)

    @pytest.mark.parametrize("text,section", [
        ("overlap:\n", "overlap"),
        ("output:\n  logging:\n", "output.logging"),
        ("output: adj\n", "output"),
    ])
    def test_empty_or_scalar_section(self, temp_output_dir, text, section):
        path = temp_output_dir / "sections.yaml"
        path.write_text(text)
        with pytest.raises(ConfigError, match=f"'{section}' must be a mapping"):
            load_config(path)


class TestOverrides:

    def test_none_values_skipped(self):
        config = apply_overrides(load_config(), {'overlap.k': 25, 'output.format': None})
        assert config['overlap']['k'] == 25
        assert config['output']['format'] == 'adj'

    def test_original_untouched(self):
        base = load_config()
        apply_overrides(base, {'overlap.k': 25})
        assert base['overlap']['k'] is None


class TestValidation:

    def test_missing_k(self):
        errors = validate_config(load_config())
        assert any('overlap.k' in e for e in errors)

    @pytest.mark.parametrize("k", [0, 1, -3, "31", True, 2.5])
    def test_invalid_k(self, k):
        config = apply_overrides(load_config(), {'overlap.k': k})
        assert validate_config(config)

    def test_valid(self):
        config = apply_overrides(load_config(), {'overlap.k': 2})
        assert validate_config(config) == []

    def test_invalid_format_and_level(self):
        config = apply_overrides(load_config(), {
            'overlap.k': 31,
            'output.format': 'fastg',
            'output.logging.level': 'LOUD',
        })
        assert len(validate_config(config)) == 2

    def test_invalid_colour_space(self):
        config = apply_overrides(load_config(), {'overlap.k': 31, 'overlap.colour_space': 'yes'})
        assert validate_config(config)

    def test_section_not_a_mapping(self):
        config = load_config()
        config['output']['logging'] = None
        errors = validate_config(config)
        assert errors == ["Section 'output.logging' must be a mapping, got None"]

    def test_overlap_config_from(self):
        config = apply_overrides(load_config(), {'overlap.k': 31, 'overlap.colour_space': True})
        overlap_config = overlap_config_from(config)
        assert overlap_config.k == 31
        assert overlap_config.overlap == 30
        assert overlap_config.colour_space is True

    def test_overlap_config_from_invalid(self):
        with pytest.raises(ConfigError):
            overlap_config_from(load_config())


class TestTemplate:

    def test_template_round_trip(self, temp_output_dir):
        path = temp_output_dir / "template.yaml"
        save_config_template(path, k=41)
        with open(path) as f:
            data = yaml.safe_load(f)
        assert data['overlap']['k'] == 41
        assert validate_config(load_config(path)) == []

# StrandLink v0.1.0
# Any usage is subject to this software's license.
