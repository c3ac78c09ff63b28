"""Unit tests for configuration management."""

import json

import pytest

from lessonlint.config import (
    CONFIG_FILENAME,
    DEFAULT_EXCLUDES,
    LabelsConfig,
    LessonLintConfig,
    LogLevel,
    create_default_config,
    find_config_file,
    load_config,
)
from lessonlint.labels import SectionId


class TestLessonLintConfig:
    """Test complete LessonLintConfig model."""

    def test_defaults(self):
        config = LessonLintConfig()

        assert config.scan.exclude == DEFAULT_EXCLUDES
        assert config.scan.skip_hidden is True
        assert config.lessons.pattern == r"^\d{2}-[a-z-]+$"
        assert config.languages.primary.filename == "README.md"
        assert config.languages.secondary.filename == "README_ID.md"
        assert config.attribution.min_length == 500
        assert config.logging.level == LogLevel.WARN.value

    def test_naming_excludes_include_auxiliary_dirs(self):
        config = LessonLintConfig()
        assert "exercises" in config.naming_excludes
        assert "node_modules" in config.naming_excludes

    def test_lesson_pattern_is_compiled(self):
        pattern = LessonLintConfig().lesson_pattern
        assert pattern.match("01-fundamentals")
        assert not pattern.match("1-fundamentals")
        assert not pattern.match("01_Fundamentals")

    def test_config_from_camel_case_dict(self):
        config = LessonLintConfig(**{
            "scan": {"exclude": ["drafts"], "skipHidden": False},
            "lessons": {"auxiliaryDirs": ["exercises", "assets"]},
            "languages": {
                "primary": {"code": "en", "filename": "README.md"},
                "secondary": {"code": "es", "filename": "README_ES.md"},
            },
            "attribution": {"minLength": 1000},
            "logging": {"level": "debug"},
        })

        assert config.scan.exclude == ["drafts"]
        assert config.scan.skip_hidden is False
        assert config.lessons.auxiliary_dirs == ["exercises", "assets"]
        assert config.languages.secondary.code == "es"
        assert config.attribution.min_length == 1000
        assert config.logging.level == "debug"

    @pytest.mark.parametrize("data", [
        {"unknown": {}},
        {"scan": {"excludes": ["drafts"]}},
        {"lessons": {"auxiliary": ["assets"]}},
        {"languages": {"tertiary": {"code": "fr", "filename": "README_FR.md"}}},
        {"languages": {"primary": {"code": "en", "filename": "README.md", "file": "x"}}},
        {"labels": {"switch": ["[English]"]}},
        {"attribution": {"min_len": 10}},
        {"logging": {"lvl": "debug"}},
    ])
    def test_unknown_keys_are_rejected(self, data):
        with pytest.raises(ValueError):
            LessonLintConfig(**data)

    def test_invalid_pattern_is_rejected(self):
        with pytest.raises(ValueError):
            LessonLintConfig(**{"lessons": {"pattern": "(unclosed"}})

    def test_negative_min_length_is_rejected(self):
        with pytest.raises(ValueError):
            LessonLintConfig(**{"attribution": {"minLength": -1}})


class TestLabelsConfig:
    """Test localized label tables."""

    def test_default_labels_are_bilingual(self):
        labels = LabelsConfig()
        assert "Overview" in labels.section_labels(SectionId.OVERVIEW)
        assert "Ringkasan" in labels.section_labels(SectionId.OVERVIEW)
        assert labels.navigation["next"] == ["Next", "Selanjutnya"]

    def test_custom_sections_keep_optional_defaults(self):
        labels = LabelsConfig(sections={
            "overview": ["Overview", "Resumen"],
            "learning_objectives": ["Learning Objectives", "Objetivos"],
            "prerequisites": ["Prerequisites", "Requisitos"],
            "next_steps": ["Next Steps", "Siguientes Pasos"],
            "source_attribution": ["Source Attribution", "Fuentes"],
        })

        assert labels.section_labels(SectionId.OVERVIEW) == ["Overview", "Resumen"]
        assert "Best Practice" in labels.section_labels(SectionId.BEST_PRACTICES)
        assert "Common Mistakes" in labels.section_labels(SectionId.COMMON_MISTAKES)

    def test_missing_required_section_labels(self):
        with pytest.raises(ValueError, match="source_attribution"):
            LabelsConfig(sections={
                "overview": ["Overview"],
                "learning_objectives": ["Learning Objectives"],
                "prerequisites": ["Prerequisites"],
                "next_steps": ["Next Steps"],
            })

    def test_missing_navigation_labels(self):
        with pytest.raises(ValueError, match="module_home"):
            LabelsConfig(navigation={"previous": ["Previous"], "next": ["Next"]})


class TestConfigLoading:
    """Test configuration file loading."""

    def test_load_config_from_file(self, tmp_path):
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(json.dumps({"scan": {"exclude": ["drafts"]}}), encoding="utf-8")

        config = load_config(config_file)
        assert config.scan.exclude == ["drafts"]

    def test_load_config_missing_file_returns_defaults(self, tmp_path):
        config = load_config(tmp_path / "nonexistent.json")
        assert config == create_default_config()

    def test_load_config_invalid_json(self, tmp_path):
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("{ invalid json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON in config file"):
            load_config(config_file)

    def test_load_config_invalid_structure(self, tmp_path):
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(json.dumps({"scan": {"exclude": "not-a-list"}}), encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to load config from"):
            load_config(config_file)

    def test_load_config_misspelled_section_key(self, tmp_path):
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(json.dumps({"scan": {"excludes": ["drafts"]}}), encoding="utf-8")

        with pytest.raises(ValueError, match="excludes"):
            load_config(config_file)

    def test_find_config_file_in_parent(self, tmp_path):
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("{}", encoding="utf-8")
        nested = tmp_path / "module" / "01-fundamentals"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == config_file

    def test_find_config_file_not_found(self, tmp_path):
        nested = tmp_path / "empty"
        nested.mkdir()
        found = find_config_file(nested)
        # A config higher up the real filesystem must not be inside tmp_path
        assert found is None or tmp_path not in found.parents
