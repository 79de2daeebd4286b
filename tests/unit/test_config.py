"""Unit tests for pipeline configuration."""

import pytest

from docx_bilingual import config as config_module
from docx_bilingual.config import PipelineConfig
from docx_bilingual.core.exceptions import LanguageConfigError


class TestPipelineConfig:
    """Test PipelineConfig defaults and validation."""

    def test_defaults_follow_module_settings(self):
        config = PipelineConfig()

        assert config.target_language == config_module.DEFAULT_TARGET_LANGUAGE
        assert config.output_path == config_module.OUTPUT_PATH
        assert config.coalesce_requests == config_module.COALESCE_TRANSLATION_REQUESTS

    def test_target_language_is_normalized(self):
        assert PipelineConfig(target_language="PT_br").target_language == "pt-BR"

    def test_invalid_target_language_raises(self):
        with pytest.raises(LanguageConfigError):
            PipelineConfig(target_language="not a language")

    def test_invalid_source_language_raises(self):
        with pytest.raises(LanguageConfigError):
            PipelineConfig(source_language="???")

    def test_empty_source_language_means_auto_detect(self):
        assert PipelineConfig(source_language="").source_language == ""
        assert PipelineConfig(source_language=None).source_language is None

    def test_segment_limit_is_at_least_one(self):
        assert PipelineConfig(max_segments_per_request=0).max_segments_per_request == 1
