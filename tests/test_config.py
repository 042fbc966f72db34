"""Tests for settings validation and logging configuration."""

import json
import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from markpreview.core.config import ConfigurationError, Environment, Settings
from markpreview.core.logging_config import _JsonFormatter, request_id_var


class TestSettings:

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="verbose")

    def test_invalid_log_format(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_format="xml")

    def test_asciidoc_renderer_needs_callable_part(self):
        with pytest.raises(PydanticValidationError):
            Settings(asciidoc_renderer="my_renderers.asciidoc")
        assert Settings(asciidoc_renderer="my_renderers:asciidoc").asciidoc_renderer == "my_renderers:asciidoc"

    def test_negative_preview_limit_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(preview_max_chars=-5)

    def test_wildcard_cors_rejected(self):
        with pytest.raises(ValueError):
            Settings(cors_allowed_origins="*").get_cors_origins()

    def test_cors_origins_parsed(self):
        settings = Settings(cors_allowed_origins="https://a.test, https://b.test,")
        assert settings.get_cors_origins() == ["https://a.test", "https://b.test"]


class TestProductionConfig:

    def test_localhost_cors_blocks_production(self):
        settings = Settings(environment=Environment.PRODUCTION)
        with pytest.raises(ConfigurationError):
            settings.validate_production_config()

    def test_localhost_cors_allowed_in_development(self):
        Settings(environment=Environment.DEVELOPMENT).validate_production_config()

    def test_clean_production_config(self):
        settings = Settings(
            environment=Environment.PRODUCTION,
            cors_allowed_origins="https://wiki.example.com",
        )
        settings.validate_production_config()


class TestJsonFormatter:

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("markpreview.test", logging.INFO, __file__, 1, "Rendered %s", ("page",), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_standard_fields(self):
        payload = json.loads(_JsonFormatter().format(self._record()))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "markpreview.test"
        assert payload["message"] == "Rendered page"

    def test_extra_fields_merged(self):
        payload = json.loads(_JsonFormatter().format(self._record(max_chars=150)))
        assert payload["max_chars"] == 150

    def test_request_id_included(self):
        token = request_id_var.set("req-42")
        try:
            payload = json.loads(_JsonFormatter().format(self._record()))
        finally:
            request_id_var.reset(token)
        assert payload["request_id"] == "req-42"
