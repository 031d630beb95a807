"""Tests for warble.config — FormConfig frozen dataclass."""

import dataclasses

import pytest

from warble.config import FormConfig


class TestFormConfig:
    def test_defaults(self) -> None:
        cfg = FormConfig()

        assert cfg.strict_fields is True
        assert cfg.strict_options is True
        assert cfg.autoescape is True
        assert cfg.feedback_color == "#ff3300"

    def test_override(self) -> None:
        cfg = FormConfig(strict_fields=False, feedback_color="#c00")

        assert cfg.strict_fields is False
        assert cfg.feedback_color == "#c00"
        assert cfg.strict_options is True

    def test_frozen(self) -> None:
        cfg = FormConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.autoescape = False  # type: ignore[misc]
