"""Tests for ContextVar-based text configuration."""

import logging

import pytest

from innertext import to_text
from innertext.builder import h
from innertext.config import (
    TextConfig,
    coerce_whitespace,
    get_text_config,
    reset_text_config,
    set_text_config,
    text_config_context,
)
from innertext.errors import ConfigError, InnerTextError
from innertext.whitespace import WhiteSpace


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_text_config()


class TestTextConfig:
    """TextConfig construction and validation."""

    def test_default(self) -> None:
        assert TextConfig().whitespace is WhiteSpace.NORMAL

    def test_string_is_coerced(self) -> None:
        assert TextConfig(whitespace="pre-wrap").whitespace is WhiteSpace.PRE_WRAP  # type: ignore[arg-type]

    def test_invalid_whitespace(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            TextConfig(whitespace="break-spaces")  # type: ignore[arg-type]
        assert exc_info.value.option == "whitespace"
        assert exc_info.value.value == "break-spaces"
        assert "pre-wrap" in str(exc_info.value)

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            coerce_whitespace("wrap")
        with pytest.raises(InnerTextError):
            coerce_whitespace("wrap")

    def test_frozen(self) -> None:
        config = TextConfig()
        with pytest.raises(AttributeError):
            config.whitespace = WhiteSpace.PRE  # type: ignore[misc]

    def test_equality(self) -> None:
        assert TextConfig(whitespace="pre") == TextConfig(whitespace=WhiteSpace.PRE)  # type: ignore[arg-type]


class TestTextConfigFromDict:
    """TextConfig.from_dict() factory."""

    def test_basic(self) -> None:
        assert TextConfig.from_dict({"whitespace": "nowrap"}).whitespace is WhiteSpace.NOWRAP

    def test_ignores_unknown_keys(self) -> None:
        config = TextConfig.from_dict({"whitespace": "pre", "unknown_key": 42})
        assert config.whitespace is WhiteSpace.PRE

    def test_ignored_keys_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="innertext"):
            TextConfig.from_dict({"whitespace": "pre", "indent": 2, "collapse": True})
        assert "collapse, indent" in caplog.text

    def test_empty(self) -> None:
        assert TextConfig.from_dict({}) == TextConfig()

    def test_invalid_value(self) -> None:
        with pytest.raises(ConfigError):
            TextConfig.from_dict({"whitespace": 3})


class TestConfigContext:
    """get/set/reset and the context manager."""

    def test_default_config(self) -> None:
        assert get_text_config() == TextConfig()

    def test_set_and_reset(self) -> None:
        set_text_config(TextConfig(whitespace=WhiteSpace.PRE))
        assert get_text_config().whitespace is WhiteSpace.PRE
        reset_text_config()
        assert get_text_config().whitespace is WhiteSpace.NORMAL

    def test_context_manager_restores(self) -> None:
        with text_config_context(TextConfig(whitespace=WhiteSpace.PRE)):
            assert get_text_config().whitespace is WhiteSpace.PRE
        assert get_text_config().whitespace is WhiteSpace.NORMAL

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with text_config_context(TextConfig(whitespace=WhiteSpace.PRE)):
                raise RuntimeError("boom")
        assert get_text_config().whitespace is WhiteSpace.NORMAL

    def test_nested_contexts(self) -> None:
        with text_config_context(TextConfig(whitespace=WhiteSpace.PRE)):
            with text_config_context(TextConfig(whitespace=WhiteSpace.NOWRAP)):
                assert get_text_config().whitespace is WhiteSpace.NOWRAP
            assert get_text_config().whitespace is WhiteSpace.PRE


class TestConfigAppliesToToText:
    """The active config seeds to_text."""

    def test_config_seeds_whitespace(self) -> None:
        node = h("span", " a  b ")
        assert to_text(node) == " a b "
        with text_config_context(TextConfig(whitespace=WhiteSpace.PRE)):
            assert to_text(node) == " a  b "

    def test_explicit_option_wins(self) -> None:
        node = h("span", " a  b ")
        with text_config_context(TextConfig(whitespace=WhiteSpace.PRE)):
            assert to_text(node, whitespace="normal") == " a b "

    def test_invalid_option(self) -> None:
        with pytest.raises(ConfigError):
            to_text(h("p"), whitespace="collapse")
