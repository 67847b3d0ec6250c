"""Unit tests for AuthorizationOptions."""

import pytest
from pydantic import ValidationError

from canary.core.exceptions import InvalidConfigurationError
from canary.domain.entities.authorization_options import AuthorizationOptions, coerce_options
from tests.models import Post


def test_defaults():
    """Test that options load with correct defaults."""
    options = AuthorizationOptions()

    assert options.model is None
    assert options.id_name is None
    assert options.id_field == "id"
    assert options.current_user == "current_user"
    assert options.model_fields_set == set()


def test_aliases_for_python_keywords():
    """Test that 'as' and 'except' are accepted under their option names."""
    options = AuthorizationOptions.model_validate({"as": "entry", "except": ["index"]})

    assert options.as_ == "entry"
    assert options.except_ == ["index"]
    assert options.has_except is True
    assert options.has_only is False


def test_presence_is_tracked_for_falsy_values():
    """Test that explicitly passed falsy values count as present."""
    options = AuthorizationOptions(required=False, only=None)

    assert options.is_set("required") is True
    assert options.has_only is True
    assert options.is_set("persisted") is False


def test_only_and_except_conflict():
    """Test that only and except cannot be combined."""
    with pytest.raises(ValidationError):
        AuthorizationOptions(only="show", except_="index")


def test_options_are_frozen():
    """Test that options cannot be changed after validation."""
    options = AuthorizationOptions(model=Post)
    with pytest.raises(ValidationError):
        options.id_name = "post_id"


def test_model_must_be_a_class():
    """Test that the model option only accepts classes."""
    with pytest.raises(InvalidConfigurationError, match="model"):
        coerce_options({"model": "Post"})


class TestCoerceOptions:
    """Test suite for coerce_options."""

    def test_passes_instances_through(self):
        options = AuthorizationOptions(model=Post)
        assert coerce_options(options) is options

    def test_none_gives_defaults(self):
        assert coerce_options(None) == AuthorizationOptions()

    def test_builds_from_mapping(self):
        options = coerce_options({"model": Post, "id_name": "post_id"})
        assert options.model is Post
        assert options.id_name == "post_id"

    def test_unknown_key(self):
        with pytest.raises(InvalidConfigurationError, match="Extra inputs are not permitted"):
            coerce_options({"modle": Post})

    def test_conflict_becomes_invalid_configuration(self):
        with pytest.raises(InvalidConfigurationError, match="both :except and :only"):
            coerce_options({"only": "show", "except": "index"})

    def test_rejects_non_mapping(self):
        with pytest.raises(InvalidConfigurationError, match=r"\['model'\]"):
            coerce_options(["model"])

    def test_invalid_configuration_is_a_value_error(self):
        with pytest.raises(ValueError):
            coerce_options({"required": "sometimes"})
