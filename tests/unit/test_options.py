"""
Unit tests for the configuration resolver.
"""
import logging

import pytest
from pydantic import ValidationError

from formgate.config import settings
from formgate.models.options import ValidatorOptions, resolve_options


class TestResolveOptions:
    """Tests for merging caller options over defaults."""

    def test_defaults_when_no_overrides(self):
        options = resolve_options()
        assert options.mode == "init"
        assert options.return_type == settings.RETURN_TYPE
        assert options.messaging_target is None
        assert options.required_message == settings.REQUIRED_MESSAGE
        assert options.list_fields is False
        assert options.stop_on_fail is False

    def test_camel_case_keys_override(self):
        options = resolve_options({
            "method": "required",
            "returnType": "html",
            "appendMessagingTo": "panel-host",
            "listFields": True,
            "stopOnFail": True,
        })
        assert options.mode == "required"
        assert options.return_type == "html"
        assert options.messaging_target == "panel-host"
        assert options.list_fields is True
        assert options.stop_on_fail is True

    def test_snake_case_keys_override(self):
        options = resolve_options({"format_message": "Bad format", "list_fields": True})
        assert options.format_message == "Bad format"
        assert options.list_fields is True
        # untouched keys keep their default
        assert options.match_message == settings.MATCH_MESSAGE

    def test_unknown_key_ignored_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            options = resolve_options({"colour": "green"})
        assert options == resolve_options()
        assert any("colour" in r.getMessage() for r in caplog.records)

    def test_mode_value_not_validated(self):
        """Unknown modes only fail when the pipeline dispatches."""
        options = resolve_options({"method": "bogus"})
        assert options.mode == "bogus"

    def test_custom_defaults(self):
        defaults = ValidatorOptions(return_type="html")
        options = resolve_options({"listFields": True}, defaults=defaults)
        assert options.return_type == "html"
        assert options.list_fields is True

    def test_options_instance_overrides_only_set_fields(self):
        defaults = ValidatorOptions(return_type="html")
        options = resolve_options(ValidatorOptions(list_fields=True), defaults=defaults)
        assert options.return_type == "html"
        assert options.list_fields is True

    def test_merged_options_are_frozen(self):
        options = resolve_options({"listFields": True})
        with pytest.raises(ValidationError):
            options.list_fields = False
