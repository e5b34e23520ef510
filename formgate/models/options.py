"""
ValidatorOptions - caller configuration merged over defaults.

Keys are accepted in snake_case or in their camelCase spelling
(``returnType``, ``listFields`` …). Merging uses ``model_copy(update=...)``
which performs no value validation: an unknown mode only surfaces when the
pipeline dispatches on it.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from formgate.config import settings

logger = logging.getLogger(__name__)


class ValidatorOptions(BaseModel):
    """Fully populated configuration for one validation run."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    mode: str = Field("init", alias="method", description="'init' runs the full pipeline; otherwise a single stage name.")
    return_type: str = Field(settings.RETURN_TYPE, alias="returnType", description="'data' | 'html'")
    messaging_target: Optional[str] = Field(
        None,
        alias="appendMessagingTo",
        description="Container id receiving the error panel. Defaults to the validation target.",
    )
    required_message: str = Field(settings.REQUIRED_MESSAGE, alias="requiredMessage")
    format_message: str = Field(settings.FORMAT_MESSAGE, alias="formatMessage")
    match_message: str = Field(settings.MATCH_MESSAGE, alias="matchMessage")
    list_fields: bool = Field(False, alias="listFields", description="Enumerate failing field labels in the panel.")
    stop_on_fail: bool = Field(False, alias="stopOnFail", description="Cancel the triggering event on failure.")


# Accepted key → field name, covering both spellings
_OPTION_KEYS: Dict[str, str] = {}
for _name, _info in ValidatorOptions.model_fields.items():
    _OPTION_KEYS[_name] = _name
    if _info.alias:
        _OPTION_KEYS[_info.alias] = _name


def resolve_options(
    overrides: Union[Mapping[str, Any], ValidatorOptions, None] = None,
    defaults: Optional[ValidatorOptions] = None,
) -> ValidatorOptions:
    """
    Merge caller-supplied options over defaults.

    Args:
        overrides: Partial options (mapping in either key spelling) or a
                   ValidatorOptions whose explicitly set fields win.
        defaults: Base options. Defaults to ValidatorOptions().

    Returns:
        A new ValidatorOptions; unspecified keys keep their default.
    """
    base = defaults if defaults is not None else ValidatorOptions()
    if overrides is None:
        return base

    if isinstance(overrides, ValidatorOptions):
        overrides = overrides.model_dump(exclude_unset=True)

    update: Dict[str, Any] = {}
    for key, value in overrides.items():
        name = _OPTION_KEYS.get(key)
        if name is None:
            logger.warning("Ignoring unknown option '%s'", key)
            continue
        update[name] = value

    return base.model_copy(update=update)
