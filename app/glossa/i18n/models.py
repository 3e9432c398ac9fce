"""Configuration model for the translation engine."""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from glossa.i18n.loader import Decoder, json_decoder
from glossa.i18n.renderer import DEFAULT_DELIMITERS, validate_delimiters

# Dictionary trees are decoded JSON/YAML documents
Dictionary = Dict[str, Any]


@dataclass(frozen=True)
class I18nOptions:
    """Immutable translator configuration.

    Frozen so that every change goes through ``replace()`` and the owner can
    recompute derived state explicitly.

    Attributes:
        locales_path: Source location handed to the content loader.
        default_locale: Fallback locale when the current one has no dictionary.
        current_locale: Active locale.
        delimiters: Opening and closing interpolation markers.
        throw_on_failure: Raise miss errors instead of echoing keys.
        decoder: Function turning raw content into a dictionary tree.
        extensions: Accepted entry extensions, empty to accept all.
        strict_variables: Raise when a template variable is missing.
    """

    locales_path: Optional[str] = None
    default_locale: Optional[str] = None
    current_locale: Optional[str] = None
    delimiters: Tuple[str, str] = DEFAULT_DELIMITERS
    throw_on_failure: bool = False
    decoder: Decoder = json_decoder
    extensions: Tuple[str, ...] = field(default=(".json",))
    strict_variables: bool = False

    def __post_init__(self):
        object.__setattr__(self, "delimiters", validate_delimiters(self.delimiters))
        object.__setattr__(self, "extensions", tuple(self.extensions or ()))
        if self.locales_path is not None:
            object.__setattr__(self, "locales_path", str(self.locales_path))

    def replace(self, **changes: Any) -> "I18nOptions":
        """Return a copy with ``changes`` applied and validated."""
        return dataclasses.replace(self, **changes)
