"""Template interpolation with a configurable delimiter pair.

Placeholders are written ``{{name}}`` by default. Names may be dotted paths
into nested scope values (``{{user.name}}``, ``{{items.0}}``).
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Pattern, Tuple

from glossa.core.logging import get_module_logger
from glossa.i18n.errors import InvalidDelimitersError, MissingVariableError

logger = get_module_logger()

DEFAULT_DELIMITERS: Tuple[str, str] = ("{{", "}}")

_MISSING = object()


def validate_delimiters(delimiters: Any) -> Tuple[str, str]:
    """Check that delimiters are two distinct non-empty strings.

    Args:
        delimiters: Candidate ``(open, close)`` pair.

    Returns:
        The pair as a tuple.

    Raises:
        InvalidDelimitersError: If the pair is malformed.
    """
    if isinstance(delimiters, str) or not isinstance(delimiters, Sequence):
        raise InvalidDelimitersError("`delimiters` should consist of exactly two strings")

    if len(delimiters) != 2:
        raise InvalidDelimitersError("`delimiters` should consist of exactly two strings")

    opening, closing = delimiters
    if not isinstance(opening, str) or not isinstance(closing, str):
        raise InvalidDelimitersError("`delimiters` should consist of exactly two strings")
    if not opening or not closing:
        raise InvalidDelimitersError("`delimiters` must not be empty strings")
    if opening == closing:
        raise InvalidDelimitersError("`delimiters` must be two distinct strings")

    return opening, closing


def _resolve_variable(scope: Any, name: str) -> Any:
    value = scope
    for part in name.split("."):
        if isinstance(value, Mapping):
            value = value.get(part, _MISSING)
        elif isinstance(value, Sequence) and not isinstance(value, str):
            value = value[int(part)] if part.isdigit() and int(part) < len(value) else _MISSING
        else:
            value = getattr(value, part, _MISSING)

        if value is _MISSING:
            return _MISSING

    return value


class TemplateRenderer:
    """Renders templates by substituting scope variables between delimiters.

    Attributes:
        delimiters: ``(open, close)`` marker pair.
        strict_variables: Raise instead of rendering an empty string when a
            variable is missing from the scope.
    """

    def __init__(
        self,
        delimiters: Sequence[str] = DEFAULT_DELIMITERS,
        strict_variables: bool = False,
    ):
        self.delimiters = validate_delimiters(delimiters)
        self.strict_variables = strict_variables
        opening, closing = self.delimiters
        self._pattern: Pattern[str] = re.compile(
            re.escape(opening) + r"\s*(.+?)\s*" + re.escape(closing)
        )

    def __call__(self, template: str, scope: Optional[Any] = None) -> str:
        return self.render(template, scope)

    def render(self, template: str, scope: Optional[Any] = None) -> str:
        """Interpolate ``scope`` into ``template``.

        Args:
            template: Template string.
            scope: Mapping (or object) of variable values.

        Returns:
            Rendered string.

        Raises:
            MissingVariableError: If ``strict_variables`` and a variable is absent.
        """
        scope = scope if scope is not None else {}

        def _substitute(match: "re.Match[str]") -> str:
            name = match.group(1)
            value = _resolve_variable(scope, name)

            if value is _MISSING:
                if self.strict_variables:
                    logger.error(
                        "missing_interpolation_variable",
                        variable=name,
                    )
                    raise MissingVariableError(name)
                return ""

            return "" if value is None else str(value)

        return self._pattern.sub(_substitute, template)
