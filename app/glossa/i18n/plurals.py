"""Plural category selection.

Categories come from the CLDR plural rules of one fixed reference locale,
Arabic, which uses all six categories. The selected category names a form
that is then looked up in the target locale's plural object, whatever that
locale's own grammar is.
"""

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Dict, Tuple, Union

from babel import Locale as BabelLocale

from glossa.i18n.lookup import NOT_FOUND, Found, LookupResult

REFERENCE_LOCALE = "ar"

_reference_rule = BabelLocale.parse(REFERENCE_LOCALE).plural_form


class PluralCategory(str, Enum):
    """CLDR plural categories."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


# Forms tried, in order, before FINAL_FALLBACKS. Categories without an entry
# (many, other) go straight to FINAL_FALLBACKS.
PLURAL_FALLBACKS: Dict[PluralCategory, Tuple[PluralCategory, ...]] = {
    PluralCategory.ZERO: (PluralCategory.ZERO, PluralCategory.OTHER, PluralCategory.MANY),
    PluralCategory.ONE: (PluralCategory.ONE, PluralCategory.OTHER),
    PluralCategory.TWO: (PluralCategory.TWO, PluralCategory.FEW, PluralCategory.MANY),
    PluralCategory.FEW: (PluralCategory.FEW, PluralCategory.MANY),
}

FINAL_FALLBACKS: Tuple[PluralCategory, ...] = (PluralCategory.MANY, PluralCategory.OTHER)


def resolve_plural_category(count: Union[int, float, Decimal]) -> PluralCategory:
    """Map a count to its plural category under the reference grammar.

    >>> resolve_plural_category(0)
    <PluralCategory.ZERO: 'zero'>
    >>> resolve_plural_category(11).value
    'many'
    """
    return PluralCategory(_reference_rule(count))


def select_plural_template(
    forms: Mapping, count: Union[int, float, Decimal]
) -> LookupResult:
    """Pick the form to render for ``count`` from a plural object.

    Args:
        forms: Plural object keyed by category name.
        count: Amount being described.

    Returns:
        ``Found(template)`` or ``NOT_FOUND`` when no form applies.
    """
    category = resolve_plural_category(count)
    ladder = PLURAL_FALLBACKS.get(category, ())

    for candidate in ladder + FINAL_FALLBACKS:
        value = forms.get(candidate.value)
        if value is not None:
            return Found(value)

    return NOT_FOUND
