"""CLDR plural rules implementation using Babel.

Provides plural category selection for all locales using Babel's CLDR data,
for both cardinal ("1 item" / "2 items") and ordinal ("1st" / "2nd")
numbers.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

from babel import Locale

__all__ = ["select_plural_category"]


def select_plural_category(
    n: int | float | Decimal,
    locale: Locale,
    *,
    ordinal: bool = False,
) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Babel Locale
        ordinal: Use ordinal rules instead of cardinal rules

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, Locale.parse("en_US"))
        'one'
        >>> select_plural_category(5, Locale.parse("ru_RU"))
        'many'
        >>> select_plural_category(2, Locale.parse("en_US"), ordinal=True)
        'two'
    """
    rule = locale.ordinal_form if ordinal else locale.plural_form
    return rule(n)
