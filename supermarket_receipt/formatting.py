"""Number formatting for discount descriptions and printed receipts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceFormat:
    """Decimal and group separators used when rendering numbers."""

    decimal_point: str = "."
    group_separator: str = ","


EN_GB = PriceFormat()


def _localize(text: str, price_format: PriceFormat) -> str:
    table = str.maketrans({
        ",": price_format.group_separator,
        ".": price_format.decimal_point,
    })
    return text.translate(table)


def format_price(price: float, price_format: PriceFormat = EN_GB) -> str:
    """Format a price with two decimals and digit grouping (1,234.50)."""
    return _localize(f"{price:,.2f}", price_format)


def format_number(value: float, price_format: PriceFormat = EN_GB) -> str:
    """Format a number in its shortest form, dropping a zero fraction.

    10.0 renders as "10" and 12.5 as "12.5". Very large or small values
    keep the repr exponent form, e.g. "1e+21".
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return _localize(text, price_format)
