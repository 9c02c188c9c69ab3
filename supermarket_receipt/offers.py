"""Offer rules: bundle sizes, discount amounts and descriptions.

Bundle counting works on the truncated integer quantity, while the price
base uses the full (possibly fractional) quantity. A cart holding 2.5 units
under TWO_FOR_AMOUNT is therefore charged one bundle and discounted against
2.5 units. Computed discounts depend on this, so it is kept as is.
"""

import math

from .formatting import EN_GB, PriceFormat, format_number, format_price
from .model import Offer, SpecialOfferType

BUNDLE_SIZES = {
    SpecialOfferType.THREE_FOR_TWO: 3,
    SpecialOfferType.TWO_FOR_AMOUNT: 2,
    SpecialOfferType.FIVE_FOR_AMOUNT: 5,
}


def bundle_size(offer_type) -> int:
    """Return the number of units that make up one bundle of the offer."""
    return BUNDLE_SIZES.get(offer_type, 1)


def calculate_discount(offer: Offer, quantity: float, unit_price: float) -> float:
    """Return the amount the offer takes off, or 0.0 when it does not apply.

    Args:
        offer: The offer registered for the product
        quantity: Cumulative quantity of the product in the cart
        unit_price: Catalog price per unit

    Returns:
        The positive reduction; the caller negates it for the Discount line.
    """
    # Non-finite quantities fail every bundle guard
    quantity_as_int = int(quantity) if math.isfinite(quantity) else 0
    x = bundle_size(offer.offer_type)
    number_of_bundles, remainder = divmod(quantity_as_int, x)

    if offer.offer_type is SpecialOfferType.TWO_FOR_AMOUNT and quantity_as_int >= 2:
        return unit_price * quantity - (offer.argument * number_of_bundles + remainder * unit_price)
    elif offer.offer_type is SpecialOfferType.THREE_FOR_TWO and quantity_as_int > 2:
        return quantity * unit_price - (number_of_bundles * 2 * unit_price + remainder * unit_price)
    elif offer.offer_type is SpecialOfferType.TEN_PERCENT_DISCOUNT:
        return quantity * unit_price * offer.argument / 100.0
    elif offer.offer_type is SpecialOfferType.FIVE_FOR_AMOUNT and quantity_as_int >= 5:
        return unit_price * quantity - (offer.argument * number_of_bundles + remainder * unit_price)

    # Unrecognized offer type or guard not met
    return 0.0


def describe_offer(offer: Offer, price_format: PriceFormat = EN_GB) -> str:
    """Return the receipt text for an applied offer."""
    if offer.offer_type is SpecialOfferType.TWO_FOR_AMOUNT:
        return f"2 for {format_price(offer.argument, price_format)}"
    elif offer.offer_type is SpecialOfferType.THREE_FOR_TWO:
        return "3 for 2"
    elif offer.offer_type is SpecialOfferType.TEN_PERCENT_DISCOUNT:
        return f"{format_number(offer.argument, price_format)}% off"
    elif offer.offer_type is SpecialOfferType.FIVE_FOR_AMOUNT:
        return f"{bundle_size(offer.offer_type)} for {format_price(offer.argument, price_format)}"
    return ""
