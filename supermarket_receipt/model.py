"""Value types shared by the cart, the catalog and the receipt.

All types are frozen dataclasses, so a Product can be used as a dict key and
compares equal to any other Product with the same name and unit.
"""

from dataclasses import dataclass
from enum import Enum


class ProductUnit(Enum):
    EACH = "each"
    KILO = "kilo"


class SpecialOfferType(Enum):
    THREE_FOR_TWO = "three_for_two"
    TEN_PERCENT_DISCOUNT = "ten_percent_discount"
    TWO_FOR_AMOUNT = "two_for_amount"
    FIVE_FOR_AMOUNT = "five_for_amount"


@dataclass(frozen=True)
class Product:
    """A sellable item, priced per unit or per kilo."""

    name: str
    unit: ProductUnit = ProductUnit.EACH


@dataclass(frozen=True)
class ProductQuantity:
    """A product together with the quantity requested in one add call."""

    product: Product
    quantity: float


@dataclass(frozen=True)
class Offer:
    """Promotional rule bound to a product.

    ``argument`` is a percentage for TEN_PERCENT_DISCOUNT and the bundle price
    for the amount-based offers. THREE_FOR_TWO ignores it.
    """

    offer_type: SpecialOfferType
    product: Product
    argument: float


@dataclass(frozen=True)
class Discount:
    """Price reduction line. A negative amount reduces the total."""

    product: Product
    description: str
    discount_amount: float
