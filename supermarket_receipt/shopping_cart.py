"""Shopping cart and offer handling."""

from typing import Mapping

import structlog

from .catalog import SupermarketCatalog
from .formatting import EN_GB, PriceFormat
from .model import Discount, Offer, Product, ProductQuantity
from .offers import calculate_discount, describe_offer
from .receipt import Receipt

logger = structlog.get_logger()


class ShoppingCart:
    """Requested items in add order, plus the cumulative quantity per product.

    Every add appends a new ProductQuantity, so the same product may appear
    several times in ``get_items()``. Quantities are accepted as given.
    """

    def __init__(self) -> None:
        self._items: list[ProductQuantity] = []
        self._product_quantities: dict[Product, float] = {}

    def get_items(self) -> list[ProductQuantity]:
        return list(self._items)

    def product_quantities(self) -> dict[Product, float]:
        return dict(self._product_quantities)

    def add_item(self, product: Product) -> None:
        self.add_item_quantity(product, 1.0)

    def add_item_quantity(self, product: Product, quantity: float) -> None:
        if product in self._product_quantities:
            self._product_quantities[product] += quantity
        else:
            self._product_quantities[product] = quantity
        self._items.append(ProductQuantity(product, quantity))

    def handle_offers(
        self,
        receipt: Receipt,
        offers: Mapping[Product, Offer],
        catalog: SupermarketCatalog,
        price_format: PriceFormat = EN_GB,
    ) -> None:
        """Add a Discount to the receipt for every offer that applies.

        Products are visited in the order they were first added. A product
        whose cumulative quantity is zero never gets a discount.
        """
        for product, quantity in self._product_quantities.items():
            if product not in offers or quantity == 0:
                continue

            offer = offers[product]
            unit_price = catalog.unit_price(product)
            discount_amount = calculate_discount(offer, quantity, unit_price)

            if discount_amount == 0.0:
                logger.debug(
                    "offer_not_applicable",
                    product=product.name,
                    offer_type=getattr(offer.offer_type, "value", str(offer.offer_type)),
                    quantity=quantity,
                )
                continue

            description = describe_offer(offer, price_format)
            receipt.add_discount(Discount(product, description, -discount_amount))
            logger.info(
                "discount_applied",
                product=product.name,
                description=description,
                discount_amount=-discount_amount,
            )
