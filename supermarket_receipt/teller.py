"""Teller: prices a cart against the catalog and the registered offers."""

import structlog

from .catalog import SupermarketCatalog
from .formatting import EN_GB, PriceFormat
from .model import Offer, Product, SpecialOfferType
from .receipt import Receipt
from .shopping_cart import ShoppingCart

logger = structlog.get_logger()


class Teller:
    """Owns the offer registry for one store and checks out carts."""

    def __init__(self, catalog: SupermarketCatalog, price_format: PriceFormat = EN_GB):
        self.catalog = catalog
        self.price_format = price_format
        self.offers: dict[Product, Offer] = {}

    def add_special_offer(self, offer_type: SpecialOfferType, product: Product, argument: float) -> None:
        """Register an offer, replacing any earlier one for the product."""
        self.offers[product] = Offer(offer_type, product, argument)

    def checks_out_articles_from(self, cart: ShoppingCart) -> Receipt:
        """Build a receipt with one line per cart item, then apply offers.

        Raises:
            UnknownProductError: If a cart product is missing from an
                InMemoryCatalog.
        """
        receipt = Receipt()
        for product_quantity in cart.get_items():
            product = product_quantity.product
            quantity = product_quantity.quantity
            unit_price = self.catalog.unit_price(product)
            receipt.add_product(product, quantity, unit_price, quantity * unit_price)

        cart.handle_offers(receipt, self.offers, self.catalog, self.price_format)

        logger.info(
            "checkout_complete",
            items=len(receipt.get_items()),
            discounts=len(receipt.get_discounts()),
            total_price=receipt.total_price(),
        )
        return receipt
