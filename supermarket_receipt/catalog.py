"""Catalog of unit prices."""

from abc import ABC, abstractmethod

import structlog

from .errors import UnknownProductError
from .model import Product
from .validation import require_not_empty, require_positive

logger = structlog.get_logger()


class SupermarketCatalog(ABC):
    """Catalog interface: register a product price, look up a unit price.

    ``unit_price`` is read-only and is called during offer handling; callers
    must register every product before pricing a cart that contains it.
    """

    @abstractmethod
    def add_product(self, product: Product, price: float) -> None:
        ...

    @abstractmethod
    def unit_price(self, product: Product) -> float:
        ...


class InMemoryCatalog(SupermarketCatalog):
    """Dict-backed catalog keyed by product value."""

    def __init__(self) -> None:
        self._prices: dict[Product, float] = {}

    def add_product(self, product: Product, price: float) -> None:
        require_not_empty(product.name, "product name is required")
        require_positive(price, f"price of {product.name} must be positive")
        self._prices[product] = price
        logger.debug("product_registered", product=product.name, price=price)

    def unit_price(self, product: Product) -> float:
        try:
            return self._prices[product]
        except KeyError:
            raise UnknownProductError(product) from None
