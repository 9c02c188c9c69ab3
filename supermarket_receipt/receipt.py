"""Receipt: priced line items plus discounts."""

from dataclasses import dataclass

from .model import Discount, Product


@dataclass(frozen=True)
class ReceiptItem:
    """One priced cart line."""

    product: Product
    quantity: float
    price: float
    total_price: float


class Receipt:
    """Accumulates line items and discounts; read-only once built."""

    def __init__(self) -> None:
        self._items: list[ReceiptItem] = []
        self._discounts: list[Discount] = []

    def add_product(self, product: Product, quantity: float, price: float, total_price: float) -> None:
        self._items.append(ReceiptItem(product, quantity, price, total_price))

    def add_discount(self, discount: Discount) -> None:
        self._discounts.append(discount)

    def total_price(self) -> float:
        """Sum of line totals plus discount amounts (discounts are negative)."""
        total = 0.0
        for item in self._items:
            total += item.total_price
        for discount in self._discounts:
            total += discount.discount_amount
        return total

    def get_items(self) -> list[ReceiptItem]:
        return list(self._items)

    def get_discounts(self) -> list[Discount]:
        return list(self._discounts)
