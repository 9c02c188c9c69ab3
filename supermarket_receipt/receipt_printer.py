"""Plain-text receipt rendering."""

from .config import PrinterConfig
from .formatting import EN_GB, PriceFormat, format_price
from .model import Discount, ProductUnit
from .receipt import Receipt, ReceiptItem


class ReceiptPrinter:
    """Renders a Receipt as fixed-width text. Never mutates the receipt."""

    def __init__(self, columns: int = 40, price_format: PriceFormat = EN_GB):
        self.columns = columns
        self.price_format = price_format

    @classmethod
    def from_config(cls, config: PrinterConfig) -> "ReceiptPrinter":
        return cls(columns=config.columns, price_format=config.price_format)

    def print_receipt(self, receipt: Receipt) -> str:
        lines = []

        for item in receipt.get_items():
            lines.extend(self._item_lines(item))

        for discount in receipt.get_discounts():
            lines.append(self._discount_line(discount))

        lines.append("")
        lines.append(self._justify("Total: ", self._price(receipt.total_price())))

        return "\n".join(lines) + "\n"

    def _item_lines(self, item: ReceiptItem) -> list[str]:
        lines = [self._justify(item.product.name, self._price(item.total_price))]
        if item.quantity != 1:
            lines.append(f"  {self._price(item.price)} * {self._quantity(item)}")
        return lines

    def _discount_line(self, discount: Discount) -> str:
        name = f"{discount.description}({discount.product.name})"
        return self._justify(name, self._price(discount.discount_amount))

    def _justify(self, name: str, value: str) -> str:
        padding = max(1, self.columns - len(name) - len(value))
        return name + " " * padding + value

    def _price(self, price: float) -> str:
        return format_price(price, self.price_format)

    def _quantity(self, item: ReceiptItem) -> str:
        if item.product.unit is ProductUnit.EACH:
            return str(int(item.quantity))
        return f"{item.quantity:.3f}".replace(".", self.price_format.decimal_point)
