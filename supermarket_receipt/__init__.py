"""Supermarket receipt pricing: carts, offers, discounts and receipts."""

from .model import (
    Discount,
    Offer,
    Product,
    ProductQuantity,
    ProductUnit,
    SpecialOfferType,
)
from .errors import (
    ReceiptError,
    UnknownProductError,
    InvalidArgumentError,
)
from .formatting import EN_GB, PriceFormat, format_price, format_number
from .offers import bundle_size, calculate_discount, describe_offer
from .catalog import SupermarketCatalog, InMemoryCatalog
from .receipt import Receipt, ReceiptItem
from .shopping_cart import ShoppingCart
from .teller import Teller
from .config import PrinterConfig, configure_logging, get_printer_config
from .receipt_printer import ReceiptPrinter

__all__ = [
    "Discount",
    "Offer",
    "Product",
    "ProductQuantity",
    "ProductUnit",
    "SpecialOfferType",
    "ReceiptError",
    "UnknownProductError",
    "InvalidArgumentError",
    "EN_GB",
    "PriceFormat",
    "format_price",
    "format_number",
    "bundle_size",
    "calculate_discount",
    "describe_offer",
    "SupermarketCatalog",
    "InMemoryCatalog",
    "Receipt",
    "ReceiptItem",
    "ShoppingCart",
    "Teller",
    "PrinterConfig",
    "configure_logging",
    "get_printer_config",
    "ReceiptPrinter",
]
