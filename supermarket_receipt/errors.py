"""Error types for the supermarket receipt library."""

from typing import Optional


class ReceiptError(Exception):
    """Base class for pricing errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class UnknownProductError(ReceiptError):
    """Product has no registered unit price in the catalog."""

    def __init__(self, product):
        super().__init__(f"unknown product: {product.name}")
        self.product = product


class InvalidArgumentError(ReceiptError):
    """Invalid argument provided by caller."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid argument: {message}", cause)
