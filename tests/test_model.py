"""Tests for value types."""

import dataclasses

import pytest

from supermarket_receipt import (
    Discount,
    Offer,
    Product,
    ProductQuantity,
    ProductUnit,
    SpecialOfferType,
)


class TestProduct:
    """Tests for Product value semantics."""

    def test_equal_by_name_and_unit(self) -> None:
        """Two separately built products with the same fields are equal."""
        assert Product("rice", ProductUnit.EACH) == Product("rice", ProductUnit.EACH)
        assert hash(Product("rice", ProductUnit.EACH)) == hash(Product("rice", ProductUnit.EACH))

    def test_unit_distinguishes_products(self) -> None:
        """Same name with a different unit is a different product."""
        assert Product("apples", ProductUnit.EACH) != Product("apples", ProductUnit.KILO)

    def test_default_unit_is_each(self) -> None:
        assert Product("rice").unit is ProductUnit.EACH

    def test_usable_as_dict_key_by_value(self) -> None:
        """A lookup with an equal product finds the entry."""
        prices = {Product("rice"): 2.49}
        assert prices[Product("rice")] == 2.49

    def test_immutable(self) -> None:
        product = Product("rice")
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.name = "beans"


class TestValueTypes:
    """Tests for ProductQuantity, Offer and Discount."""

    def test_product_quantity_fields(self) -> None:
        pq = ProductQuantity(Product("apples", ProductUnit.KILO), 1.5)
        assert pq.product.name == "apples"
        assert pq.quantity == 1.5

    def test_offer_shares_product(self) -> None:
        """Offers hold the same product value the cart uses."""
        product = Product("rice")
        offer = Offer(SpecialOfferType.TEN_PERCENT_DISCOUNT, product, 10.0)
        assert offer.product is product

    def test_discount_immutable(self) -> None:
        discount = Discount(Product("rice"), "10% off", -0.25)
        with pytest.raises(dataclasses.FrozenInstanceError):
            discount.discount_amount = 0.0
