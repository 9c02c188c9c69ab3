"""Shared pytest fixtures for pricing tests."""

import pytest
import structlog

from supermarket_receipt import InMemoryCatalog, Product, ProductUnit


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def toothbrush() -> Product:
    return Product("toothbrush", ProductUnit.EACH)


@pytest.fixture
def rice() -> Product:
    return Product("rice", ProductUnit.EACH)


@pytest.fixture
def apples() -> Product:
    return Product("apples", ProductUnit.KILO)


@pytest.fixture
def catalog(toothbrush, rice, apples) -> InMemoryCatalog:
    catalog = InMemoryCatalog()
    catalog.add_product(toothbrush, 0.99)
    catalog.add_product(rice, 2.49)
    catalog.add_product(apples, 2.00)
    return catalog
