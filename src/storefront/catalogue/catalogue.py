"""In-memory product catalogue.

The catalogue owns product lifetime. Carts hold product ids and resolve them
here; only checkout writes products back after reducing their stock.

Products are shared: every lookup of an id returns the instance that was
registered under it, so a caller holding a product sees stock changes made at
checkout.
"""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_products = {}


def register(product):
    """Seed the catalogue with a product and return it."""
    current_domain.repository_for(Product).add(product)
    _products[str(product.id)] = product
    logger.debug(
        "Product registered",
        product_id=str(product.id),
        name=product.name,
        quantity=product.quantity,
    )
    return product


def track(product):
    """Return the catalogue's instance for ``product``, registering it on first sight."""
    known = _products.get(str(product.id))
    if known is None:
        return register(product)
    return known


def lookup(product_id):
    key = str(product_id)
    if key not in _products:
        _products[key] = current_domain.repository_for(Product).get(key)
    return _products[key]


def save(product):
    current_domain.repository_for(Product).add(product)
    _products[str(product.id)] = product
    return product


def clear():
    """Forget every tracked instance. The repository keeps its records."""
    _products.clear()
