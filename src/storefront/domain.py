"""Storefront bounded context: catalogue, customers, cart and checkout.

A single in-memory domain: products live in the catalogue, carts and customers
are owned by the caller, and checkout validates a cart against the catalogue
before committing stock and balance changes.
"""

from protean.domain import Domain

from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
