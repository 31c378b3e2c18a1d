"""Domain events for the Product aggregate."""

from protean.fields import Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class StockReduced:
    """Units of a product left the catalogue through a completed checkout."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    quantity = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
