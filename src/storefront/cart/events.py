"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart, or an existing line grew."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class CartCheckedOut:
    """The cart was paid for and its stock committed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    items = Text(required=True)  # JSON array of {product_id, name, quantity, unit_price}
    item_count = Integer(required=True)
    subtotal = Float(required=True)
    shipping_fee = Float(required=True)
    amount = Float(required=True)
