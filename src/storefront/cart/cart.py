"""Cart aggregate: the ordered line items a customer intends to buy.

Line items refer to catalogue products by id and snapshot the name and unit
price at the time they are added. Adding a product the catalogue has not seen
yet registers it there, so checkout can always resolve the line. There is at most one line per product name;
adding the same product again grows the existing line.
"""

import json

from protean.exceptions import ValidationError
from protean.fields import Float, HasMany, Identifier, Integer, String

from storefront.cart.events import CartCheckedOut, CartItemAdded
from storefront.catalogue import catalogue
from storefront.domain import storefront
from storefront.utils.errors import first_message
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.entity(part_of="Cart")
class CartLineItem:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return self.unit_price * self.quantity


@storefront.aggregate
class Cart:
    customer_id = Identifier()
    items = HasMany(CartLineItem)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def is_empty(self):
        return not self.items

    def subtotal(self):
        return sum(item.line_total for item in self.items)

    def total_quantity(self):
        return sum(item.quantity for item in self.items)

    def line_for(self, name):
        return next((item for item in self.items if item.name == name), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product, quantity):
        """Add ``quantity`` units of ``product``, merging with an existing line.

        Stock is checked against the product's recorded quantity, both for the
        request alone and for the merged line.
        """
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > product.quantity:
            raise ValidationError({"quantity": ["Requested quantity exceeds available stock"]})

        existing = self.line_for(product.name)
        if existing and existing.quantity + quantity > product.quantity:
            raise ValidationError({"quantity": ["Total quantity exceeds available stock"]})

        catalogue.track(product)

        if existing:
            existing.quantity += quantity
            item = existing
        else:
            item = CartLineItem(
                product_id=str(product.id),
                name=product.name,
                unit_price=product.price,
                quantity=quantity,
            )
            self.add_items(item)

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product.id),
                name=product.name,
                quantity=quantity,
                line_quantity=item.quantity,
            )
        )
        return item

    def add(self, product, quantity, report=print):
        """Add to the cart, reporting a rejected request instead of raising.

        Returns True when the cart changed.
        """
        try:
            self.add_item(product, quantity)
        except ValidationError as exc:
            message = first_message(exc)
            logger.info(
                "Cart addition rejected",
                cart_id=str(self.id),
                product=product.name,
                quantity=quantity,
                reason=message,
            )
            report(message)
            return False
        return True

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def mark_checked_out(self, customer_id, subtotal, shipping_fee, amount):
        items_snapshot = [
            {
                "product_id": str(item.product_id),
                "name": item.name,
                "quantity": item.quantity,
                "unit_price": item.unit_price,
            }
            for item in self.items
        ]

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                customer_id=str(customer_id),
                items=json.dumps(items_snapshot),
                item_count=self.total_quantity(),
                subtotal=subtotal,
                shipping_fee=shipping_fee,
                amount=amount,
            )
        )
