"""Product aggregate: perishable and non-perishable goods held in the catalogue.

Both kinds share one capability set (name, price, quantity, weight, expiry and
shipping checks). The kind is a tag on the aggregate rather than a subclass:

    Perishable:      expires after ``expires_on``, always shipped
    Non-perishable:  never expires, shipped only when flagged at creation
"""

from datetime import date
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, Float, Integer, String

from storefront.catalogue.events import StockReduced
from storefront.domain import storefront


class ProductKind(Enum):
    PERISHABLE = "Perishable"
    NON_PERISHABLE = "NonPerishable"


@storefront.aggregate
class Product:
    """A sellable product and its available stock."""

    name = String(required=True, max_length=255)
    kind = String(choices=ProductKind, default=ProductKind.NON_PERISHABLE.value)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(default=0, min_value=0)
    weight = Float(default=0.0, min_value=0.0)  # kilograms, per unit
    expires_on = Date()
    needs_shipping = Boolean(default=False)

    @invariant.post
    def perishable_products_must_have_an_expiry_date(self):
        if self.kind == ProductKind.PERISHABLE.value and self.expires_on is None:
            raise ValidationError({"expires_on": ["Perishable products must have an expiration date"]})

    @invariant.post
    def non_perishable_products_cannot_expire(self):
        if self.kind == ProductKind.NON_PERISHABLE.value and self.expires_on is not None:
            raise ValidationError({"expires_on": ["Non-perishable products do not expire"]})

    # -------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------
    @classmethod
    def perishable(cls, name, price, quantity, expires_on, weight):
        return cls(
            name=name,
            kind=ProductKind.PERISHABLE.value,
            price=price,
            quantity=quantity,
            expires_on=expires_on,
            weight=weight,
            needs_shipping=True,
        )

    @classmethod
    def non_perishable(cls, name, price, quantity, needs_shipping=False, weight=0.0):
        return cls(
            name=name,
            kind=ProductKind.NON_PERISHABLE.value,
            price=price,
            quantity=quantity,
            needs_shipping=needs_shipping,
            weight=weight,
        )

    # -------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------
    @property
    def is_perishable(self):
        return self.kind == ProductKind.PERISHABLE.value

    @property
    def requires_shipping(self):
        return True if self.is_perishable else bool(self.needs_shipping)

    def is_expired(self, today=None):
        """A perishable product is expired from the day after its expiration date."""
        if not self.is_perishable:
            return False
        today = today or date.today()
        return today > self.expires_on

    def has_stock_for(self, quantity):
        return quantity <= self.quantity

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def reduce_stock(self, quantity):
        """Take ``quantity`` units out of stock."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if not self.has_stock_for(quantity):
            raise ValidationError(
                {"quantity": [f"Insufficient stock: {self.quantity} available, {quantity} requested"]}
            )

        previous_quantity = self.quantity
        self.quantity = previous_quantity - quantity

        self.raise_(
            StockReduced(
                product_id=str(self.id),
                name=self.name,
                quantity=quantity,
                previous_quantity=previous_quantity,
                new_quantity=self.quantity,
            )
        )
