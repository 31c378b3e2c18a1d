"""Domain events for the Customer aggregate."""

from protean.fields import Float, Identifier

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class BalanceDeducted:
    """An amount was charged against the customer's balance."""

    __version__ = 1

    customer_id = Identifier(required=True)
    amount = Float(required=True)
    previous_balance = Float(required=True)
    new_balance = Float(required=True)
