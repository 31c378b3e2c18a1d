"""Customer aggregate: a named shopper with a spendable balance."""

from protean.exceptions import ValidationError
from protean.fields import Float, String

from storefront.customer.events import BalanceDeducted
from storefront.domain import storefront


@storefront.aggregate
class Customer:
    name = String(required=True, max_length=255)
    balance = Float(default=0.0, min_value=0.0)

    def can_afford(self, amount):
        return self.balance >= amount

    def deduct(self, amount):
        """Charge ``amount`` against the balance."""
        if amount < 0:
            raise ValidationError({"amount": ["Amount cannot be negative"]})
        if not self.can_afford(amount):
            raise ValidationError({"balance": ["Customer's balance is insufficient"]})

        previous_balance = self.balance
        self.balance = previous_balance - amount

        self.raise_(
            BalanceDeducted(
                customer_id=str(self.id),
                amount=amount,
                previous_balance=previous_balance,
                new_balance=self.balance,
            )
        )
