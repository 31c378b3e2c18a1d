"""Checkout receipt rendering.

Amounts are kept unrounded on the cart and truncated to whole units only here,
when the receipt is printed.
"""

from dataclasses import dataclass, field

RECEIPT_HEADER = "** Checkout receipt **"
RECEIPT_SEPARATOR = "----------------------"
RECEIPT_FOOTER = "END."


@dataclass(frozen=True)
class ReceiptLine:
    quantity: int
    name: str
    total: float

    def render(self):
        return f"{self.quantity}x {self.name} {int(self.total)}"


@dataclass(frozen=True)
class Receipt:
    items: list[ReceiptLine] = field(default_factory=list)
    subtotal: float = 0.0
    shipping_fee: float = 0.0
    amount: float = 0.0

    @classmethod
    def for_cart(cls, cart, subtotal, shipping_fee, amount):
        return cls(
            items=[ReceiptLine(quantity=item.quantity, name=item.name, total=item.line_total) for item in cart.items],
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            amount=amount,
        )

    def lines(self):
        return [
            RECEIPT_HEADER,
            *(item.render() for item in self.items),
            RECEIPT_SEPARATOR,
            f"Subtotal {int(self.subtotal)}",
            f"Shipping {int(self.shipping_fee)}",
            f"Amount {int(self.amount)}",
            RECEIPT_FOOTER,
        ]
