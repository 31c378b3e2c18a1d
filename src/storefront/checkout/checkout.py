"""Checkout: validates a cart against the catalogue and commits the purchase.

Flow:
    1. Cart must have items
    2. Every line: product not expired, enough stock (first failure wins)
    3. Shippable lines expand into one unit per item instance
    4. subtotal + flat shipping fee (only when something ships) = amount
    5. Customer must be able to afford the amount
    6. Commit: shipment notice, stock reduction, balance deduction
    7. Receipt

Steps 1-5 only read. A rejected checkout reports its reason and leaves stock,
balance and cart untouched.
"""

from dataclasses import dataclass, field

from protean.exceptions import ValidationError

from storefront.catalogue import catalogue
from storefront.checkout.receipt import Receipt
from storefront.shipping.notice import ShipmentNotice
from storefront.shipping.service import ship
from storefront.utils.errors import first_message
from storefront.utils.logging import add_context, get_logger, remove_context

logger = get_logger(__name__)

FLAT_SHIPPING_FEE = 30


@dataclass(frozen=True)
class CheckoutResult:
    succeeded: bool
    message: str | None = None
    subtotal: float = 0.0
    shipping_fee: float = 0.0
    amount: float = 0.0
    shipment: ShipmentNotice | None = None
    receipt: Receipt | None = None
    lines: list[str] = field(default_factory=list)


@dataclass
class _Plan:
    products: list = field(default_factory=list)  # (line item, product) in cart order
    units: list = field(default_factory=list)
    subtotal: float = 0.0
    shipping_fee: float = 0.0
    amount: float = 0.0


def _prepare(customer, cart):
    """Run every check and price the cart. Raises ValidationError on the first failure."""
    if cart.is_empty():
        raise ValidationError({"cart": ["Cart is empty"]})

    plan = _Plan()
    for item in cart.items:
        product = catalogue.lookup(item.product_id)

        if product.is_expired():
            raise ValidationError({"product": ["One product is expired"]})
        if not product.has_stock_for(item.quantity):
            raise ValidationError({"product": ["One product is out of stock"]})

        plan.products.append((item, product))
        if product.requires_shipping:
            plan.units.extend([product] * item.quantity)

    plan.subtotal = cart.subtotal()
    plan.shipping_fee = FLAT_SHIPPING_FEE if plan.units else 0
    plan.amount = plan.subtotal + plan.shipping_fee

    if not customer.can_afford(plan.amount):
        raise ValidationError({"balance": ["Customer's balance is insufficient"]})

    return plan


def checkout(customer, cart, report=print):
    """Check out ``cart`` for ``customer``, reporting every line through ``report``.

    Log records emitted while the checkout runs carry the cart and customer ids.
    """
    add_context(cart_id=str(cart.id), customer_id=str(customer.id))
    try:
        return _checkout(customer, cart, report)
    finally:
        remove_context("cart_id", "customer_id")


def _checkout(customer, cart, report):
    lines = []

    def emit(line):
        lines.append(line)
        report(line)

    try:
        plan = _prepare(customer, cart)
    except ValidationError as exc:
        message = first_message(exc)
        logger.info("Checkout rejected", reason=message)
        emit(message)
        return CheckoutResult(succeeded=False, message=message, lines=lines)

    shipment = ship(plan.units, report=emit) if plan.units else None

    for item, product in plan.products:
        product.reduce_stock(item.quantity)
        catalogue.save(product)

    customer.deduct(plan.amount)
    cart.mark_checked_out(
        customer_id=customer.id,
        subtotal=plan.subtotal,
        shipping_fee=plan.shipping_fee,
        amount=plan.amount,
    )

    receipt = Receipt.for_cart(cart, plan.subtotal, plan.shipping_fee, plan.amount)
    for line in receipt.lines():
        emit(line)

    logger.info(
        "Checkout completed",
        subtotal=plan.subtotal,
        shipping_fee=plan.shipping_fee,
        amount=plan.amount,
        remaining_balance=customer.balance,
    )

    return CheckoutResult(
        succeeded=True,
        subtotal=plan.subtotal,
        shipping_fee=plan.shipping_fee,
        amount=plan.amount,
        shipment=shipment,
        receipt=receipt,
        lines=lines,
    )
