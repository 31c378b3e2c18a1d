"""Storefront demo: runs the sample checkout scenario against a fresh catalogue.

Usage:
    storefront-demo                     # happy path, then the error cases
    storefront-demo --scenario happy    # only the successful checkout
    storefront-demo --scenario errors   # empty cart, poor customer, expired and over-stock items
    storefront-demo --log-dir logs      # also write storefront.log and storefront_error.log
"""

import argparse
import sys
from datetime import date, timedelta

SCENARIOS = ("happy", "errors", "all")


def seed_catalogue(today=None):
    """Register the sample products and return them by name."""
    from storefront.catalogue import catalogue
    from storefront.catalogue.product import Product

    today = today or date.today()
    products = [
        Product.perishable("Cheese", 100, 10, today + timedelta(days=7), 0.4),
        Product.perishable("Biscuits", 150, 5, today + timedelta(days=30), 0.7),
        Product.non_perishable("TV", 500, 3, needs_shipping=True, weight=15.0),
        Product.non_perishable("Mobile Scratch Card", 50, 20, needs_shipping=False, weight=0.0),
    ]
    return {product.name: catalogue.register(product) for product in products}


def run_happy_path(products, customer, report=print):
    from storefront.cart.cart import Cart
    from storefront.checkout.checkout import checkout

    cart = Cart(customer_id=customer.id)
    cart.add(products["Cheese"], 2, report=report)
    cart.add(products["Biscuits"], 1, report=report)
    cart.add(products["Mobile Scratch Card"], 1, report=report)
    return checkout(customer, cart, report=report)


def run_error_cases(products, customer, report=print, today=None):
    from storefront.cart.cart import Cart
    from storefront.catalogue import catalogue
    from storefront.catalogue.product import Product
    from storefront.checkout.checkout import checkout
    from storefront.customer.customer import Customer

    today = today or date.today()

    # Empty cart
    checkout(customer, Cart(customer_id=customer.id), report=report)

    # Insufficient balance
    poor_customer = Customer(name="Poor Customer", balance=10.0)
    expensive_cart = Cart(customer_id=poor_customer.id)
    expensive_cart.add(products["TV"], 1, report=report)
    checkout(poor_customer, expensive_cart, report=report)

    # Expired product
    expired = catalogue.register(Product.perishable("Expired Milk", 50, 5, today - timedelta(days=1), 1.0))
    expired_cart = Cart(customer_id=customer.id)
    expired_cart.add(expired, 1, report=report)
    checkout(customer, expired_cart, report=report)

    # More than the stock allows
    limited = catalogue.register(Product.non_perishable("Limited Item", 100, 1))
    over_cart = Cart(customer_id=customer.id)
    over_cart.add(limited, 2, report=report)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the storefront checkout demo")
    parser.add_argument(
        "--scenario",
        choices=SCENARIOS,
        default="all",
        help="Which part of the demo to run (default: all)",
    )
    parser.add_argument("--customer", default="John Doe", help="Name of the demo customer")
    parser.add_argument("--balance", type=float, default=1000.0, help="Starting balance of the demo customer")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL for this run")
    parser.add_argument("--log-dir", default=None, help="Also write rotating log files into this directory")
    args = parser.parse_args(argv)

    from storefront.customer.customer import Customer
    from storefront.domain import storefront
    from storefront.utils.logging import configure_logging

    configure_logging(
        level=args.log_level.upper() if args.log_level else None,
        log_dir=args.log_dir,
    )
    storefront.init()

    with storefront.domain_context():
        products = seed_catalogue()
        customer = Customer(name=args.customer, balance=args.balance)

        if args.scenario in ("happy", "all"):
            run_happy_path(products, customer)

        if args.scenario == "all":
            print()
            print("--- Testing error cases ---")

        if args.scenario in ("errors", "all"):
            run_error_cases(products, customer)

    return 0


if __name__ == "__main__":
    sys.exit(main())
