"""Shared BDD fixtures and step definitions for the Storefront domain."""

from datetime import date, timedelta

import pytest
from pytest_bdd import given, parsers, then, when
from storefront.cart.cart import Cart
from storefront.catalogue import catalogue
from storefront.catalogue.product import Product
from storefront.customer.customer import Customer


@pytest.fixture
def context():
    """Mutable scenario state shared between steps."""
    return {"products": {}, "customer": None, "cart": None, "result": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the catalogue holds the sample products")
def sample_products(context):
    today = date.today()
    products = [
        Product.perishable("Cheese", 100, 10, today + timedelta(days=7), 0.4),
        Product.perishable("Biscuits", 150, 5, today + timedelta(days=30), 0.7),
        Product.non_perishable("TV", 500, 3, needs_shipping=True, weight=15.0),
        Product.non_perishable("Mobile Scratch Card", 50, 20, needs_shipping=False, weight=0.0),
    ]
    for product in products:
        context["products"][product.name] = catalogue.register(product)


@given(parsers.cfparse('an expired product "{name}" in the catalogue'))
def expired_product(context, name):
    product = Product.perishable(name, 50, 5, date.today() - timedelta(days=1), 1.0)
    context["products"][name] = catalogue.register(product)


@given(parsers.cfparse('a customer "{name}" with a balance of {balance:d}'))
def a_customer(context, name, balance):
    customer = Customer(name=name, balance=float(balance))
    context["customer"] = customer
    context["cart"] = Cart(customer_id=customer.id)


@given(parsers.cfparse('the cart holds {quantity:d} "{name}"'))
def cart_holds(context, reported, quantity, name):
    assert context["cart"].add(context["products"][name], quantity, report=reported.append)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('{quantity:d} "{name}" are added to the cart'))
def add_to_cart(context, reported, quantity, name):
    context["cart"].add(context["products"][name], quantity, report=reported.append)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the report contains "{line}"'))
def report_contains(reported, line):
    assert line in reported


@then(parsers.cfparse('the report does not contain "{line}"'))
def report_does_not_contain(reported, line):
    assert line not in reported


@then(parsers.cfparse("the customer balance is {balance:d}"))
def customer_balance(context, balance):
    assert context["customer"].balance == balance


@then(parsers.cfparse('the stock of "{name}" is {quantity:d}'))
def stock_of(context, name, quantity):
    product = context["products"][name]
    assert product.quantity == quantity
    assert catalogue.lookup(product.id) is product


@then("the cart is empty")
def cart_is_empty(context):
    assert context["cart"].is_empty()


@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_lines(context, count):
    assert len(context["cart"].items) == count


@then(parsers.cfparse('the cart line "{name}" has quantity {quantity:d}'))
def cart_line_quantity(context, name, quantity):
    assert context["cart"].line_for(name).quantity == quantity
