"""Tests for the demo scenario."""

from storefront.customer.customer import Customer
from storefront.demo import run_error_cases, run_happy_path, seed_catalogue


class TestDemo:
    def test_seed_catalogue(self):
        products = seed_catalogue()
        assert set(products) == {"Cheese", "Biscuits", "TV", "Mobile Scratch Card"}

    def test_happy_path(self, reported):
        customer = Customer(name="John Doe", balance=1000.0)
        result = run_happy_path(seed_catalogue(), customer, report=reported.append)
        assert result.succeeded
        assert reported[-4:] == ["Subtotal 400", "Shipping 30", "Amount 430", "END."]
        assert customer.balance == 570.0

    def test_error_cases(self, reported):
        customer = Customer(name="John Doe", balance=520.0)
        run_error_cases(seed_catalogue(), customer, report=reported.append)
        assert reported == [
            "Cart is empty",
            "Customer's balance is insufficient",
            "One product is expired",
            "Requested quantity exceeds available stock",
        ]
        assert customer.balance == 520.0
