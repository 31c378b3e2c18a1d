from datetime import date, timedelta

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront
    from storefront.utils.logging import configure_logging

    configure_logging()

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield

        from protean import current_domain
        from storefront.catalogue import catalogue

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        catalogue.clear()


@pytest.fixture
def today():
    return date.today()


@pytest.fixture
def catalogue_products(today):
    """The sample catalogue: two perishables, a shipped TV and a digital scratch card."""
    from storefront.catalogue import catalogue
    from storefront.catalogue.product import Product

    products = [
        Product.perishable("Cheese", 100, 10, today + timedelta(days=7), 0.4),
        Product.perishable("Biscuits", 150, 5, today + timedelta(days=30), 0.7),
        Product.non_perishable("TV", 500, 3, needs_shipping=True, weight=15.0),
        Product.non_perishable("Mobile Scratch Card", 50, 20, needs_shipping=False, weight=0.0),
    ]
    return {product.name: catalogue.register(product) for product in products}


@pytest.fixture
def customer():
    from storefront.customer.customer import Customer

    return Customer(name="John Doe", balance=1000.0)


@pytest.fixture
def reported():
    """Collects report lines; pass ``reported.append`` as the ``report`` callable."""
    return []
