"""Shipping service: prints the shipment notice for the units leaving the store."""

from storefront.shipping.notice import ShipmentNotice
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def ship(units, report=print):
    """Report the shipment notice for ``units`` and return it.

    Nothing is reported, and None is returned, when there is nothing to ship.
    """
    units = list(units)
    if not units:
        return None

    notice = ShipmentNotice.from_units(units)
    for line in notice.lines():
        report(line)

    logger.info(
        "Shipment notice issued",
        groups=len(notice.groups),
        units=len(units),
        total_weight=notice.total_weight,
    )
    return notice
