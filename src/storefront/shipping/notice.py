"""Shipment notice: groups shippable units by product name for the carrier slip."""

from dataclasses import dataclass, field

from protean.fields import Float, Integer, String

from storefront.domain import storefront

NOTICE_HEADER = "** Shipment notice **"


@storefront.value_object
class ShipmentGroup:
    """All units of one product travelling in the package."""

    name = String(required=True, max_length=255)
    count = Integer(required=True, min_value=1)
    unit_weight = Float(default=0.0, min_value=0.0)  # kilograms

    @property
    def weight_in_grams(self):
        return int(self.unit_weight * 1000)

    def line(self):
        return f"{self.count}x {self.name} {self.weight_in_grams}g"


@dataclass(frozen=True)
class ShipmentNotice:
    groups: list[ShipmentGroup] = field(default_factory=list)
    total_weight: float = 0.0

    @classmethod
    def from_units(cls, units):
        """Build a notice from shippable units, one unit per item instance.

        Groups keep the order in which a product name is first seen. Units that
        share a name share a weight.
        """
        counts = {}
        weights = {}
        total_weight = 0.0

        for unit in units:
            counts[unit.name] = counts.get(unit.name, 0) + 1
            weights[unit.name] = unit.weight
            total_weight += unit.weight

        groups = [
            ShipmentGroup(name=name, count=count, unit_weight=weights[name])
            for name, count in counts.items()
        ]
        return cls(groups=groups, total_weight=total_weight)

    def lines(self):
        return [
            NOTICE_HEADER,
            *(group.line() for group in self.groups),
            f"Total package weight {self.total_weight}kg",
        ]
