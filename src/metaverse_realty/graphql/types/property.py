"""
Property GraphQL type definitions

Property is an interface over a closed set of variants. ``PropertyKind`` is
the discriminant: the mock generator produces a kind and builds the class
``PROPERTY_VARIANTS`` maps it to. Strawberry then resolves the GraphQL type
from that class.
"""

from enum import Enum

import strawberry

from .common import Coordinate, Features, Network, Status, Zoning
from .sale import Sale


@strawberry.interface(description="A property in the metaverse")
class Property:
    id: strawberry.ID = strawberry.field(description="The property's unique identifier")
    network: Network = strawberry.field(description="The network that the property is on")
    parcel_number: int = strawberry.field(
        description="The parcel number that identifies the property in the metaverse plat book"
    )
    sale_history: list[Sale] = strawberry.field(
        description=(
            "An ordered list of the sale history starting with the first "
            "and ending with the most recent sale"
        )
    )
    status: Status = strawberry.field(description="The current listing status of the property")
    property_boundary: list[Coordinate] = strawberry.field(
        description=(
            "A description of the property boundaries listing every corner outlining "
            "the property, starting and ending with the same coordinate"
        )
    )
    asking_price: float | None = strawberry.field(
        description=(
            "The current asking price for the property if listed for sale, "
            "in the network's native token"
        )
    )
    property_size: int = strawberry.field(
        description=(
            "The number of blocks contained within the property's boundaries, "
            "properties must be at least 2x2"
        )
    )
    restrictions: list[Zoning] = strawberry.field(description="The possible uses for this property")
    features: list[Features] = strawberry.field(description="The features of this property")
    description: str | None = strawberry.field(description="A description of this property")


@strawberry.type
class Land(Property):
    """Undeveloped parcel."""

    pass


@strawberry.type
class House(Property):
    square_blocks: int = strawberry.field(
        description="The number of blocks contained within the house"
    )
    floors: int = strawberry.field(description="The number of floors within the house")
    beds: int = strawberry.field(description="The number of bedrooms within the house")
    baths: float = strawberry.field(description="The number of bathrooms within the house")


@strawberry.type
class ApartmentUnit:
    """A unit inside an Apartment. Units are sold individually but are not properties."""

    id: strawberry.ID = strawberry.field(description="The units's unique identifier")
    network: Network = strawberry.field(description="The network that the property is on")
    apartment: strawberry.ID = strawberry.field(
        description="The ID of the Apartment that the unit belongs in"
    )
    unit_number: int = strawberry.field(description="The unit's number")
    floor: int = strawberry.field(description="The floor that the unit is on")
    sale_history: list[Sale] = strawberry.field(
        description=(
            "An ordered list of the sale history starting with the first "
            "and ending with the most recent sale"
        )
    )
    status: Status = strawberry.field(
        description="The current listing status of the apartment unit"
    )
    asking_price: float | None = strawberry.field(
        description=(
            "The current asking price for the unit if listed for sale, "
            "in the network's native token"
        )
    )
    square_blocks: int = strawberry.field(description="The number of blocks contained within the unit")
    floors: int = strawberry.field(description="The number of floors within the unit")
    beds: int = strawberry.field(description="The number of bedrooms within the unit")
    baths: float = strawberry.field(description="The number of bathrooms within the unit")
    penthouse: bool = strawberry.field(description="Whether or not the unit is a penthouse suite")


@strawberry.type
class Apartment(Property):
    square_blocks: int = strawberry.field(
        description="The number of blocks contained within the apartment"
    )
    floors: int = strawberry.field(description="The number of floors within the apartment")
    units: list[ApartmentUnit] = strawberry.field(
        description="A list of all the units within the apartment"
    )


class PropertyKind(Enum):
    """Discriminant for the Property variants."""

    LAND = "land"
    HOUSE = "house"
    APARTMENT = "apartment"


PROPERTY_VARIANTS: dict[PropertyKind, type[Property]] = {
    PropertyKind.LAND: Land,
    PropertyKind.HOUSE: House,
    PropertyKind.APARTMENT: Apartment,
}
