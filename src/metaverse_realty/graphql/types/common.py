"""
Shared GraphQL enums and value types
"""

from enum import Enum

import strawberry


@strawberry.enum(description="The blockchain network that a property is stored on.")
class Network(Enum):
    ETHEREUM = "ethereum"
    SOLANA = "solana"
    CARDANO = "cardano"


@strawberry.enum(description="The possible statuses of a piece of property")
class Status(Enum):
    OFF_MARKET = "off_market"
    FOR_SALE = "for_sale"


@strawberry.enum(description="The possible zoning types for a piece of property")
class Zoning(Enum):
    SINGLE_FAMILY = "single_family"
    MULTI_FAMILY = "multi_family"
    COMMERCIAL = "commercial"


@strawberry.enum(description="The possible features for a piece of property")
class Features(Enum):
    WATERFRONT = "waterfront"
    NEAR_PARK = "near_park"
    ROAD_FRONTAGE = "road_frontage"


@strawberry.type(description="An xy coordinate within the metaverse grid")
class Coordinate:
    x: int = strawberry.field(description="The x axis of the coordinate")
    y: int = strawberry.field(description="The y axis of the coordinate")
