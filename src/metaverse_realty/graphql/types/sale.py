"""
Sale GraphQL type definitions
"""

import strawberry

from ..scalars import Date


@strawberry.type
class Sale:
    """A completed sale of a property. Sales are historical and never change."""

    id: strawberry.ID = strawberry.field(description="The unique ID of the transaction")
    property_id: strawberry.ID = strawberry.field(description="The ID of the property sold")
    date: Date = strawberry.field(description="The date of the transaction")
    price: float = strawberry.field(
        description="The amount of the transaction in the network's native token"
    )
    seller: str = strawberry.field(description="The seller's wallet address")
    buyer: str = strawberry.field(description="The buyer's wallet address")
