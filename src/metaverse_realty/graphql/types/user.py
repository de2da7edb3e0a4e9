"""
User GraphQL type definitions
"""

import strawberry

from .property import Property


@strawberry.type(description="A User object in our schema")
class User:
    id: strawberry.ID = strawberry.field(description="The unique ID of the user")
    first_name: str | None = strawberry.field(description="The user's first name")
    last_name: str | None = strawberry.field(description="The user's last name")
    email: str | None = strawberry.field(description="The user's email address")
    wallet_address: str = strawberry.field(description="The user's wallet Address")
    properties: list[Property] = strawberry.field(
        description="The properties that the user owns"
    )
    property_count: int = strawberry.field(
        description="The number of properties that the user owns"
    )
