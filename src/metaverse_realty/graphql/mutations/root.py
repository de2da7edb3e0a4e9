"""
Root GraphQL mutation definitions

Mutations are accepted and answered with mock envelopes. Nothing is stored.
"""

import strawberry

from ..resolvers.mock import resolve_mock
from ..types.common import Zoning
from ..types.mutation_response import (
    RezonePropertyMutationResponse,
    SalePropertyMutationResponse,
    UserMutationResponse,
)


@strawberry.input(description="An input type for updating user information")
class UpdateUserInput:
    first_name: str | None = strawberry.field(
        default=None, description="Updates the first name of the user"
    )
    last_name: str | None = strawberry.field(
        default=None, description="Updates the last name of the user"
    )
    email: str | None = strawberry.field(default=None, description="Updates the email of the user")


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(description="Updates user info and returns the updated user object")
    def update_user(
        self, info: strawberry.Info, user_id: strawberry.ID, user: UpdateUserInput
    ) -> UserMutationResponse | None:
        return resolve_mock(info)

    @strawberry.mutation(
        description=(
            "Creates a transaction, takes the ID of the property and the buyer's wallet address"
        )
    )
    def sale_property(
        self, info: strawberry.Info, property_id: strawberry.ID, buyer_address: str
    ) -> SalePropertyMutationResponse | None:
        return resolve_mock(info)

    @strawberry.mutation(
        description="Rezones a property, takes the property ID and updated zoning array"
    )
    def rezone_property(
        self, info: strawberry.Info, property_id: strawberry.ID, zoning: list[Zoning]
    ) -> RezonePropertyMutationResponse | None:
        return resolve_mock(info)
