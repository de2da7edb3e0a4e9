"""
Mutation response envelopes

Every mutation answers with the same ``code``/``success``/``message`` envelope
plus a payload field specific to the mutation.
"""

import strawberry

from .property import Property
from .user import User


@strawberry.interface(description="An interface for mutation responses")
class MutationResponse:
    code: str = strawberry.field(description="The status code of the mutation")
    success: bool = strawberry.field(description="Whether the mutation was successful or not")
    message: str = strawberry.field(description="A response message")


@strawberry.type
class UserMutationResponse(MutationResponse):
    user: User | None = strawberry.field(description="The updated user object")


@strawberry.type
class SalePropertyMutationResponse(MutationResponse):
    property: Property | None = strawberry.field(description="The updated property object")


@strawberry.type
class RezonePropertyMutationResponse(MutationResponse):
    property: Property | None = strawberry.field(description="The updated property object")
