"""
Root GraphQL query definitions
"""

import strawberry

from ..resolvers.mock import resolve_mock
from ..resolvers.user import resolve_current_user
from ..types.property import Apartment, ApartmentUnit, House, Property
from ..types.sale import Sale
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Returns the current user or throws an authentication error")
    def user(self, info: strawberry.Info) -> User | None:
        return resolve_current_user(info)

    @strawberry.field(description="Returns all users")
    def users(self, info: strawberry.Info) -> list[User]:
        return resolve_mock(info)

    @strawberry.field(description="Returns a user by their ID")
    def user_by_id(self, info: strawberry.Info, user_id: strawberry.ID) -> User | None:
        return resolve_mock(info)

    @strawberry.field(description="Returns all properties in the system")
    def properties(self, info: strawberry.Info) -> list[Property]:
        return resolve_mock(info)

    @strawberry.field(description="Returns all houses in the system")
    def houses(self, info: strawberry.Info) -> list[House]:
        return resolve_mock(info)

    @strawberry.field(description="Returns all apartments in the system")
    def apartments(self, info: strawberry.Info) -> list[Apartment]:
        return resolve_mock(info)

    @strawberry.field(description="Returns all apartment units in the system")
    def apartment_units(self, info: strawberry.Info) -> list[ApartmentUnit]:
        return resolve_mock(info)

    @strawberry.field(description="Returns all sales recorded")
    def sales(self, info: strawberry.Info) -> list[Sale]:
        return resolve_mock(info)

    @strawberry.field(description="Returns a property by it's ID")
    def property_by_id(self, info: strawberry.Info, property_id: strawberry.ID) -> Property | None:
        return resolve_mock(info)
