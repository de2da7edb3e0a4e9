"""
Schema-level tests: operations executed against the schema with a real context
"""

import time

import pytest

from metaverse_realty.graphql.types.property import PropertyKind

ALL_PROPERTY_FIELDS = """
    __typename
    id
    network
    parcelNumber
    saleHistory { id propertyId date price seller buyer }
    status
    propertyBoundary { x y }
    askingPrice
    propertySize
    restrictions
    features
    description
    ... on House { squareBlocks floors beds baths }
    ... on Apartment {
        squareBlocks
        floors
        units {
            id network apartment unitNumber floor status askingPrice
            squareBlocks floors beds baths penthouse
            saleHistory { id date }
        }
    }
"""


def assert_no_nulls(value, path="data"):
    """Every field in these queries is populated by mocks, nullable or not."""
    assert value is not None, f"{path} is null"
    if isinstance(value, dict):
        for key, item in value.items():
            assert_no_nulls(item, f"{path}.{key}")
    elif isinstance(value, list):
        for i, item in enumerate(value):
            assert_no_nulls(item, f"{path}[{i}]")


class TestCurrentUserQuery:
    @pytest.mark.asyncio
    async def test_without_authorization_is_forbidden(self, execute):
        result = await execute("{ user { id walletAddress } }")

        assert result.data == {"user": None}
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.message == "An authenticated user is required."
        assert error.extensions["code"] == "FORBIDDEN"
        assert error.path == ["user"]

    @pytest.mark.asyncio
    async def test_near_miss_token_is_forbidden(self, execute):
        result = await execute("{ user { id } }", authorization="Bearer tokens")

        assert result.data == {"user": None}
        assert result.errors[0].extensions["code"] == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_with_valid_authorization(self, execute, valid_credential):
        result = await execute(
            "{ user { id firstName lastName email walletAddress propertyCount properties { id } } }",
            authorization=valid_credential,
        )

        assert result.errors is None
        assert result.data == {
            "user": {
                "id": "1",
                "firstName": "Peyton",
                "lastName": "Cleveland",
                "email": "peyton.cleveland.1@gmail.com",
                "walletAddress": "1x3vk08a2c",
                "propertyCount": 0,
                "properties": [],
            }
        }

    @pytest.mark.asyncio
    async def test_other_fields_still_resolve(self, execute):
        """A forbidden field does not abort the rest of the operation."""
        result = await execute("{ user { id } sales { seller buyer } }")

        assert result.data["user"] is None
        assert result.data["sales"] == [{"seller": "2x71a0mw", "buyer": "d47vq82l"}]
        assert [e.extensions["code"] for e in result.errors] == ["FORBIDDEN"]


class TestMockedQueries:
    @pytest.mark.asyncio
    async def test_properties_cover_every_variant(self, execute):
        result = await execute(f"{{ properties {{ {ALL_PROPERTY_FIELDS} }} }}")

        assert result.errors is None
        assert [p["__typename"] for p in result.data["properties"]] == [
            "Land",
            "House",
            "Apartment",
        ]
        assert_no_nulls(result.data)

    @pytest.mark.asyncio
    async def test_house_description_override(self, execute):
        result = await execute("{ houses { description squareBlocks } }")

        assert result.data["houses"] == [
            {
                "description": "Beautiful property near the entertainment district",
                "squareBlocks": 42,
            }
        ]

    @pytest.mark.asyncio
    async def test_property_by_id_returns_a_variant(self, execute):
        result = await execute('{ propertyById(propertyId: "7") { __typename id } }')

        assert result.errors is None
        assert result.data["propertyById"]["__typename"] in {"Land", "House", "Apartment"}

    @pytest.mark.asyncio
    async def test_property_kind_override_selects_variant(self, app_context, execute):
        app_context.mocks.overrides["PropertyKind"] = lambda: PropertyKind.APARTMENT

        result = await execute(
            '{ propertyById(propertyId: "7") { __typename ... on Apartment { units { id } } } }'
        )

        assert result.errors is None
        assert result.data["propertyById"]["__typename"] == "Apartment"
        assert len(result.data["propertyById"]["units"]) == 1

    @pytest.mark.asyncio
    async def test_users_and_user_by_id(self, execute):
        result = await execute(
            '{ users { id walletAddress properties { __typename } } '
            'userById(userId: "3") { walletAddress propertyCount } }'
        )

        assert result.errors is None
        assert len(result.data["users"]) == 1
        assert result.data["users"][0]["walletAddress"] == "Hello World"
        assert result.data["userById"] == {"walletAddress": "Hello World", "propertyCount": 42}

    @pytest.mark.asyncio
    async def test_apartments_and_units(self, execute):
        result = await execute(
            "{ apartments { units { unitNumber penthouse } } "
            "apartmentUnits { apartment network status } }"
        )

        assert result.errors is None
        assert result.data["apartments"] == [{"units": [{"unitNumber": 42, "penthouse": True}]}]
        unit = result.data["apartmentUnits"][0]
        assert unit["network"] == "ETHEREUM"
        assert unit["status"] == "OFF_MARKET"

    @pytest.mark.asyncio
    async def test_sale_dates_are_epoch_milliseconds(self, execute):
        before = int(time.time() * 1000)
        result = await execute("{ sales { date } }")
        after = int(time.time() * 1000)

        date = result.data["sales"][0]["date"]
        assert isinstance(date, int)
        assert before - 1 <= date <= after + 1

    @pytest.mark.asyncio
    async def test_mocks_are_fresh_per_request(self, execute):
        first = await execute("{ sales { id } }")
        second = await execute("{ sales { id } }")

        assert first.data["sales"][0]["id"] != second.data["sales"][0]["id"]


class TestMutations:
    @pytest.mark.asyncio
    async def test_sale_property(self, execute):
        result = await execute(
            'mutation { saleProperty(propertyId: "1", buyerAddress: "abc") '
            "{ code success message property { __typename id } } }"
        )

        assert result.errors is None
        response = result.data["saleProperty"]
        assert response["code"] == "200"
        assert response["success"] is True
        assert response["message"] == "Successfully sold property"
        assert response["property"]["__typename"] == "Land"

    @pytest.mark.asyncio
    async def test_sale_property_for_unknown_id(self, execute):
        result = await execute(
            "mutation Sell($id: ID!) { saleProperty(propertyId: $id, buyerAddress: \"abc\") "
            "{ code success } }",
            variables={"id": "does-not-exist"},
        )

        assert result.data == {"saleProperty": {"code": "200", "success": True}}

    @pytest.mark.asyncio
    async def test_rezone_property(self, execute):
        result = await execute(
            'mutation { rezoneProperty(propertyId: "1", zoning: [COMMERCIAL, MULTI_FAMILY]) '
            "{ code success message property { restrictions } } }"
        )

        assert result.errors is None
        assert result.data["rezoneProperty"]["code"] == "200"
        assert result.data["rezoneProperty"]["message"] == "Successfully rezoned property"

    @pytest.mark.asyncio
    async def test_update_user(self, execute):
        result = await execute(
            'mutation { updateUser(userId: "1", user: { firstName: "Ada" }) '
            "{ code success message user { id walletAddress } } }"
        )

        assert result.errors is None
        response = result.data["updateUser"]
        assert response["success"] is True
        assert response["message"] == "Successfully updated user"
        assert response["user"]["walletAddress"] == "Hello World"

    @pytest.mark.asyncio
    async def test_invalid_enum_argument_is_a_validation_error(self, execute):
        result = await execute(
            'mutation { rezoneProperty(propertyId: "1", zoning: [CASTLE]) { code } }'
        )

        assert result.data is None
        assert result.errors


class TestErrorMasking:
    @pytest.mark.asyncio
    async def test_internal_faults_are_masked(self, app_context, execute):
        def broken():
            raise RuntimeError("mock store exploded at 0xdeadbeef")

        app_context.mocks.overrides["Sale"] = broken
        try:
            result = await execute("{ sales { id } }")
        finally:
            app_context.mocks.overrides.pop("Sale")

        assert result.data is None
        assert [e.message for e in result.errors] == ["Unexpected error."]

    @pytest.mark.asyncio
    async def test_forbidden_is_not_masked(self, execute):
        result = await execute("{ user { id } }")

        assert result.errors[0].message == "An authenticated user is required."
