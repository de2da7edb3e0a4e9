"""
Schema-driven mock data

Every field without an explicit resolver is answered with generated data.
``MockGenerator`` walks the Strawberry type graph and builds fully populated
instances of the schema types. Values come from, in order of precedence:

1. an explicit field resolver (such fields are left to Strawberry),
2. an override registered for the type name in ``MOCK_OVERRIDES``,
3. a generic placeholder derived from the field's declared type.

Interfaces with a discriminant table are built by generating the discriminant
and constructing the class it maps to.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

import strawberry
from strawberry.types.base import StrawberryList, StrawberryOptional, get_object_definition
from strawberry.types.lazy_type import LazyType

from ..logging import get_logger
from .errors import MockGenerationError
from .scalars import EPOCH, Date

logger = get_logger(__name__)

# A mock is a zero-argument callable. For scalars it returns the value; for
# object and interface types it returns a partial mapping of python field
# names to values or zero-argument callables producing values.
Mock = Callable[[], Any]

DEFAULT_MAX_DEPTH = 4

SCALAR_NAMES: dict[Any, str] = {
    str: "String",
    int: "Int",
    float: "Float",
    bool: "Boolean",
    strawberry.ID: "ID",
    Date: "Date",
}

GENERIC_SCALARS: dict[str, Mock] = {
    "String": lambda: "Hello World",
    "Int": lambda: 42,
    "Float": lambda: 4.2,
    "Boolean": lambda: True,
    "ID": lambda: str(uuid4()),
    "Date": lambda: EPOCH,
}

MOCK_OVERRIDES: dict[str, Mock] = {
    "Date": lambda: datetime.now(timezone.utc),
    "Sale": lambda: {
        "seller": lambda: "2x71a0mw",
        "buyer": lambda: "d47vq82l",
    },
    "House": lambda: {
        "description": lambda: "Beautiful property near the entertainment district",
    },
    "MutationResponse": lambda: {
        "code": "200",
        "success": True,
    },
    "UserMutationResponse": lambda: {
        "message": "Successfully updated user",
    },
    "SalePropertyMutationResponse": lambda: {
        "message": "Successfully sold property",
    },
    "RezonePropertyMutationResponse": lambda: {
        "message": "Successfully rezoned property",
    },
}


def _resolve_value(value: Any) -> Any:
    return value() if callable(value) else value


def _enum_class(annotation: Any) -> type[Enum] | None:
    # Strawberry hands enum fields over as their enum definition, which keeps
    # the python class in ``wrapped_cls``
    annotation = getattr(annotation, "wrapped_cls", annotation)
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return annotation
    return None


class MockGenerator:
    """Builds placeholder values for any type in the schema graph.

    Args:
        types: Concrete object types of the schema. Interface implementations
            are discovered from these, in the given order.
        overrides: Mocks keyed by GraphQL type name.
        max_depth: Nesting limit. Past it, nullable fields become null, lists
            become empty and a required object is an error.
        variants: Discriminant tables keyed by interface name. An interface
            with a table is built by generating its discriminant (so the
            discriminant enum can be overridden) and constructing the class
            it maps to. Lists of it hold one value per discriminant member.
    """

    def __init__(
        self,
        types: Iterable[type],
        overrides: Mapping[str, Mock] | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        variants: Mapping[str, Mapping[Enum, type]] | None = None,
    ):
        self.overrides = dict(MOCK_OVERRIDES if overrides is None else overrides)
        self.max_depth = max_depth
        self.variants = dict(variants or {})
        self._types_by_name: dict[str, type] = {}
        self._implementations: dict[type, list[type]] = {}

        for cls in types:
            definition = get_object_definition(cls, strict=True)
            self._types_by_name[definition.name] = cls
            for interface in definition.interfaces:
                self._types_by_name[interface.name] = interface.origin
                self._implementations.setdefault(interface.origin, []).append(cls)

    def implementations_of(self, interface: type) -> Sequence[type]:
        implementations = self._implementations.get(interface)
        if not implementations:
            raise MockGenerationError(f"No implementations registered for {interface.__name__}")
        return implementations

    def generate_type(self, name: str) -> Any:
        """Generate a value for a type looked up by its GraphQL name."""
        if name in GENERIC_SCALARS:
            return self._generate_scalar(name)
        cls = self._types_by_name.get(name)
        if cls is None:
            raise MockGenerationError(f"Unknown type: {name}")
        return self.generate(cls)

    def generate(self, annotation: Any) -> Any:
        """Generate a value for a resolved Strawberry type annotation."""
        return self._generate(annotation, 0)

    def _generate(self, annotation: Any, depth: int) -> Any:
        if isinstance(annotation, LazyType):
            annotation = annotation.resolve_type()

        if isinstance(annotation, StrawberryOptional):
            if depth > self.max_depth:
                return None
            return self._generate(annotation.of_type, depth)

        if isinstance(annotation, StrawberryList):
            if depth > self.max_depth:
                return []
            return self._generate_list(annotation.of_type, depth)

        enum_cls = _enum_class(annotation)
        if enum_cls is not None:
            return self._generate_enum(enum_cls)

        scalar_name = SCALAR_NAMES.get(annotation)
        if scalar_name is not None:
            return self._generate_scalar(scalar_name)

        definition = get_object_definition(annotation)
        if definition is None:
            raise MockGenerationError(f"Cannot mock values of type {annotation!r}")
        if definition.is_interface:
            return self._generate_object(self._select_variant(definition, annotation), depth)
        return self._generate_object(annotation, depth)

    def _select_variant(self, definition: Any, interface: type) -> type:
        table = self.variants.get(definition.name)
        if table is None:
            return self.implementations_of(interface)[0]
        kind = self._generate_enum(type(next(iter(table))))
        return table[kind]

    def _generate_list(self, item_type: Any, depth: int) -> list[Any]:
        if isinstance(item_type, LazyType):
            item_type = item_type.resolve_type()

        # One item per variant so every implementation shows up
        definition = get_object_definition(item_type)
        if definition is not None and definition.is_interface:
            table = self.variants.get(definition.name)
            classes = table.values() if table else self.implementations_of(item_type)
            return [self._generate_object(cls, depth) for cls in classes]
        return [self._generate(item_type, depth)]

    def _generate_enum(self, enum_cls: type[Enum]) -> Enum:
        override = self.overrides.get(enum_cls.__name__)
        if override is not None:
            return override()
        return next(iter(enum_cls))

    def _generate_scalar(self, name: str) -> Any:
        mock = self.overrides.get(name) or GENERIC_SCALARS[name]
        return mock()

    def _override_values(self, definition: Any) -> dict[str, Any]:
        """Collect override values, interface overrides first."""
        field_names = {field.python_name for field in definition.fields}
        values: dict[str, Any] = {}

        for name in [interface.name for interface in definition.interfaces] + [definition.name]:
            mock = self.overrides.get(name)
            if mock is None:
                continue
            partial = mock()
            unknown = set(partial) - field_names
            if unknown:
                raise MockGenerationError(
                    f"Mock for {name} sets unknown fields on {definition.name}: {sorted(unknown)}"
                )
            values.update(partial)

        return {key: _resolve_value(value) for key, value in values.items()}

    def _generate_object(self, cls: type, depth: int) -> Any:
        definition = get_object_definition(cls, strict=True)
        if depth > self.max_depth:
            raise MockGenerationError(
                f"Cannot mock {definition.name} past the maximum depth of {self.max_depth}"
            )

        overrides = self._override_values(definition)
        kwargs: dict[str, Any] = {}
        for field in definition.fields:
            if field.base_resolver is not None:
                continue
            if field.python_name in overrides:
                kwargs[field.python_name] = overrides[field.python_name]
            else:
                kwargs[field.python_name] = self._generate(field.type, depth + 1)

        logger.debug("Generated mock object", type=definition.name, depth=depth)
        return cls(**kwargs)
