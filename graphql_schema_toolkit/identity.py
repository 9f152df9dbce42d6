# Copyright 2020-present Kensho Technologies, LLC.
"""Detection of the canonical identity field on object and interface types."""
from graphql import GraphQLSchema, GraphQLType

from .exceptions import InvariantViolation
from .type_classification import SELECTABLE_TYPE_KINDS, get_raw_type, get_type_kind


__all__ = [
    "ID_FIELD_NAME",
    "ID_TYPE_NAME",
    "has_id",
]


# Name of the field holding an object's identity, and the name of the scalar type it must have.
ID_FIELD_NAME = "id"
ID_TYPE_NAME = "ID"


def has_id(schema: GraphQLSchema, graphql_type: GraphQLType) -> bool:
    """Return True if the object or interface type has an "id" field of the schema's ID type.

    This is duck typing: any type with such a field is considered to carry an identity, whether
    or not it implements a particular interface. The field's type may be wrapped in list/non-null
    modifiers, but its underlying type must be the very same ID type object as the one in the
    schema. If the schema has no type named ID, no type has an identity field.

    Args:
        schema: GraphQL schema object, obtained from the graphql library
        graphql_type: object or interface type, possibly wrapped in list/non-null modifiers

    Returns:
        True if the type has an identity field, False otherwise

    Raises:
        InvariantViolation if the type is not an object or interface type
    """
    raw_type = get_raw_type(graphql_type)
    if get_type_kind(raw_type) not in SELECTABLE_TYPE_KINDS:
        raise InvariantViolation(
            "Expected an object or interface type when looking for an identity field, "
            "but got type {}.".format(graphql_type)
        )

    id_type = schema.get_type(ID_TYPE_NAME)
    id_field = raw_type.fields.get(ID_FIELD_NAME)  # type: ignore
    if id_type is None or id_field is None:
        return False

    return get_raw_type(id_field.type) is id_type
