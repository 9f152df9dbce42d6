# Copyright 2020-present Kensho Technologies, LLC.
"""Determine whether a GraphQL type may stand in for another, named type."""
from typing import FrozenSet, Sequence

from graphql import GraphQLInterfaceType, GraphQLObjectType, GraphQLSchema, GraphQLType, TypeKind

from .exceptions import InvariantViolation
from .type_classification import get_raw_type, get_type_kind, is_abstract_type


__all__ = [
    "get_concrete_types",
    "implements_interface",
    "may_implement",
]


def may_implement(schema: GraphQLSchema, graphql_type: GraphQLType, type_name: str) -> bool:
    """Determine if the given type may implement the named type.

    This is the case if any of the following hold, ignoring list/non-null wrappers:
     - the type is the named type;
     - the type is an object type that implements the named interface;
     - the type is abstract, and *some* of its concrete types implement the named interface.

    Args:
        schema: GraphQL schema object, obtained from the graphql library
        graphql_type: the type to check, possibly wrapped in list/non-null modifiers
        type_name: name of the type or interface it may implement

    Returns:
        True if a value of the given type may also be a value of the named type
    """
    raw_type = get_raw_type(graphql_type)
    return (
        raw_type.name == type_name
        or implements_interface(raw_type, type_name)
        or (
            is_abstract_type(raw_type)
            and _has_concrete_type_that_implements(schema, raw_type, type_name)
        )
    )


def implements_interface(graphql_type: GraphQLType, interface_name: str) -> bool:
    """Return True if the type is an object type that directly declares the named interface.

    Only object types implement interfaces here; interfaces implemented by other interfaces are
    not followed. Every other kind of type implements nothing.
    """
    return any(
        interface_type.name == interface_name for interface_type in _get_interfaces(graphql_type)
    )


def get_concrete_types(
    schema: GraphQLSchema, graphql_type: GraphQLType
) -> FrozenSet[GraphQLObjectType]:
    """Return the object types that a value of the given abstract type may have in the schema."""
    raw_type = get_raw_type(graphql_type)
    if not is_abstract_type(raw_type):
        raise InvariantViolation(
            "Expected an interface or union type, but got type {} of kind {}.".format(
                raw_type, get_type_kind(raw_type).name
            )
        )
    return frozenset(schema.get_possible_types(raw_type))  # type: ignore


def _has_concrete_type_that_implements(
    schema: GraphQLSchema, graphql_type: GraphQLType, interface_name: str
) -> bool:
    """Return True if some concrete type of the abstract type implements the named interface."""
    return any(
        implements_interface(concrete_type, interface_name)
        for concrete_type in get_concrete_types(schema, graphql_type)
    )


def _get_interfaces(graphql_type: GraphQLType) -> Sequence[GraphQLInterfaceType]:
    """Return the interfaces declared by the type if it's an object type, or nothing otherwise."""
    raw_type = get_raw_type(graphql_type)
    if get_type_kind(raw_type) == TypeKind.OBJECT:
        return raw_type.interfaces  # type: ignore
    return ()
