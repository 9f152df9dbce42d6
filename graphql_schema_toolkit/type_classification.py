# Copyright 2020-present Kensho Technologies, LLC.
"""Classification of GraphQL types, and removal of their list and non-null modifiers."""
from typing import Any, FrozenSet, Tuple, Type, Union

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLType,
    GraphQLUnionType,
    TypeKind,
    get_nullable_type,
)

from .exceptions import InvariantViolation


__all__ = [
    "ABSTRACT_TYPE_KINDS",
    "SELECTABLE_TYPE_KINDS",
    "WRAPPING_TYPE_KINDS",
    "GraphQLSingularType",
    "can_have_selections",
    "get_nullable_type",
    "get_raw_type",
    "get_singular_type",
    "get_type_kind",
    "is_abstract_type",
]


# Every kind of GraphQL type, keyed by the graphql-core class that represents it.
# The classes are pairwise unrelated, so at most one of them matches any given value.
_TYPE_KIND_BY_CLASS: Tuple[Tuple[Type[GraphQLType], TypeKind], ...] = (
    (GraphQLScalarType, TypeKind.SCALAR),
    (GraphQLObjectType, TypeKind.OBJECT),
    (GraphQLInterfaceType, TypeKind.INTERFACE),
    (GraphQLUnionType, TypeKind.UNION),
    (GraphQLEnumType, TypeKind.ENUM),
    (GraphQLInputObjectType, TypeKind.INPUT_OBJECT),
    (GraphQLList, TypeKind.LIST),
    (GraphQLNonNull, TypeKind.NON_NULL),
)

ABSTRACT_TYPE_KINDS: FrozenSet[TypeKind] = frozenset({TypeKind.INTERFACE, TypeKind.UNION})
SELECTABLE_TYPE_KINDS: FrozenSet[TypeKind] = frozenset({TypeKind.OBJECT, TypeKind.INTERFACE})
WRAPPING_TYPE_KINDS: FrozenSet[TypeKind] = frozenset({TypeKind.LIST, TypeKind.NON_NULL})

# A type with its list modifiers removed: a named type, possibly still wrapped in non-null.
GraphQLSingularType = Union[GraphQLNamedType, GraphQLNonNull]


def get_type_kind(graphql_type: Any) -> TypeKind:
    """Return the kind of the given GraphQL type.

    Args:
        graphql_type: a named GraphQL type, or a list or non-null wrapper around a type

    Returns:
        TypeKind enum value describing the outermost layer of the type

    Raises:
        InvariantViolation if the value is not a GraphQL type
    """
    for graphql_class, type_kind in _TYPE_KIND_BY_CLASS:
        if isinstance(graphql_type, graphql_class):
            return type_kind

    raise InvariantViolation("Expected a GraphQL type, but got: {}".format(graphql_type))


def get_raw_type(graphql_type: GraphQLType) -> GraphQLNamedType:
    """Return the named type underneath the given type, with all list/non-null wrappers removed."""
    current_type = graphql_type
    current_kind = get_type_kind(current_type)
    while current_kind in WRAPPING_TYPE_KINDS:
        inner_type = current_type.of_type  # type: ignore
        inner_kind = get_type_kind(inner_type)
        if current_kind == TypeKind.NON_NULL and inner_kind == TypeKind.NON_NULL:
            raise InvariantViolation(
                "Found a non-null type wrapping another non-null type in {}, which is not "
                "allowed.".format(graphql_type)
            )
        current_type, current_kind = inner_type, inner_kind

    return current_type  # type: ignore


def get_singular_type(graphql_type: GraphQLType) -> GraphQLSingularType:
    """Return the type with its list wrappers removed, stopping at the first non-list layer.

    Non-null layers are preserved: the singular type of [Int!] is Int!, not Int.
    """
    current_type = graphql_type
    while get_type_kind(current_type) == TypeKind.LIST:
        current_type = current_type.of_type  # type: ignore
    return current_type  # type: ignore


def can_have_selections(graphql_type: GraphQLType) -> bool:
    """Return True if fields may be selected on the given type, i.e. it's an object or interface."""
    return get_type_kind(get_raw_type(graphql_type)) in SELECTABLE_TYPE_KINDS


def is_abstract_type(graphql_type: GraphQLType) -> bool:
    """Return True if the type, with list/non-null wrappers removed, is an interface or union."""
    return get_type_kind(get_raw_type(graphql_type)) in ABSTRACT_TYPE_KINDS
