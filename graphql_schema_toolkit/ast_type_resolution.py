# Copyright 2020-present Kensho Technologies, LLC.
"""Resolve type references in GraphQL ASTs, and assert the category of the resolved types.

Resolution and assertion are kept separate so that callers can write
assert_type_with_fields(get_type_from_ast(schema, ast)) and get distinct errors for
unknown types and for types of the wrong category.
"""
from typing import Any, Union

from graphql import (
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLType,
    print_ast,
    type_from_ast,
)
from graphql.language.ast import TypeNode

from .exceptions import InvariantViolation, UnknownTypeError
from .type_classification import SELECTABLE_TYPE_KINDS, get_raw_type, get_type_kind


__all__ = [
    "assert_named_type",
    "assert_type_with_fields",
    "get_type_from_ast",
]


def get_type_from_ast(schema: GraphQLSchema, type_ast: TypeNode) -> GraphQLType:
    """Return the schema type referenced by the AST, with the AST's list/non-null wrappers.

    Args:
        schema: GraphQL schema object, obtained from the graphql library
        type_ast: named, list or non-null type AST node, e.g. the type of a variable definition

    Returns:
        the GraphQL type the AST refers to

    Raises:
        UnknownTypeError if the named type at the core of the AST is not in the schema
    """
    graphql_type = type_from_ast(schema, type_ast)
    if graphql_type is None:
        raise UnknownTypeError(print_ast(type_ast))
    return graphql_type


def assert_named_type(value: Any) -> GraphQLNamedType:
    """Return the value if it's a named GraphQL type, raising InvariantViolation otherwise."""
    # get_raw_type raises InvariantViolation for values that aren't GraphQL types at all.
    if get_raw_type(value) is not value:
        raise InvariantViolation("Expected {} to be a named type.".format(value))
    return value


def assert_type_with_fields(
    graphql_type: GraphQLType,
) -> Union[GraphQLObjectType, GraphQLInterfaceType]:
    """Return the type if it's an object or interface type, raising InvariantViolation otherwise."""
    if get_type_kind(graphql_type) not in SELECTABLE_TYPE_KINDS:
        raise InvariantViolation(
            "Expected type {} to be an object or interface type.".format(graphql_type)
        )
    return graphql_type  # type: ignore
