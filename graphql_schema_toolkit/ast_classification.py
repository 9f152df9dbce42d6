# Copyright 2020-present Kensho Technologies, LLC.
"""Sort GraphQL AST nodes into operation definitions and schema definitions."""
from typing import FrozenSet, Optional, Union

from graphql.language.ast import (
    DirectiveDefinitionNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    FragmentDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    Node,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    OperationDefinitionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    TypeExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
)


__all__ = [
    "OPERATION_DEFINITION_KINDS",
    "SCHEMA_DEFINITION_KINDS",
    "TYPE_EXTENSION_KINDS",
    "get_operation_definition_ast",
    "is_operation_definition_ast",
    "is_schema_definition_ast",
]


OPERATION_DEFINITION_KINDS: FrozenSet[str] = frozenset(
    {
        FragmentDefinitionNode.kind,
        OperationDefinitionNode.kind,
    }
)

# graphql-core has one extension node per extensible type, on top of their common base class.
TYPE_EXTENSION_KINDS: FrozenSet[str] = frozenset(
    {
        TypeExtensionNode.kind,
        EnumTypeExtensionNode.kind,
        InputObjectTypeExtensionNode.kind,
        InterfaceTypeExtensionNode.kind,
        ObjectTypeExtensionNode.kind,
        ScalarTypeExtensionNode.kind,
        UnionTypeExtensionNode.kind,
    }
)

SCHEMA_DEFINITION_KINDS: FrozenSet[str] = (
    frozenset(
        {
            DirectiveDefinitionNode.kind,
            EnumTypeDefinitionNode.kind,
            InputObjectTypeDefinitionNode.kind,
            InterfaceTypeDefinitionNode.kind,
            ObjectTypeDefinitionNode.kind,
            ScalarTypeDefinitionNode.kind,
            UnionTypeDefinitionNode.kind,
        }
    )
    | TYPE_EXTENSION_KINDS
)


def is_operation_definition_ast(ast: Node) -> bool:
    """Return True if the AST node is a fragment or operation definition."""
    return ast.kind in OPERATION_DEFINITION_KINDS


def is_schema_definition_ast(ast: Node) -> bool:
    """Return True if the AST node defines or extends a type, or defines a directive."""
    return ast.kind in SCHEMA_DEFINITION_KINDS


def get_operation_definition_ast(
    ast: Node,
) -> Optional[Union[FragmentDefinitionNode, OperationDefinitionNode]]:
    """Return the AST node itself if it's a fragment or operation definition, and None otherwise."""
    if is_operation_definition_ast(ast):
        return ast  # type: ignore
    return None
