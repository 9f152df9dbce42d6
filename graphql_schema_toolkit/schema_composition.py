# Copyright 2020-present Kensho Technologies, LLC.
"""Build schemas from SDL text, and compose new schemas out of existing ones."""
import logging
from typing import List, Sequence, Set

import funcy
from graphql import GraphQLDirective, GraphQLSchema, build_ast_schema, parse

from .ast_type_resolution import assert_named_type
from .exceptions import DuplicateDirectiveError


__all__ = [
    "parse_schema",
    "schema_with_directives",
]


logger = logging.getLogger(__name__)


def parse_schema(schema_text: str) -> GraphQLSchema:
    """Create a schema from schema definition language text.

    Syntax errors and schema building errors raised by the graphql library are not caught.
    """
    return build_ast_schema(parse(schema_text))


def schema_with_directives(
    schema: GraphQLSchema, directives: Sequence[GraphQLDirective]
) -> GraphQLSchema:
    """Return a copy of the schema with the given directives added to its existing ones.

    The input schema is not modified. The new schema shares the type objects of the input schema,
    along with its description, extensions and AST nodes.

    Args:
        schema: GraphQL schema object, obtained from the graphql library
        directives: directives to add, none of which may share a name with each other or with
                    a directive already in the schema

    Returns:
        new GraphQL schema with the same root types and types as the input schema, whose
        directives are the schema's directives followed by the given ones

    Raises:
        DuplicateDirectiveError if two of the combined directives have the same name
    """
    combined_directives: List[GraphQLDirective] = funcy.lcat([schema.directives, directives])
    _check_directive_names_are_unique(combined_directives)

    types = [assert_named_type(graphql_type) for graphql_type in schema.type_map.values()]
    logger.debug(
        "Composing a new schema with %d added directive(s) out of %d in total.",
        len(combined_directives) - len(schema.directives),
        len(combined_directives),
    )
    return GraphQLSchema(
        query=schema.query_type,
        mutation=schema.mutation_type,
        subscription=schema.subscription_type,
        types=types,
        directives=combined_directives,
        description=schema.description,
        extensions=schema.extensions,
        ast_node=schema.ast_node,
        extension_ast_nodes=schema.extension_ast_nodes,
    )


def _check_directive_names_are_unique(directives: Sequence[GraphQLDirective]) -> None:
    """Raise DuplicateDirectiveError naming the first directive whose name was already seen."""
    seen_names: Set[str] = set()
    for directive in directives:
        if directive.name in seen_names:
            logger.debug("Found a duplicate directive named %s.", directive.name)
            raise DuplicateDirectiveError(directive.name)
        seen_names.add(directive.name)
