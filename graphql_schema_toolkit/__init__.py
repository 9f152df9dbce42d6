# Copyright 2020-present Kensho Technologies, LLC.
"""Type resolution and schema composition utilities for GraphQL compilers.

Each component lives in its own module, which declares its public functions in __all__:
 - type_classification: unwrapping list/non-null modifiers, and classifying types;
 - type_compatibility: whether a type may stand in for another, named type;
 - identity: whether an object or interface type has an identity field;
 - schema_composition: building schemas from text, and adding directives to schemas;
 - ast_classification: operation definition vs. schema definition AST nodes;
 - ast_type_resolution: resolving type ASTs against a schema, and asserting their category.
"""
from . import (  # noqa
    ast_classification,
    ast_type_resolution,
    identity,
    schema_composition,
    type_classification,
    type_compatibility,
)
from .exceptions import (  # noqa
    DuplicateDirectiveError,
    GraphQLSchemaToolkitError,
    InvariantViolation,
    UnknownTypeError,
)


__package_name__ = "graphql-schema-toolkit"
__version__ = "1.0.0"
