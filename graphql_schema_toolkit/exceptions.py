# Copyright 2020-present Kensho Technologies, LLC.
class GraphQLSchemaToolkitError(Exception):
    """Generic error when inspecting or composing GraphQL schemas."""


class InvariantViolation(GraphQLSchemaToolkitError, AssertionError):
    """Raised when a value outside of a function's documented domain is passed to it.

    For example:
    - asking whether a scalar or union type has an identity field;
    - enumerating the concrete types of a type that is not abstract;
    - passing a list or non-null wrapper where a named type is required.

    These are programming errors in the caller, or signs of an inconsistent schema, and are not
    meant to be recovered from.
    """


class UnknownTypeError(GraphQLSchemaToolkitError):
    """Raised when a type reference in an AST names a type that is not defined in the schema."""

    type_ast_text: str

    def __init__(self, type_ast_text: str) -> None:
        """Record the printed form of the type reference that could not be resolved."""
        super().__init__('Unknown type "{}".'.format(type_ast_text))
        self.type_ast_text = type_ast_text


class DuplicateDirectiveError(GraphQLSchemaToolkitError):
    """Raised when adding directives to a schema would produce two directives with one name."""

    directive_name: str

    def __init__(self, directive_name: str) -> None:
        """Record the first directive name found to be repeated."""
        super().__init__(
            'Expected unique names for directives, but found a duplicate directive "{}".'.format(
                directive_name
            )
        )
        self.directive_name = directive_name
