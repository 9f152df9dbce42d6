# Copyright 2020-present Kensho Technologies, LLC.
import unittest

from graphql import (
    GraphQLField,
    GraphQLID,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLString,
)

from ..exceptions import InvariantViolation
from ..identity import has_id
from .test_helpers import get_schema, get_schema_without_id


class IdentityTests(unittest.TestCase):
    def setUp(self) -> None:
        """Initialize the test schema once for all tests."""
        self.schema = get_schema()

    def test_has_id(self) -> None:
        cases = [
            ("Animal", True),  # id: ID!
            ("Species", True),  # id: ID
            ("Entity", True),
            ("Unimplemented", True),
            ("Named", False),  # no id field
            ("Location", False),  # id: String
            ("Event", False),  # uuid: ID
            ("Tag", False),  # ids: [ID!]!
            ("RootSchemaQuery", False),
        ]
        for type_name, expected in cases:
            graphql_type = self.schema.get_type(type_name)
            self.assertEqual(expected, has_id(self.schema, graphql_type), type_name)
            self.assertEqual(
                expected, has_id(self.schema, GraphQLList(GraphQLNonNull(graphql_type))), type_name
            )

    def test_has_id_on_type_without_fields(self) -> None:
        for type_name in ("Decimal", "Color", "AnimalFilter", "Union__Animal__Species"):
            with self.assertRaises(InvariantViolation):
                has_id(self.schema, self.schema.get_type(type_name))

        with self.assertRaises(InvariantViolation):
            has_id(self.schema, GraphQLID)

    def test_has_id_without_id_type_in_schema(self) -> None:
        schema = get_schema_without_id()
        self.assertIsNone(schema.get_type("ID"))
        self.assertFalse(has_id(schema, schema.get_type("Animal")))

    def test_has_id_compares_type_identity(self) -> None:
        # A scalar named ID that is not the schema's ID type does not make an identity field.
        # The graphql library reserves the name ID, so the impostor is renamed after the fact.
        impostor_id_type = GraphQLScalarType("ImpostorID")
        impostor_id_type.name = "ID"
        impostor_type = GraphQLObjectType(
            "Impostor", fields={"id": GraphQLField(impostor_id_type)}
        )
        self.assertFalse(has_id(self.schema, impostor_type))

        identified_type = GraphQLObjectType("Identified", fields={"id": GraphQLField(GraphQLID)})
        self.assertTrue(has_id(self.schema, identified_type))

    def test_has_id_with_empty_fields(self) -> None:
        query_type = GraphQLObjectType("Query", fields={"name": GraphQLField(GraphQLString)})
        empty_type = GraphQLObjectType("Empty", fields={})
        schema = GraphQLSchema(query=query_type, types=[empty_type, GraphQLID])
        self.assertFalse(has_id(schema, empty_type))
