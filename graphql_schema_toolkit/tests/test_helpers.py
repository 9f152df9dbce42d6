# Copyright 2020-present Kensho Technologies, LLC.
"""Common test data and helper functions."""
from graphql import GraphQLSchema, build_schema


# Text representation of the GraphQL schema used in tests.
# Aims to cover every kind of named type: identity fields with and without the ID type,
# interfaces with and without implementations, unions with and without interface-implementing
# members, and types with and without fields named "id".
SCHEMA_TEXT = """
    schema {
        query: RootSchemaQuery
        mutation: RootSchemaMutation
    }

    directive @output(out_name: String!) on FIELD

    interface Entity {
        id: ID
        name: String
    }

    interface Named {
        name: String
    }

    interface Unimplemented {
        id: ID!
    }

    type Animal implements Entity & Named {
        id: ID!
        name: String
        color: Color
        net_worth: Decimal
        friends: [Animal!]
    }

    type Species implements Entity {
        id: ID
        name: String
        limbs: Int
    }

    type Location {
        id: String
        name: String
    }

    type Event {
        uuid: ID
        name: String
    }

    type Tag {
        ids: [ID!]!
    }

    enum Color {
        BLACK
        WHITE
    }

    scalar Decimal

    input AnimalFilter {
        name: String
    }

    union Union__Animal__Species = Animal | Species

    union Union__Event__Location = Event | Location

    type RootSchemaQuery {
        Animal(filter: AnimalFilter): [Animal]
        Species: [Species]
        Location: [Location]
        Event: [Event]
        Tag: [Tag]
        Entity: [Entity]
        Named: [Named]
        Unimplemented: [Unimplemented]
        AnimalOrSpecies: [Union__Animal__Species]
        EventOrLocation: [Union__Event__Location]
    }

    type RootSchemaMutation {
        renameAnimal(id: ID!, name: String!): Animal
    }
"""

# Schema without any use of the ID scalar, so the schema has no type named ID.
SCHEMA_WITHOUT_ID_TEXT = """
    type Animal {
        id: String
        name: String
    }

    type Query {
        Animal: [Animal]
    }
"""

# The scenario of a union whose only member implements the Node interface.
NODE_SCHEMA_TEXT = """
    interface Node {
        id: ID
    }

    type User implements Node {
        id: ID
        name: String
    }

    union Entity = User

    type Query {
        node: Node
        entity: Entity
    }
"""


def get_schema() -> GraphQLSchema:
    """Get a schema object for testing."""
    return build_schema(SCHEMA_TEXT)


def get_schema_without_id() -> GraphQLSchema:
    """Get a schema object with no ID type for testing."""
    return build_schema(SCHEMA_WITHOUT_ID_TEXT)
