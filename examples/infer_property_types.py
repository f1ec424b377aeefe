"""
Example: choosing GraphQL types for rows of Neo4j schema information.

The rows below are what ``CALL db.schema.nodeTypeProperties()`` returns for a
small movie graph where ``born`` was written as both Long and Integer.
"""

from graphtypes import choose_graphql_type, labels_to_graphql_type

rows = [
    {"nodeLabels": ["Person"], "propertyName": "name", "propertyTypes": ["String"], "mandatory": True},
    {"nodeLabels": ["Person"], "propertyName": "born", "propertyTypes": ["Long", "Integer"], "mandatory": False},
    {"nodeLabels": ["Movie"], "propertyName": "rating", "propertyTypes": ["Integer", "Float"], "mandatory": False},
    {"nodeLabels": ["Movie"], "propertyName": "genres", "propertyTypes": ["StringArray"], "mandatory": True},
]

for row in rows:
    type_name = labels_to_graphql_type(row["nodeLabels"])
    print(f"{type_name}.{row['propertyName']}: {choose_graphql_type(row)}")

# Person.name: String!
# Person.born: Int
# Movie.rating: Float
# Movie.genres: [String]!
