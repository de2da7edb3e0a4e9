"""GraphQL schema, resolvers and mock data for the Metaverse Realty API."""
