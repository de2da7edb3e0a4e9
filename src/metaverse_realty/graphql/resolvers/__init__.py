"""Resolver package for the GraphQL schema.

``user`` is the only field with explicit logic. Every other root field
delegates to ``mock.resolve_mock`` and is answered with generated data.
"""
