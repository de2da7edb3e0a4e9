"""
Metaverse Realty mock GraphQL API
Schema-driven mock data for properties, sales and users in the metaverse
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
