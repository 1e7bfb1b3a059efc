"""Parser for GraphQL queries and schema definition language documents."""

__version__ = "0.1.0"

__all__ = ["ast", "common", "errors", "lexer", "query", "schema", "sdl"]