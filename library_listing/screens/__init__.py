# This package holds the concrete listing screens of the library console.
# It exists so per-entity filter encoders and sort mappings live next to each other.
# The generic query engine stays unaware of books, authors, or users.

__all__ = ["filters", "screen_config", "catalog"]
