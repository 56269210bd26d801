# This package holds the query composition and tri-state sort engine shared by every listing screen.
# It exists so filter, pagination, and sort fragments are combined by one module instead of per screen.
# The modules are pure functions over immutable values and carry no UI or transport concerns.

__all__ = ["params", "sorting", "pagination", "controller"]
