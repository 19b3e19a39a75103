"""Path filters for statistics."""

from codelingo.filters.exclusion import ExclusionFilter

__all__ = ["ExclusionFilter"]
