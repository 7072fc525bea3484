"""Domain predicates."""

from calicheck.domain.predicates.element_predicates import (
    is_element,
    is_statement,
    is_type_of_kind,
)

__all__ = [
    "is_element",
    "is_statement",
    "is_type_of_kind",
]
