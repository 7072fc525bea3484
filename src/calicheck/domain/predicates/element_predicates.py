"""Applicability predicates over structural model elements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind

if TYPE_CHECKING:
    from calicheck.domain.model.enums import StatementKind, TypeKind
    from calicheck.domain.model.rule import ElementPredicate, ModelElement


def is_element(*kinds: ElementKind) -> ElementPredicate:
    """Create predicate: element is one of the given kinds.

    Args:
        kinds: Accepted element kinds (at least one)

    Returns:
        Predicate function
    """
    if not kinds:
        raise ValueError("at least one element kind is required")
    accepted = frozenset(kinds)

    def predicate(element: ModelElement) -> bool:
        return element.element_kind in accepted

    return predicate


def is_statement(kind: StatementKind) -> ElementPredicate:
    """Create predicate: element is a statement of the given kind.

    Args:
        kind: Statement discriminator

    Returns:
        Predicate function
    """

    def predicate(element: ModelElement) -> bool:
        return element.element_kind is ElementKind.STATEMENT and element.kind is kind

    return predicate


def is_type_of_kind(kind: TypeKind) -> ElementPredicate:
    """Create predicate: element is a type declaration of the given kind.

    Args:
        kind: CLASS/RECORD/INTERFACE/ENUM

    Returns:
        Predicate function
    """

    def predicate(element: ModelElement) -> bool:
        return element.element_kind is ElementKind.TYPE and element.kind is kind

    return predicate
