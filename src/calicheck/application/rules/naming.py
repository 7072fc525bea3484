"""Naming rule: don't abbreviate.

Heuristic only, not a dictionary check: a name is rejected when it is
shorter than the configured minimum or contains no vowel at all
(e.g. `mgr`, `cnt`, `Svc`).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, RuleCategory
from calicheck.domain.model.rule import RuleConfig, RuleDefinition
from calicheck.domain.predicates import is_element

if TYPE_CHECKING:
    from calicheck.domain.model.field import FieldDeclaration
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.method import MethodDeclaration
    from calicheck.domain.model.rule import RuleContext
    from calicheck.domain.model.type_declaration import TypeDeclaration

VOWELS = frozenset("aeiouy")


def is_all_consonant(name: str) -> bool:
    """True if the name has letters and none of them is a vowel.

    Digits, underscores and other symbols are ignored.
    """
    letters = [ch for ch in name.lower() if ch.isalpha()]
    return bool(letters) and not any(ch in VOWELS for ch in letters)


def check_no_abbreviation(
    element: TypeDeclaration | MethodDeclaration | FieldDeclaration,
    context: RuleContext,
) -> Iterator[Finding]:
    """At most one finding per name; the length check wins over the vowel check."""
    name = element.name
    kind = {
        ElementKind.TYPE: "Type",
        ElementKind.METHOD: "Method",
        ElementKind.FIELD: "Field",
    }[element.element_kind]

    min_length = context.config.threshold("min_length")
    if len(name) < min_length:
        yield context.finding(
            element,
            f"{kind} name '{name}' is too short: {len(name)} < {min_length}",
            measured=len(name),
            threshold=min_length,
            reason="too-short",
        )
        return

    if is_all_consonant(name):
        yield context.finding(
            element,
            f"{kind} name '{name}' looks abbreviated (no vowels)",
            reason="all-consonant",
        )


NO_ABBREVIATION = RuleDefinition(
    rule_id="no-abbreviation",
    description="Don't abbreviate names",
    category=RuleCategory.NAMING,
    applies_to=is_element(ElementKind.TYPE, ElementKind.METHOD, ElementKind.FIELD),
    check=check_no_abbreviation,
    defaults=RuleConfig(thresholds={"min_length": 3}),
)
