"""Compilation unit aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind

if TYPE_CHECKING:
    from calicheck.domain.model.enums import Layer
    from calicheck.domain.model.type_declaration import TypeDeclaration


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """One source file as produced by the front-end.

    Attributes:
        path: Source file path (identity)
        layer: Detected architectural layer, None if the front-end left it out
        types: Ordered type declarations
    """

    path: Path
    layer: Layer | None
    types: tuple[TypeDeclaration, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not str(self.path) or str(self.path) == ".":
            raise ValueError("path must not be empty")

        names = [t.qualified_name for t in self.types]
        if len(names) != len(set(names)):
            raise ValueError(f"type names in '{self.path}' must be unique")

    @property
    def element_kind(self) -> ElementKind:
        return ElementKind.UNIT

    def missing_attributes(self) -> tuple[str, ...]:
        return ("layer",) if self.layer is None else ()
