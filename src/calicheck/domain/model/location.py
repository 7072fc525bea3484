"""Finding location value object."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FindingLocation:
    """Where in the structural model a finding points.

    Attributes:
        path: Compilation unit path
        type_name: Qualified type name, None for unit-level findings
        member_name: Field/method (or method.parameter) name, None for type-level
        statement_position: Statement ordinal within the method body
        line: Source line if the front-end supplied one
    """

    path: Path
    type_name: str | None = None
    member_name: str | None = None
    statement_position: int | None = None
    line: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if self.member_name is not None and self.type_name is None:
            raise ValueError("member_name requires type_name")
        if self.statement_position is not None and self.member_name is None:
            raise ValueError("statement_position requires member_name")
        if self.statement_position is not None and self.statement_position < 0:
            raise ValueError(f"statement_position must be >= 0, got {self.statement_position}")

    @property
    def sort_key(self) -> tuple[str, str, str, int]:
        """Ordering key: (path, type, member, statement position).

        Missing parts sort before present ones, so unit-level findings come
        first, then type-level, then member-level.
        """
        return (
            str(self.path),
            self.type_name or "",
            self.member_name or "",
            -1 if self.statement_position is None else self.statement_position,
        )

    def __str__(self) -> str:
        """Format as path:type.member."""
        text = str(self.path)
        if self.type_name is not None:
            text += f":{self.type_name}"
        if self.member_name is not None:
            text += f".{self.member_name}"
        return text
