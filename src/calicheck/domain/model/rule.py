"""Rule definition, configuration and check context.

Rules are data: an applicability predicate, a check function and a
configuration record. No per-rule subclassing.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

from calicheck.domain.model.enums import ElementKind, RuleCategory, Severity
from calicheck.domain.model.finding import Finding
from calicheck.domain.model.location import FindingLocation

if TYPE_CHECKING:
    from calicheck.domain.model.compilation_unit import CompilationUnit
    from calicheck.domain.model.enums import Layer
    from calicheck.domain.model.field import FieldDeclaration
    from calicheck.domain.model.method import MethodDeclaration
    from calicheck.domain.model.parameter import Parameter
    from calicheck.domain.model.statement import Statement
    from calicheck.domain.model.type_declaration import TypeDeclaration

    ModelElement = (
        CompilationUnit
        | TypeDeclaration
        | FieldDeclaration
        | Parameter
        | MethodDeclaration
        | Statement
    )

ElementPredicate = Callable[["ModelElement"], bool]
RuleCheck = Callable[["ModelElement", "RuleContext"], Iterable[Finding]]

_RULE_ID_PATTERN = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")

# Option keys every rule accepts
COMMON_OPTIONS: frozenset[str] = frozenset({"enabled", "severity"})
PROFILE_OPTION = "profile"


def _frozen(mapping: Mapping[str, int]) -> Mapping[str, int]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class RuleConfig:
    """Active configuration of one rule.

    Attributes:
        enabled: Rule runs when True
        severity: Severity of the rule's findings
        thresholds: Numeric thresholds by option name
        profile: Named threshold profile, if the rule has profiles
    """

    enabled: bool = True
    severity: Severity = Severity.WARNING
    thresholds: Mapping[str, int] = field(default_factory=dict, hash=False)
    profile: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name, value in self.thresholds.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"threshold '{name}' must be int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"threshold '{name}' must be >= 0, got {value}")
        object.__setattr__(self, "thresholds", _frozen(self.thresholds))

    def threshold(self, name: str) -> int:
        """Get threshold by option name.

        Raises:
            KeyError: If the rule has no such threshold
        """
        return self.thresholds[name]

    def with_changes(
        self,
        *,
        enabled: bool | None = None,
        severity: Severity | None = None,
        thresholds: Mapping[str, int] | None = None,
        profile: str | None = None,
    ) -> Self:
        """Return a copy with the given fields changed; thresholds are merged."""
        merged = dict(self.thresholds)
        if thresholds:
            merged.update(thresholds)
        return replace(
            self,
            enabled=self.enabled if enabled is None else enabled,
            severity=self.severity if severity is None else severity,
            thresholds=merged,
            profile=self.profile if profile is None else profile,
        )


@dataclass(frozen=True, slots=True)
class RuleDefinition:
    """Named rule record.

    Attributes:
        rule_id: Kebab-case identifier (e.g. max-indentation-depth)
        description: One-line description
        category: Rule category
        applies_to: Applicability predicate over model elements
        check: Check function producing findings
        defaults: Configuration before any user options
        profiles: Named threshold presets (profile name -> thresholds)
    """

    rule_id: str
    description: str
    category: RuleCategory
    applies_to: ElementPredicate
    check: RuleCheck
    defaults: RuleConfig = field(default_factory=RuleConfig)
    profiles: Mapping[str, Mapping[str, int]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not _RULE_ID_PATTERN.match(self.rule_id):
            raise ValueError(f"rule_id must be kebab-case, got {self.rule_id!r}")
        if not callable(self.applies_to):
            raise TypeError(f"applies_to of '{self.rule_id}' must be callable")
        if not callable(self.check):
            raise TypeError(f"check of '{self.rule_id}' must be callable")

        for profile, values in self.profiles.items():
            unknown = set(values) - set(self.defaults.thresholds)
            if unknown:
                raise ValueError(
                    f"profile '{profile}' of '{self.rule_id}' sets unknown thresholds: "
                    f"{sorted(unknown)}"
                )
        if self.defaults.profile is not None and self.defaults.profile not in self.profiles:
            raise ValueError(
                f"default profile '{self.defaults.profile}' of '{self.rule_id}' is not defined"
            )
        object.__setattr__(
            self,
            "profiles",
            MappingProxyType({name: _frozen(values) for name, values in self.profiles.items()}),
        )

    @property
    def options(self) -> frozenset[str]:
        """Option keys this rule recognizes."""
        names = COMMON_OPTIONS | frozenset(self.defaults.thresholds)
        if self.profiles:
            names |= {PROFILE_OPTION}
        return names


@dataclass(frozen=True, slots=True)
class RuleContext:
    """Ancestor context and active configuration for one rule check.

    Attributes:
        rule_id: Rule being checked
        category: Category of that rule
        config: Active configuration at evaluation time
        unit: Owning compilation unit
        type_decl: Owning type (None for unit-level checks)
        method: Owning method (parameters and statements)
    """

    rule_id: str
    category: RuleCategory
    config: RuleConfig
    unit: CompilationUnit
    type_decl: TypeDeclaration | None = None
    method: MethodDeclaration | None = None

    @property
    def layer(self) -> Layer | None:
        """Layer of the owning compilation unit."""
        return self.unit.layer

    def location_for(self, element: ModelElement) -> FindingLocation:
        """Build the finding location of an element under this context."""
        type_name = self.type_decl.qualified_name if self.type_decl is not None else None
        match element.element_kind:
            case ElementKind.UNIT:
                return FindingLocation(path=self.unit.path)
            case ElementKind.TYPE:
                return FindingLocation(
                    path=self.unit.path, type_name=element.qualified_name, line=element.line
                )
            case ElementKind.FIELD | ElementKind.METHOD:
                return FindingLocation(
                    path=self.unit.path,
                    type_name=type_name,
                    member_name=element.name,
                    line=element.line,
                )
            case ElementKind.PARAMETER:
                return FindingLocation(
                    path=self.unit.path,
                    type_name=type_name,
                    member_name=self._method_name(),
                    line=self.method.line if self.method is not None else None,
                )
            case ElementKind.STATEMENT:
                return FindingLocation(
                    path=self.unit.path,
                    type_name=type_name,
                    member_name=self._method_name(),
                    statement_position=element.position,
                    line=element.line,
                )

    def _method_name(self) -> str:
        if self.method is None:
            raise ValueError(f"rule '{self.rule_id}' needs an owning method in context")
        return self.method.name

    def finding(self, element: ModelElement, message: str, **payload: object) -> Finding:
        """Create a finding at the element with configured severity."""
        return Finding(
            rule_id=self.rule_id,
            severity=self.config.severity,
            location=self.location_for(element),
            message=message,
            category=self.category,
            payload=payload,
        )

    def exceeds(
        self,
        element: ModelElement,
        message: str,
        *,
        measured: int,
        option: str,
        **extra: object,
    ) -> Finding | None:
        """Finding if measured > configured threshold `option`, else None.

        The payload threshold is read from the active configuration; the
        message gets ": <measured> > <threshold>" appended.
        """
        threshold = self.config.threshold(option)
        if measured <= threshold:
            return None
        return self.finding(
            element,
            f"{message}: {measured} > {threshold}",
            measured=measured,
            threshold=threshold,
            **extra,
        )
