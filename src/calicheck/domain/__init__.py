"""calicheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, re, types, collections.abc
"""

from calicheck.domain.exceptions import (
    CalicheckError,
    DuplicateRuleError,
    EvaluationTimeout,
    InvalidRuleOptionError,
    RuleConfigurationError,
    UnknownRuleError,
    UnknownRuleOptionError,
)
from calicheck.domain.model import (
    CompilationUnit,
    ElementKind,
    FieldDeclaration,
    Finding,
    FindingLocation,
    Layer,
    MethodDeclaration,
    Mutability,
    Parameter,
    Report,
    RuleCategory,
    RuleConfig,
    RuleContext,
    RuleDefinition,
    RunSettings,
    Severity,
    Statement,
    StatementKind,
    TypeDeclaration,
    TypeKind,
    TypeReference,
    TypeTag,
    Visibility,
)
from calicheck.domain.ports import FormatterProtocol

__all__ = [
    # Exceptions
    "CalicheckError",
    "RuleConfigurationError",
    "DuplicateRuleError",
    "UnknownRuleError",
    "UnknownRuleOptionError",
    "InvalidRuleOptionError",
    "EvaluationTimeout",
    # Enums
    "ElementKind",
    "Layer",
    "Mutability",
    "RuleCategory",
    "Severity",
    "StatementKind",
    "TypeKind",
    "TypeTag",
    "Visibility",
    # Model
    "TypeReference",
    "Parameter",
    "Statement",
    "FieldDeclaration",
    "MethodDeclaration",
    "TypeDeclaration",
    "CompilationUnit",
    # Rules
    "RuleConfig",
    "RuleContext",
    "RuleDefinition",
    "RunSettings",
    # Results
    "Finding",
    "FindingLocation",
    "Report",
    # Ports
    "FormatterProtocol",
]
