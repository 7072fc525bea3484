"""Structural model and rule records."""

from calicheck.domain.model.compilation_unit import CompilationUnit
from calicheck.domain.model.enums import (
    ElementKind,
    Layer,
    Mutability,
    RuleCategory,
    Severity,
    StatementKind,
    TypeKind,
    TypeTag,
    Visibility,
)
from calicheck.domain.model.field import FieldDeclaration
from calicheck.domain.model.finding import Finding
from calicheck.domain.model.location import FindingLocation
from calicheck.domain.model.method import MethodDeclaration
from calicheck.domain.model.parameter import Parameter
from calicheck.domain.model.report import Report
from calicheck.domain.model.rule import RuleConfig, RuleContext, RuleDefinition
from calicheck.domain.model.settings import RunSettings
from calicheck.domain.model.statement import Statement
from calicheck.domain.model.type_declaration import TypeDeclaration
from calicheck.domain.model.type_reference import TypeReference

__all__ = [
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
    # Value objects
    "TypeReference",
    "Parameter",
    "FindingLocation",
    # Entities
    "Statement",
    "FieldDeclaration",
    "MethodDeclaration",
    "TypeDeclaration",
    "CompilationUnit",
    # Rules
    "RuleConfig",
    "RuleContext",
    "RuleDefinition",
    # Settings
    "RunSettings",
    # Results
    "Finding",
    "Report",
]
