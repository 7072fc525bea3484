"""Domain enumerations."""

from enum import Enum, auto


class Layer(Enum):
    """Architectural layer of a compilation unit or referenced type."""

    DOMAIN = "Domain"
    APPLICATION = "Application"
    INFRASTRUCTURE = "Infrastructure"
    UNCLASSIFIED = "Unclassified"


class TypeKind(Enum):
    """Kind of type declaration."""

    CLASS = auto()
    RECORD = auto()
    INTERFACE = auto()
    ENUM = auto()


class Mutability(Enum):
    """Field mutability."""

    FINAL = auto()
    MUTABLE = auto()


class Visibility(Enum):
    """Member visibility as reported by the front-end."""

    PUBLIC = auto()
    PROTECTED = auto()
    PACKAGE = auto()
    PRIVATE = auto()


class StatementKind(Enum):
    """Discriminator of the statement union."""

    BLOCK = auto()
    IF = auto()
    ELSE = auto()
    LOOP = auto()
    RETURN = auto()
    EXPRESSION = auto()
    METHOD_CALL = auto()
    ASSIGNMENT = auto()
    TRY = auto()


class ElementKind(Enum):
    """Kind of structural model element visited by the evaluator."""

    UNIT = auto()
    TYPE = auto()
    FIELD = auto()
    PARAMETER = auto()
    METHOD = auto()
    STATEMENT = auto()


class Severity(Enum):
    """Finding severity."""

    ERROR = "Error"  # fails the run
    WARNING = "Warning"  # reported, run passes
    INFO = "Info"  # informational / diagnostics

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Parse severity from its name or value, case-insensitive.

        Raises:
            ValueError: If value names no severity
        """
        normalized = value.strip().lower()
        for member in cls:
            if normalized in (member.name.lower(), member.value.lower()):
                return member
        raise ValueError(f"unknown severity: {value!r}")


class RuleCategory(Enum):
    """Rule category.

    - CALISTHENICS: micro-style constraints on methods and fields
    - NAMING: identifier shape
    - SIZE: class/method/interface size ceilings
    - LAYERING: dependency direction between layers
    - SOLID: structural proxies for SOLID principles
    - DIAGNOSTIC: engine-produced findings (incomplete data, rule faults)
    """

    CALISTHENICS = auto()
    NAMING = auto()
    SIZE = auto()
    LAYERING = auto()
    SOLID = auto()
    DIAGNOSTIC = auto()


class TypeTag(Enum):
    """Front-end classification tags on types and type references."""

    BUILDER = "builder"
    DTO = "dto"
    CONFIGURATION = "configuration"
    INFRASTRUCTURE_UTILITY = "infrastructure-utility"
