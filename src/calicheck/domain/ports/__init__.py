"""Domain ports (extension protocols)."""

from calicheck.domain.ports.formatter import FormatterProtocol

__all__ = ["FormatterProtocol"]
