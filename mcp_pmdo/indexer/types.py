"""
Class documentation types.

One ClassDescriptor per declared C# type, built fresh on every request.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Summary substituted for members documented with <inheritdoc/>
INHERITED_DOC = "(inherited documentation)"


class TypeKind(str, Enum):
    """Kind of declared type."""

    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    RECORD = "record"


@dataclass
class DocComment:
    """Parsed XML documentation block."""

    summary: str = ""
    remarks: str = ""
    inheritdoc: bool = False


@dataclass
class FieldDoc:
    """A public field or property."""

    name: str
    type: str
    summary: str = ""
    is_property: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"name": self.name, "type": self.type}
        if self.summary:
            result["summary"] = self.summary
        if self.is_property:
            result["is_property"] = True
        return result


@dataclass
class MethodDoc:
    """A public method."""

    name: str
    signature: str
    summary: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"name": self.name, "signature": self.signature}
        if self.summary:
            result["summary"] = self.summary
        return result


@dataclass
class ClassDescriptor:
    """Structural and documentation metadata for one declared type."""

    name: str
    kind: TypeKind
    namespace: str
    file_path: str
    line: int
    base_type: str | None = None
    is_partial: bool = False
    summary: str = ""
    remarks: str = ""
    inheritdoc: bool = False
    fields: list[FieldDoc] = field(default_factory=list)
    methods: list[MethodDoc] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "namespace": self.namespace,
            "file": self.file_path,
            "line": self.line,
            "is_partial": self.is_partial,
            "fields": [f.to_dict() for f in self.fields],
            "methods": [m.to_dict() for m in self.methods],
        }
        if self.base_type:
            result["base_type"] = self.base_type
        if self.summary:
            result["summary"] = self.summary
        if self.remarks:
            result["remarks"] = self.remarks
        if self.inheritdoc:
            result["inheritdoc"] = True
        return result

    def to_summary(self) -> dict[str, Any]:
        """Short form used when listing a category's classes."""
        result: dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "is_partial": self.is_partial,
            "method_names": [m.name for m in self.methods],
        }
        if self.base_type:
            result["base_type"] = self.base_type
        if self.summary:
            result["summary"] = self.summary
        return result
