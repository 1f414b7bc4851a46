"""
PMDO indexer module - class documentation using tree-sitter.

Builds one ClassDescriptor per declared C# type: name, namespace, base type,
partial flag, XML doc summary/remarks, public fields and public methods.
"""

from .types import (
    ClassDescriptor,
    DocComment,
    FieldDoc,
    MethodDoc,
    TypeKind,
    INHERITED_DOC,
)
from .parser import CSharpParser, parse_doc_comment, strip_comment_markers
from .grammar import GrammarLoader, get_parser
from .classes import find_class, find_classes_in_category

__all__ = [
    # Types
    "ClassDescriptor",
    "DocComment",
    "FieldDoc",
    "MethodDoc",
    "TypeKind",
    "INHERITED_DOC",
    # Parser
    "CSharpParser",
    "parse_doc_comment",
    "strip_comment_markers",
    # Grammar
    "GrammarLoader",
    "get_parser",
    # Lookups
    "find_class",
    "find_classes_in_category",
]
