"""
Tree-sitter based C# parser for class documentation.

Uses tree-sitter-c-sharp to parse generator source files and extract declared
types with their XML doc comments and public members.
"""

import logging
import re
import threading
from pathlib import Path
from typing import Iterator

import tree_sitter_c_sharp as ts_csharp
from tree_sitter import Language, Parser, Node

from ..data.files import read_text
from .types import (
    ClassDescriptor,
    DocComment,
    FieldDoc,
    MethodDoc,
    TypeKind,
    INHERITED_DOC,
)

logger = logging.getLogger(__name__)

TYPE_DECLARATIONS: dict[str, TypeKind] = {
    "class_declaration": TypeKind.CLASS,
    "struct_declaration": TypeKind.STRUCT,
    "interface_declaration": TypeKind.INTERFACE,
    "record_declaration": TypeKind.RECORD,
}

NAMESPACE_DECLARATIONS = ("namespace_declaration", "file_scoped_namespace_declaration")

_SUMMARY_RE = re.compile(r"<summary>\s*(.*?)\s*</summary>", re.DOTALL)
_REMARKS_RE = re.compile(r"<remarks>\s*(.*?)\s*</remarks>", re.DOTALL)
_INHERITDOC_RE = re.compile(r"<inheritdoc\b")
# <see cref="X"/>, <paramref name="x"/> and friends render as their target
_REFERENCE_RE = re.compile(r'<(?:see|seealso|paramref|typeparamref)\s+\w+\s*=\s*"([^"]*)"\s*/>')


def _text(node: Node | None) -> str:
    if node is None or not node.text:
        return ""
    return node.text.decode("utf-8")


def _squash(text: str) -> str:
    """Collapse a multi-line signature fragment onto one line."""
    text = re.sub(r"\s+", " ", text)
    return re.sub(r"\(\s", "(", re.sub(r"\s\)", ")", text)).strip()


def strip_comment_markers(comment: str) -> list[str]:
    """Remove //, /// and /* */ markers from one comment node's text."""
    comment = comment.strip()
    if comment.startswith("/*"):
        body = comment[3:] if comment.startswith("/**") else comment[2:]
        if body.endswith("*/"):
            body = body[:-2]
        return [re.sub(r"^\s*\*?\s?", "", line) for line in body.splitlines()]
    return [re.sub(r"^\s*///?\s?", "", line) for line in comment.splitlines()]


def _clean_block(text: str) -> str:
    text = _REFERENCE_RE.sub(r"\1", text)
    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


def parse_doc_comment(doc_text: str) -> DocComment:
    """Parse marker-stripped doc comment text.

    Args:
        doc_text: Concatenated comment lines without comment markers

    Returns:
        DocComment with summary, remarks and the inheritdoc flag
    """
    summary = _SUMMARY_RE.search(doc_text)
    remarks = _REMARKS_RE.search(doc_text)
    return DocComment(
        summary=_clean_block(summary.group(1)) if summary else "",
        remarks=_clean_block(remarks.group(1)) if remarks else "",
        inheritdoc=bool(_INHERITDOC_RE.search(doc_text)),
    )


class CSharpParser:
    """Parse C# source files using tree-sitter."""

    def __init__(self):
        """Initialize the parser with the C# language."""
        self.parser = Parser(Language(ts_csharp.language()))
        # One tree-sitter parser is shared by worker threads; it parses one file at a time
        self._parse_lock = threading.Lock()

    def parse_file(self, path: Path, display_path: str | None = None) -> list[ClassDescriptor]:
        """Parse a C# source file and extract declared types.

        Failures are confined to this file: they are logged and yield [].

        Args:
            path: Path to the .cs file
            display_path: Path recorded on each descriptor (defaults to path)

        Returns:
            ClassDescriptors in declaration order
        """
        content = read_text(path)
        if content is None:
            return []

        try:
            return self.parse_content(display_path or str(path), content)
        except Exception as e:
            logger.warning(f"Error parsing {path}: {e}", exc_info=True)
            return []

    def parse_content(self, path: str, content: str) -> list[ClassDescriptor]:
        """Parse C# source content and extract declared types.

        Args:
            path: File path (for reference)
            content: C# source code

        Returns:
            ClassDescriptors in declaration order
        """
        with self._parse_lock:
            tree = self.parser.parse(content.encode("utf-8"))
        root = tree.root_node
        file_namespace = self._file_scoped_namespace(root)

        classes: list[ClassDescriptor] = []
        for node in self._walk_types(root):
            descriptor = self._parse_type(node, path, file_namespace)
            if descriptor:
                classes.append(descriptor)
        return classes

    def _walk_types(self, node: Node) -> Iterator[Node]:
        """Yield type declarations in source order, nested ones included."""
        for child in node.children:
            if child.type in TYPE_DECLARATIONS:
                yield child
            # Method bodies never declare types worth documenting
            if child.type not in ("block", "arrow_expression_clause"):
                yield from self._walk_types(child)

    def _find_child_by_type(self, node: Node, type_name: str) -> Node | None:
        """Find first child with given type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def _modifiers(self, node: Node) -> set[str]:
        return {_text(child) for child in node.children if child.type == "modifier"}

    def _is_public(self, member: Node, owner_kind: TypeKind) -> bool:
        modifiers = self._modifiers(member)
        if "public" in modifiers:
            return True
        # Interface members are public unless they say otherwise
        return owner_kind == TypeKind.INTERFACE and not modifiers & {"private", "protected", "internal"}

    def _file_scoped_namespace(self, root: Node) -> str:
        for child in root.children:
            if child.type == "file_scoped_namespace_declaration":
                return _text(child.child_by_field_name("name"))
        return ""

    def _get_namespace(self, node: Node, file_namespace: str) -> str:
        """Join the names of all enclosing namespaces."""
        parts: list[str] = []
        parent = node.parent
        while parent is not None:
            if parent.type in NAMESPACE_DECLARATIONS:
                parts.insert(0, _text(parent.child_by_field_name("name")))
            parent = parent.parent
        if not parts and file_namespace:
            return file_namespace
        return ".".join(p for p in parts if p)

    def _get_doc_comment(self, node: Node) -> DocComment:
        """Parse the run of comment nodes directly preceding a declaration.

        Doc lines are siblings of the declaration, not children of it.
        """
        comments: list[str] = []
        prev = node.prev_sibling
        while prev is not None and prev.type == "comment":
            comments.insert(0, _text(prev))
            prev = prev.prev_sibling

        lines: list[str] = []
        for comment in comments:
            lines.extend(strip_comment_markers(comment))
        return parse_doc_comment("\n".join(lines))

    def _get_base_type(self, node: Node) -> str | None:
        base_list = self._find_child_by_type(node, "base_list")
        if base_list is None:
            return None
        for child in base_list.children:
            if child.type not in (":", ","):
                return _text(child).strip() or None
        return None

    def _parse_type(self, node: Node, path: str, file_namespace: str) -> ClassDescriptor | None:
        """Parse a type declaration.

        Args:
            node: class/struct/interface/record declaration node
            path: File path recorded on the descriptor
            file_namespace: File-scoped namespace, if any

        Returns:
            ClassDescriptor or None
        """
        name = _text(node.child_by_field_name("name"))
        if not name:
            return None

        kind = TYPE_DECLARATIONS[node.type]
        doc = self._get_doc_comment(node)
        descriptor = ClassDescriptor(
            name=name,
            kind=kind,
            namespace=self._get_namespace(node, file_namespace),
            file_path=path,
            line=node.start_point[0] + 1,
            base_type=self._get_base_type(node),
            is_partial="partial" in self._modifiers(node),
            summary=doc.summary,
            remarks=doc.remarks,
            inheritdoc=doc.inheritdoc,
        )

        body = node.child_by_field_name("body") or self._find_child_by_type(node, "declaration_list")
        if body is None:
            return descriptor

        for member in body.children:
            if member.type not in ("field_declaration", "property_declaration", "method_declaration"):
                continue
            if not self._is_public(member, kind):
                continue

            if member.type == "field_declaration":
                descriptor.fields.extend(self._parse_field(member))
            elif member.type == "property_declaration":
                prop = self._parse_property(member)
                if prop:
                    descriptor.fields.append(prop)
            else:
                method = self._parse_method(member)
                if method:
                    descriptor.methods.append(method)

        return descriptor

    def _parse_field(self, node: Node) -> list[FieldDoc]:
        """Parse a field declaration, one FieldDoc per declarator."""
        summary = self._get_doc_comment(node).summary
        var_decl = self._find_child_by_type(node, "variable_declaration")
        if var_decl is None:
            return []

        field_type = _text(var_decl.child_by_field_name("type"))
        if not field_type:
            for child in var_decl.children:
                if child.type not in ("variable_declarator", ",", ";"):
                    field_type = _text(child)
                    break
        field_type = field_type or "unknown"

        fields: list[FieldDoc] = []
        for declarator in var_decl.children:
            if declarator.type != "variable_declarator":
                continue
            name = _text(declarator.child_by_field_name("name")) or _text(declarator).split("=")[0].strip()
            fields.append(FieldDoc(name=name, type=field_type, summary=summary))
        return fields

    def _parse_property(self, node: Node) -> FieldDoc | None:
        name = _text(node.child_by_field_name("name"))
        if not name:
            return None
        return FieldDoc(
            name=name,
            type=_text(node.child_by_field_name("type")) or "unknown",
            summary=self._get_doc_comment(node).summary,
            is_property=True,
        )

    def _parse_method(self, node: Node) -> MethodDoc | None:
        """Parse a method declaration into a rendered signature.

        Args:
            node: method_declaration node

        Returns:
            MethodDoc or None
        """
        name = _text(node.child_by_field_name("name"))
        if not name:
            return None

        # The return type field is "returns" in current grammars, "type" in older ones
        return_type = _text(node.child_by_field_name("returns")) or _text(node.child_by_field_name("type")) or "void"
        type_params = _text(node.child_by_field_name("type_parameters"))
        params = _text(node.child_by_field_name("parameters")) or "()"

        doc = self._get_doc_comment(node)
        return MethodDoc(
            name=name,
            signature=_squash(f"{return_type} {name}{type_params}{params}"),
            summary=INHERITED_DOC if doc.inheritdoc else doc.summary,
        )
