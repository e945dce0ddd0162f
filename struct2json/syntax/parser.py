"""Tree-sitter backed Go parser producing :mod:`struct2json.syntax.nodes` units."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..errors import SourceParseError
from ..logging import get_logger
from .literals import unquote
from .nodes import (
    ArrayType,
    Declaration,
    FieldSpec,
    FuncDecl,
    FunctionType,
    GenDecl,
    InterfaceType,
    MapType,
    Method,
    NamedType,
    Parameter,
    PointerType,
    QualifiedType,
    SourceUnit,
    Spec,
    StructType,
    TypeExpression,
    TypeSpec,
    UnrecognizedType,
    ValueSpec,
)

GO_LANGUAGE = Language(tree_sitter_go.language())

_GEN_DECL_KEYWORDS = {
    "type_declaration": "type",
    "import_declaration": "import",
    "var_declaration": "var",
    "const_declaration": "const",
}

_VALUE_SPECS = {"import_spec", "var_spec", "const_spec"}
_VALUE_SPEC_LISTS = {"import_spec_list", "var_spec_list", "const_spec_list"}
_METHOD_ELEMS = {"method_elem", "method_spec"}
_CONSTRAINT_ELEMS = {"type_elem", "constraint_elem", "interface_type_name", "struct_elem"}


class GoSourceParser:
    """Parses Go source text into an immutable :class:`SourceUnit`.

    Instances wrap a tree-sitter parser and are not meant to be shared
    between threads.
    """

    def __init__(self) -> None:
        self._parser = Parser(GO_LANGUAGE)
        self.logger = get_logger("parser")

    def parse_file(self, path: Union[str, Path]) -> SourceUnit:
        """Read and parse one ``.go`` file."""
        file_path = Path(path)
        try:
            source = file_path.read_bytes()
        except OSError as exc:
            raise SourceParseError(path, exc) from exc
        return self.parse(source, name=str(path))

    def parse(self, source: Union[str, bytes], *, name: str = "<source>") -> SourceUnit:
        """Parse Go source; raises :class:`SourceParseError` on syntax errors."""
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._parser.parse(source_bytes)
        root = tree.root_node
        if root.has_error:
            error_node = _first_error(root)
            row, column = error_node.start_point
            if error_node.is_missing:
                cause = f"missing {error_node.type!r}"
            else:
                snippet = _text(error_node, source_bytes).strip().splitlines()
                cause = f"syntax error near {snippet[0]!r}" if snippet else "syntax error"
            raise SourceParseError(name, cause, line=row + 1, column=column + 1)

        builder = _UnitBuilder(source_bytes)
        package = builder.package(root)
        if package is None:
            raise SourceParseError(name, "expected 'package' clause", line=1, column=1)

        decls = builder.declarations(root)
        self.logger.debug("Parsed %s: package %s, %d declarations", name, package, len(decls))
        return SourceUnit(name=name, package=package, decls=tuple(decls))


def parse_file(path: Union[str, Path]) -> SourceUnit:
    """Parse a Go file with a fresh parser."""
    return GoSourceParser().parse_file(path)


def parse_source(source: Union[str, bytes], *, name: str = "<source>") -> SourceUnit:
    """Parse Go source text with a fresh parser."""
    return GoSourceParser().parse(source, name=name)


class _UnitBuilder:
    """Converts tree-sitter nodes of one file into declaration and type nodes."""

    def __init__(self, source_bytes: bytes) -> None:
        self._source = source_bytes

    def text(self, node: Node) -> str:
        return _text(node, self._source)

    def package(self, root: Node) -> Optional[str]:
        for child in root.named_children:
            if child.type != "package_clause":
                continue
            for ident in child.named_children:
                if ident.type == "package_identifier":
                    return self.text(ident)
        return None

    def declarations(self, root: Node) -> List[Declaration]:
        decls: List[Declaration] = []
        for node in root.named_children:
            keyword = _GEN_DECL_KEYWORDS.get(node.type)
            if keyword == "type":
                decls.append(GenDecl(keyword=keyword, specs=tuple(self._type_specs(node))))
            elif keyword is not None:
                decls.append(GenDecl(keyword=keyword, specs=tuple(self._value_specs(node))))
            elif node.type == "function_declaration":
                decls.append(FuncDecl(name=self._field_text(node, "name")))
            elif node.type == "method_declaration":
                receiver = node.child_by_field_name("receiver")
                decls.append(
                    FuncDecl(
                        name=self._field_text(node, "name"),
                        receiver=self.text(receiver) if receiver is not None else None,
                    )
                )
        return decls

    def _type_specs(self, decl: Node) -> List[Spec]:
        specs: List[Spec] = []
        for child in decl.named_children:
            if child.type not in {"type_spec", "type_alias"}:
                continue
            type_node = child.child_by_field_name("type")
            specs.append(
                TypeSpec(
                    name=self._field_text(child, "name"),
                    type=self.type_expression(type_node),
                    alias=child.type == "type_alias",
                )
            )
        return specs

    def _value_specs(self, decl: Node) -> List[Spec]:
        specs: List[Spec] = []
        for child in decl.named_children:
            if child.type in _VALUE_SPECS:
                specs.append(ValueSpec(text=self.text(child)))
            elif child.type in _VALUE_SPEC_LISTS:
                specs.extend(self._value_specs(child))
        return specs

    def type_expression(self, node: Optional[Node]) -> TypeExpression:
        if node is None:
            return UnrecognizedType(shape="Missing")
        kind = node.type
        if kind in {"type_identifier", "identifier"}:
            return NamedType(self.text(node))
        if kind == "qualified_type":
            return QualifiedType(
                base=NamedType(self._field_text(node, "package")),
                selector=self._field_text(node, "name"),
            )
        if kind == "pointer_type":
            return PointerType(self.type_expression(_first_named(node)))
        if kind == "slice_type":
            return ArrayType(self.type_expression(node.child_by_field_name("element")))
        if kind == "array_type":
            length = node.child_by_field_name("length")
            return ArrayType(
                self.type_expression(node.child_by_field_name("element")),
                length=self.text(length) if length is not None else None,
            )
        if kind == "implicit_length_array_type":
            return ArrayType(
                self.type_expression(node.child_by_field_name("element")), length="..."
            )
        if kind == "map_type":
            return MapType(
                key=self.type_expression(node.child_by_field_name("key")),
                value=self.type_expression(node.child_by_field_name("value")),
            )
        if kind == "struct_type":
            return StructType(fields=tuple(self._fields(node)))
        if kind == "interface_type":
            return self._interface(node)
        if kind == "function_type":
            return self._signature(node)
        if kind == "parenthesized_type":
            return self.type_expression(_first_named(node))
        return UnrecognizedType(shape=_shape_name(kind), text=self.text(node))

    def _fields(self, struct_node: Node) -> List[FieldSpec]:
        fields: List[FieldSpec] = []
        for body in struct_node.named_children:
            if body.type != "field_declaration_list":
                continue
            for decl in body.named_children:
                if decl.type == "field_declaration":
                    fields.append(self._field(decl))
        return fields

    def _field(self, decl: Node) -> FieldSpec:
        names = tuple(self.text(name) for name in decl.children_by_field_name("name"))
        type_expr = self.type_expression(decl.child_by_field_name("type"))
        # Embedded pointers carry the star as a bare token beside the type.
        if not names and any(not child.is_named and child.type == "*" for child in decl.children):
            type_expr = PointerType(type_expr)
        tag_node = decl.child_by_field_name("tag")
        tag = self._tag(tag_node) if tag_node is not None else None
        return FieldSpec(names=names, type=type_expr, tag=tag)

    def _tag(self, node: Node) -> str:
        literal = self.text(node)
        try:
            return unquote(literal)
        except ValueError:
            return literal[1:-1]

    def _interface(self, node: Node) -> InterfaceType:
        methods: List[Method] = []
        embedded: List[TypeExpression] = []
        for child in node.named_children:
            if child.type == "comment":
                continue
            if child.type in _METHOD_ELEMS:
                methods.append(
                    Method(name=self._field_text(child, "name"), signature=self._signature(child))
                )
            elif child.type in _CONSTRAINT_ELEMS:
                terms = [term for term in child.named_children if term.type != "comment"]
                if len(terms) == 1:
                    embedded.append(self.type_expression(terms[0]))
                else:
                    embedded.append(
                        UnrecognizedType(shape=_shape_name(child.type), text=self.text(child))
                    )
            else:
                embedded.append(self.type_expression(child))
        return InterfaceType(methods=tuple(methods), embedded=tuple(embedded))

    def _signature(self, node: Node) -> FunctionType:
        params = self._parameters(node.child_by_field_name("parameters"))
        result = node.child_by_field_name("result")
        if result is None:
            results: Tuple[Parameter, ...] = ()
        elif result.type == "parameter_list":
            results = self._parameters(result)
        else:
            results = (Parameter(names=(), type=self.type_expression(result)),)
        return FunctionType(params=params, results=results)

    def _parameters(self, node: Optional[Node]) -> Tuple[Parameter, ...]:
        if node is None:
            return ()
        params: List[Parameter] = []
        for child in node.named_children:
            if child.type not in {"parameter_declaration", "variadic_parameter_declaration"}:
                continue
            params.append(
                Parameter(
                    names=tuple(self.text(name) for name in child.children_by_field_name("name")),
                    type=self.type_expression(child.child_by_field_name("type")),
                    variadic=child.type == "variadic_parameter_declaration",
                )
            )
        return tuple(params)

    def _field_text(self, node: Node, field_name: str) -> str:
        child = node.child_by_field_name(field_name)
        return self.text(child) if child is not None else ""


def _text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _shape_name(kind: str) -> str:
    """Turn a grammar node kind such as ``channel_type`` into ``ChannelType``."""
    return "".join(part.capitalize() for part in kind.split("_"))


def _first_named(node: Node) -> Optional[Node]:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def _first_error(node: Node) -> Node:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            return _first_error(child)
    return node


__all__ = ["GO_LANGUAGE", "GoSourceParser", "parse_file", "parse_source"]
