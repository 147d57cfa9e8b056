"""Type-expression renderer.

Turns any Go type expression node into its canonical string, the form used
both for display and as the comparison key for fields and signatures:

    []*Mechanic
    map[string]int
    func(string, int) (int64, error)
    <-chan int32
    struct{ XXX int }

Dispatch is keyed on the tree-sitter node kind. The grammar is closed, so a
kind without a renderer raises ``UnsupportedNodeError`` instead of producing
a silently wrong model. Generic instantiations and parenthesized types are
the exception: they render as a placeholder so a module using generics can
still be analyzed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..exceptions import UnsupportedNodeError
from ..model import Field

GENERIC_PLACEHOLDER = "<unsupported: generic>"
PAREN_PLACEHOLDER = "<unsupported: parenthesized>"


@dataclass(frozen=True)
class ExtractionContext:
    """Per-file context passed explicitly into every extraction call.

    Attributes:
        path: File being extracted, for diagnostics
    """

    path: str = "<memory>"

    def unsupported(self, node: Any) -> UnsupportedNodeError:
        return UnsupportedNodeError(node.type, self.path, node.start_point[0] + 1)


def node_text(node: Any) -> str:
    return node.text.decode("utf-8")


def named_children(node: Any) -> list[Any]:
    """Named children without comment nodes."""
    return [c for c in node.named_children if c.type != "comment"]


def render_type(node: Any, ctx: ExtractionContext) -> str:
    """Render a type expression node to its canonical string."""
    renderer = _RENDERERS.get(node.type)
    if renderer is None:
        raise ctx.unsupported(node)
    return renderer(node, ctx)


def render_parameters(node: Optional[Any], ctx: ExtractionContext) -> list[str]:
    """Render a ``parameter_list`` to one type string per parameter.

    ``a, b int`` declares two parameters and yields ``["int", "int"]``;
    unnamed parameters yield their type once. Names are never kept.
    """
    if node is None:
        return []

    types: list[str] = []
    for param in named_children(node):
        if param.type == "parameter_declaration":
            rendered = render_type(param.child_by_field_name("type"), ctx)
            count = len(param.children_by_field_name("name")) or 1
            types.extend([rendered] * count)
        elif param.type == "variadic_parameter_declaration":
            types.append("..." + render_type(param.child_by_field_name("type"), ctx))
        else:
            raise ctx.unsupported(param)
    return types


def render_results(node: Optional[Any], ctx: ExtractionContext) -> list[str]:
    """Render a function result, either a single type or a parameter list."""
    if node is None:
        return []
    if node.type == "parameter_list":
        return render_parameters(node, ctx)
    return [render_type(node, ctx)]


def struct_fields(node: Any, ctx: ExtractionContext) -> list[Field]:
    """Expand a ``field_declaration_list`` into fields in declaration order.

    ``One, Two string`` becomes two fields sharing one rendered type.
    Embedded fields get an empty name; a pointer embedding keeps its ``*``.
    """
    fields: list[Field] = []
    for decl in named_children(node):
        if decl.type != "field_declaration":
            raise ctx.unsupported(decl)

        rendered = render_type(decl.child_by_field_name("type"), ctx)
        names = decl.children_by_field_name("name")
        if not names:
            if any(c.type == "*" for c in decl.children):
                rendered = "*" + rendered
            fields.append(Field(name="", type=rendered))
            continue
        for name in names:
            fields.append(Field(name=node_text(name), type=rendered))
    return fields


# ── Per-kind renderers ────────────────────────────────────────


def _identifier(node: Any, ctx: ExtractionContext) -> str:
    return node_text(node)


def _element(node: Any, ctx: ExtractionContext) -> str:
    return "[]" + render_type(node.child_by_field_name("element"), ctx)


def _pointer(node: Any, ctx: ExtractionContext) -> str:
    return "*" + render_type(named_children(node)[0], ctx)


def _qualified(node: Any, ctx: ExtractionContext) -> str:
    package = render_type(node.child_by_field_name("package"), ctx)
    name = render_type(node.child_by_field_name("name"), ctx)
    return f"{package}.{name}"


def _map(node: Any, ctx: ExtractionContext) -> str:
    key = render_type(node.child_by_field_name("key"), ctx)
    value = render_type(node.child_by_field_name("value"), ctx)
    return f"map[{key}]{value}"


def _function(node: Any, ctx: ExtractionContext) -> str:
    params = ", ".join(render_parameters(node.child_by_field_name("parameters"), ctx))
    result = node.child_by_field_name("result")
    if result is None:
        return f"func({params})"
    return f"func({params}) ({', '.join(render_results(result, ctx))})"


def _interface(node: Any, ctx: ExtractionContext) -> str:
    # Inline interface members are not expanded.
    return "interface{}"


def _channel(node: Any, ctx: ExtractionContext) -> str:
    value = render_type(node.child_by_field_name("value"), ctx)
    tokens = [c.type for c in node.children if not c.is_named]
    if tokens and tokens[0] == "<-":
        return f"<-chan {value}"
    if "<-" in tokens:
        return f"chan<- {value}"
    return f"chan {value}"


def _struct(node: Any, ctx: ExtractionContext) -> str:
    field_list = next(c for c in node.named_children if c.type == "field_declaration_list")
    rendered = [
        f"{f.name} {f.type}" if f.name else f.type for f in struct_fields(field_list, ctx)
    ]
    if not rendered:
        return "struct{}"
    return f"struct{{ {', '.join(rendered)} }}"


def _negated(node: Any, ctx: ExtractionContext) -> str:
    return "~" + render_type(named_children(node)[0], ctx)


def _generic(node: Any, ctx: ExtractionContext) -> str:
    return GENERIC_PLACEHOLDER


def _parenthesized(node: Any, ctx: ExtractionContext) -> str:
    return PAREN_PLACEHOLDER


_RENDERERS: dict[str, Callable[[Any, ExtractionContext], str]] = {
    "type_identifier": _identifier,
    "identifier": _identifier,
    "field_identifier": _identifier,
    "package_identifier": _identifier,
    "slice_type": _element,
    "array_type": _element,
    "implicit_length_array_type": _element,
    "pointer_type": _pointer,
    "qualified_type": _qualified,
    "map_type": _map,
    "function_type": _function,
    "interface_type": _interface,
    "channel_type": _channel,
    "struct_type": _struct,
    "negated_type": _negated,
    "generic_type": _generic,
    "parenthesized_type": _parenthesized,
}
