"""Struct extraction and method collection.

Two independent collectors feed the package walker:

    extract_struct(type_spec)   -> Struct | None
    collect_method(declaration) -> (receiver base name, Method) | None

Methods are bound to structs afterwards by ``bind_methods`` because a
struct's methods may live in another file of the same package.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..model import Method, Struct
from .render import (
    ExtractionContext,
    named_children,
    node_text,
    render_parameters,
    render_results,
    struct_fields,
)

CollectedMethod = tuple[str, Method]


def extract_struct(node: Any, ctx: ExtractionContext) -> Optional[Struct]:
    """Build a Struct from a ``type_spec`` node.

    Returns None for anything that is not a struct definition: aliases,
    interfaces, named scalars, function types. Type parameters of a generic
    struct are dropped.
    """
    if node.type != "type_spec":
        return None

    type_node = node.child_by_field_name("type")
    if type_node is None or type_node.type != "struct_type":
        return None

    field_list = next(c for c in type_node.named_children if c.type == "field_declaration_list")
    return Struct(
        name=node_text(node.child_by_field_name("name")),
        fields=struct_fields(field_list, ctx),
    )


def _unparenthesize(node: Any) -> Any:
    while node.type == "parenthesized_type":
        node = named_children(node)[0]
    return node


def receiver_base_name(node: Any, ctx: ExtractionContext) -> str:
    """Name of the type a receiver refers to.

    ``T``, ``*T``, ``T[K]``, ``*T[K]``, ``(T)`` and ``*(T)`` all give ``T``.
    """
    node = _unparenthesize(node)
    if node.type == "pointer_type":
        node = _unparenthesize(named_children(node)[0])
    if node.type == "generic_type":
        node = node.child_by_field_name("type")
    if node.type != "type_identifier":
        raise ctx.unsupported(node)
    return node_text(node)


def method_signature(node: Any, ctx: ExtractionContext) -> str:
    """Render ``name(paramTypes) resultTypes`` for a function or method node.

    A method without results renders without the trailing separator, e.g.
    ``StopEngine()`` rather than ``StopEngine() ``.
    """
    name = node_text(node.child_by_field_name("name"))
    params = ", ".join(render_parameters(node.child_by_field_name("parameters"), ctx))
    results = ", ".join(render_results(node.child_by_field_name("result"), ctx))
    return f"{name}({params}) {results}".rstrip()


def collect_method(node: Any, ctx: ExtractionContext) -> Optional[CollectedMethod]:
    """Collect a method declaration; free functions are skipped."""
    if node.type != "method_declaration":
        return None

    receiver = named_children(node.child_by_field_name("receiver"))
    if not receiver:
        return None

    base = receiver_base_name(receiver[0].child_by_field_name("type"), ctx)
    return base, Method(signature=method_signature(node, ctx))


def bind_methods(
    structs: Iterable[Struct], methods: Iterable[CollectedMethod]
) -> list[CollectedMethod]:
    """Attach each collected method to the struct named by its receiver.

    Both collections must be complete for one package before this runs.
    Methods are appended in collection order.

    Returns:
        Methods whose receiver type is not a struct of this package
    """
    by_name: dict[str, Struct] = {}
    for s in structs:
        by_name.setdefault(s.name, s)

    unbound: list[CollectedMethod] = []
    for receiver, method in methods:
        target = by_name.get(receiver)
        if target is None:
            unbound.append((receiver, method))
            continue
        target.methods.append(method)
    return unbound
