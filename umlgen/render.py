"""Class diagram rendering.

The renderer is a pure function of a ``SymbolModel`` and a ``FilterPolicy``.
Lines are produced as ``(level, text)`` pairs with the nesting level passed
explicitly; ``render`` joins them into the final text. Emission order is
fixed (interfaces, classes, enums, then edges) so output can be diffed.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .filters import FilterPolicy
from .model import MemberSymbol, SymbolModel, TypeSymbol, Visibility

logger = logging.getLogger(__name__)


HEADER = "classDiagram"
INDENT_WIDTH = 4

Line = Tuple[int, str]


_VISIBILITY_MARKS: Dict[Visibility, str] = {
	Visibility.PUBLIC: "+",
	Visibility.PROTECTED: "#",
	Visibility.PROTECTED_AND_INTERNAL: "#",
	Visibility.PROTECTED_OR_INTERNAL: "#",
	Visibility.PRIVATE: "-",
	Visibility.INTERNAL: "~",
}


def indent(level: int) -> str:
	return " " * (level * INDENT_WIDTH)


def visibility_mark(visibility: Visibility) -> str:
	return _VISIBILITY_MARKS.get(visibility, " ")


def format_parameters(method: MemberSymbol) -> str:
	# Parameters are carried on the model but not rendered; signatures
	# always show empty parentheses.
	return ""


def _static_suffix(member: MemberSymbol) -> str:
	return "$" if member.is_static else ""


def format_property(prop: MemberSymbol) -> str:
	return f"{visibility_mark(prop.visibility)}{prop.type_name} {prop.name}{_static_suffix(prop)}"


def format_method(method: MemberSymbol) -> str:
	return (
		f"{visibility_mark(method.visibility)}{method.type_name} "
		f"{method.name}({format_parameters(method)}){_static_suffix(method)}"
	)


def visible_members(symbol: TypeSymbol) -> Tuple[List[MemberSymbol], List[MemberSymbol]]:
	"""Split a type's members into (properties, methods), skipping implicit members and accessors."""
	properties: List[MemberSymbol] = []
	methods: List[MemberSymbol] = []
	for member in symbol.members:
		if member.is_implicit or member.is_accessor:
			continue
		if member.is_property:
			properties.append(member)
		elif member.is_method:
			methods.append(member)
	return properties, methods


def _stereotype_block(level: int, name: str, stereotype: str) -> Iterator[Line]:
	yield level, f"class {name} {{"
	yield level + 1, f"<<{stereotype}>>"
	yield level, "}"


def _class_lines(level: int, symbol: TypeSymbol) -> Iterator[Line]:
	properties, methods = visible_members(symbol)
	if not properties and not methods:
		yield level, f"class {symbol.name}"
		return

	yield level, f"class {symbol.name} {{"
	for prop in properties:
		yield level + 1, format_property(prop)
	for method in methods:
		yield level + 1, format_method(method)
	yield level, "}"


def _edge_lines(level: int, symbol: TypeSymbol, policy: FilterPolicy) -> Iterator[Line]:
	for iface in symbol.implemented_interfaces:
		if policy.include_interface_edge(iface):
			yield level, f"{iface.name} <|.. {symbol.name}"
	base = symbol.base_type
	if base is not None and policy.include_base_edge(base):
		yield level, f"{base.name} <|-- {symbol.name}"


def iter_lines(model: SymbolModel, policy: FilterPolicy) -> Iterator[Line]:
	yield 0, HEADER
	level = 1
	classes = model.classes()
	for iface in model.interfaces():
		yield from _stereotype_block(level, iface.name, "interface")
	for cls in classes:
		yield from _class_lines(level, cls)
	for enum in model.enums():
		yield from _stereotype_block(level, enum.name, "enumeration")
	for cls in classes:
		yield from _edge_lines(level, cls, policy)


def render(model: SymbolModel, policy: Optional[FilterPolicy] = None) -> str:
	if policy is None:
		policy = FilterPolicy()
	lines = [f"{indent(level)}{text}\n" for level, text in iter_lines(model, policy)]
	logger.debug("Rendered %d types into %d lines", len(model.types), len(lines))
	return "".join(lines)
