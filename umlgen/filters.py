from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .model import Origin, SpecialType, TypeSymbol

logger = logging.getLogger(__name__)


DEFAULT_SPECIAL_BASE_TYPES: FrozenSet[SpecialType] = frozenset(
	{
		SpecialType.OBJECT,
		SpecialType.DELEGATE,
		SpecialType.MULTICAST_DELEGATE,
		SpecialType.ENUM,
		SpecialType.NULLABLE,
	}
)

DEFAULT_SPECIAL_INTERFACES: FrozenSet[SpecialType] = frozenset(
	{
		SpecialType.DISPOSABLE,
		SpecialType.ENUMERABLE,
		SpecialType.ENUMERATOR,
		SpecialType.GENERIC_COLLECTION,
		SpecialType.GENERIC_ENUMERABLE,
		SpecialType.GENERIC_ENUMERATOR,
		SpecialType.GENERIC_LIST,
		SpecialType.READ_ONLY_COLLECTION,
		SpecialType.READ_ONLY_LIST,
	}
)

DEFAULT_FRAMEWORK_NAMESPACES: Tuple[str, ...] = ("System", "Microsoft")


class NamespaceRule(BaseModel):
	"""Matches namespaces whose leading dotted segments equal ``prefix``.

	``System`` matches ``System`` and ``System.Collections.Generic`` but not
	``SystemTools``. Multi-segment prefixes such as ``Newtonsoft.Json`` work
	the same way.
	"""

	model_config = ConfigDict(frozen=True)

	prefix: str

	@property
	def segments(self) -> List[str]:
		return [part for part in self.prefix.split(".") if part]

	def matches(self, namespace: str) -> bool:
		segments = self.segments
		if not segments or not namespace:
			return False
		return namespace.split(".")[: len(segments)] == segments


class FilterConfig(BaseModel):
	"""User-facing filter configuration; omitted keys keep the defaults."""

	model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

	framework_namespaces: List[str] = list(DEFAULT_FRAMEWORK_NAMESPACES)
	special_base_types: List[SpecialType] = sorted(DEFAULT_SPECIAL_BASE_TYPES, key=lambda s: s.value)
	special_interfaces: List[SpecialType] = sorted(DEFAULT_SPECIAL_INTERFACES, key=lambda s: s.value)


class FilterPolicy:
	"""Decides which relationship edges are noise.

	Filtering only ever drops an edge. Classes are always listed, whatever
	the policy says about them.
	"""

	def __init__(
		self,
		special_base_types: Optional[Iterable[SpecialType]] = None,
		special_interfaces: Optional[Iterable[SpecialType]] = None,
		framework_namespaces: Optional[Iterable[str]] = None,
	):
		self.special_base_types: FrozenSet[SpecialType] = (
			DEFAULT_SPECIAL_BASE_TYPES if special_base_types is None else frozenset(special_base_types)
		)
		self.special_interfaces: FrozenSet[SpecialType] = (
			DEFAULT_SPECIAL_INTERFACES if special_interfaces is None else frozenset(special_interfaces)
		)
		if framework_namespaces is None:
			framework_namespaces = DEFAULT_FRAMEWORK_NAMESPACES
		self.framework_namespaces: Tuple[NamespaceRule, ...] = tuple(
			NamespaceRule(prefix=prefix) for prefix in framework_namespaces
		)

	@classmethod
	def from_config(cls, config: FilterConfig) -> "FilterPolicy":
		return cls(
			special_base_types=config.special_base_types,
			special_interfaces=config.special_interfaces,
			framework_namespaces=config.framework_namespaces,
		)

	def is_special_base_type(self, symbol: TypeSymbol) -> bool:
		return symbol.special is not None and symbol.special in self.special_base_types

	def is_special_interface(self, symbol: TypeSymbol) -> bool:
		return symbol.special is not None and symbol.special in self.special_interfaces

	def is_framework_owned(self, symbol: TypeSymbol) -> bool:
		if symbol.origin is Origin.FRAMEWORK:
			return True
		return any(rule.matches(symbol.namespace) for rule in self.framework_namespaces)

	def include_interface_edge(self, interface: TypeSymbol) -> bool:
		if self.is_special_interface(interface) or self.is_framework_owned(interface):
			logger.debug("Suppressing realization edge to %s", interface.qualified_name)
			return False
		return True

	def include_base_edge(self, base_type: TypeSymbol) -> bool:
		if self.is_special_base_type(base_type) or self.is_framework_owned(base_type):
			logger.debug("Suppressing generalization edge to %s", base_type.qualified_name)
			return False
		return True
