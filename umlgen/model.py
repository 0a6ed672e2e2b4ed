from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TypeKind(str, Enum):
	INTERFACE = "Interface"
	CLASS = "Class"
	ENUM = "Enum"


class MemberKind(str, Enum):
	PROPERTY = "Property"
	METHOD = "Method"


class Visibility(str, Enum):
	PUBLIC = "Public"
	PROTECTED = "Protected"
	PROTECTED_AND_INTERNAL = "ProtectedAndInternal"
	PROTECTED_OR_INTERNAL = "ProtectedOrInternal"
	PRIVATE = "Private"
	INTERNAL = "Internal"
	UNSPECIFIED = "Unspecified"


class Origin(str, Enum):
	USER_DEFINED = "userDefined"
	FRAMEWORK = "framework"


class SpecialType(str, Enum):
	"""Built-in object-model types the analyzer can tag a type with."""

	OBJECT = "Object"
	DELEGATE = "Delegate"
	MULTICAST_DELEGATE = "MulticastDelegate"
	ENUM = "Enum"
	NULLABLE = "Nullable"
	DISPOSABLE = "IDisposable"
	ENUMERABLE = "IEnumerable"
	ENUMERATOR = "IEnumerator"
	GENERIC_COLLECTION = "ICollection<T>"
	GENERIC_ENUMERABLE = "IEnumerable<T>"
	GENERIC_ENUMERATOR = "IEnumerator<T>"
	GENERIC_LIST = "IList<T>"
	READ_ONLY_COLLECTION = "IReadOnlyCollection<T>"
	READ_ONLY_LIST = "IReadOnlyList<T>"


class _Symbol(BaseModel):
	# Snapshots arrive in camelCase; snake_case names are accepted too.
	model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class Parameter(_Symbol):
	name: str
	type_name: str = ""


class MemberSymbol(_Symbol):
	member_kind: MemberKind
	name: str
	# Value type for properties, return type for methods.
	type_name: str = Field(
		"",
		validation_alias=AliasChoices("typeName", "returnTypeName", "type_name", "return_type_name"),
		serialization_alias="typeName",
	)
	visibility: Visibility = Visibility.UNSPECIFIED
	is_static: bool = False
	is_implicit: bool = False
	is_accessor: bool = False
	parameters: Tuple[Parameter, ...] = ()

	@property
	def is_property(self) -> bool:
		return self.member_kind is MemberKind.PROPERTY

	@property
	def is_method(self) -> bool:
		return self.member_kind is MemberKind.METHOD


class TypeSymbol(_Symbol):
	name: str
	kind: TypeKind = TypeKind.CLASS
	namespace: str = ""
	origin: Origin = Origin.USER_DEFINED
	special: Optional[SpecialType] = None
	members: Tuple[MemberSymbol, ...] = ()
	implemented_interfaces: Tuple[TypeSymbol, ...] = ()
	base_type: Optional[TypeSymbol] = None

	@field_validator("implemented_interfaces")
	@classmethod
	def _drop_duplicate_interfaces(cls, value: Tuple[TypeSymbol, ...]) -> Tuple[TypeSymbol, ...]:
		seen = set()
		unique: List[TypeSymbol] = []
		for iface in value:
			key = (iface.namespace, iface.name)
			if key in seen:
				continue
			seen.add(key)
			unique.append(iface)
		return tuple(unique)

	@property
	def qualified_name(self) -> str:
		return f"{self.namespace}.{self.name}" if self.namespace else self.name


TypeSymbol.model_rebuild()


class SymbolModel(_Symbol):
	"""Every type discovered for one compilation unit, in analyzer order."""

	types: Tuple[TypeSymbol, ...] = ()

	def of_kind(self, kind: TypeKind) -> List[TypeSymbol]:
		return [t for t in self.types if t.kind is kind]

	def interfaces(self) -> List[TypeSymbol]:
		return self.of_kind(TypeKind.INTERFACE)

	def classes(self) -> List[TypeSymbol]:
		return self.of_kind(TypeKind.CLASS)

	def enums(self) -> List[TypeSymbol]:
		return self.of_kind(TypeKind.ENUM)
