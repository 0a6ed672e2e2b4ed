import json

import pytest
from pydantic import ValidationError

from umlgen.errors import FilterConfigError, SnapshotError, SnapshotNotFoundError
from umlgen.loader import load_filter_config, load_symbol_model, parse_symbol_model
from umlgen.model import MemberKind, Origin, SpecialType, TypeKind, Visibility
from umlgen.render import render


SNAPSHOT = {
	"types": [
		{"name": "IBark", "kind": "Interface", "namespace": "Zoo"},
		{
			"name": "Dog",
			"kind": "Class",
			"namespace": "Zoo",
			"members": [
				{"memberKind": "Property", "name": "Name", "typeName": "string", "visibility": "Public"},
				{"memberKind": "Method", "name": "get_Name", "typeName": "string", "isAccessor": True},
				{
					"memberKind": "Method",
					"name": "Create",
					"typeName": "Dog",
					"visibility": "ProtectedOrInternal",
					"isStatic": True,
					"parameters": [{"name": "name", "typeName": "string"}],
				},
			],
			"implementedInterfaces": [{"name": "IBark", "kind": "Interface", "namespace": "Zoo"}],
			"baseType": {"name": "Object", "namespace": "System", "origin": "framework", "special": "Object"},
		},
	]
}


def test_parse_camel_case_snapshot():
	model = parse_symbol_model(json.dumps(SNAPSHOT))
	assert [t.kind for t in model.types] == [TypeKind.INTERFACE, TypeKind.CLASS]
	dog = model.classes()[0]
	assert dog.members[0].member_kind is MemberKind.PROPERTY
	assert dog.members[1].is_accessor
	assert dog.members[2].visibility is Visibility.PROTECTED_OR_INTERNAL
	assert dog.members[2].parameters[0].type_name == "string"
	assert dog.base_type.origin is Origin.FRAMEWORK
	assert dog.base_type.special is SpecialType.OBJECT
	assert dog.implemented_interfaces[0].qualified_name == "Zoo.IBark"


def test_snake_case_fields_accepted():
	model = parse_symbol_model(
		json.dumps({"types": [{"name": "A", "members": [{"member_kind": "Method", "name": "m", "is_static": True}]}]})
	)
	assert model.types[0].members[0].is_static


def test_method_return_type_name_is_loaded():
	snapshot = {
		"types": [
			{
				"name": "Calc",
				"members": [
					{"memberKind": "Method", "name": "Add", "returnTypeName": "int", "visibility": "Public"},
					{"memberKind": "Property", "name": "Total", "typeName": "long", "visibility": "Public"},
				],
			}
		]
	}
	model = parse_symbol_model(json.dumps(snapshot))
	add, total = model.types[0].members
	assert add.type_name == "int"
	assert total.type_name == "long"
	text = render(model)
	assert "        +int Add()\n" in text
	assert "        +long Total\n" in text


def test_model_is_immutable():
	model = parse_symbol_model(json.dumps(SNAPSHOT))
	with pytest.raises(ValidationError):
		model.types[0].name = "Other"


def test_load_symbol_model(tmp_path):
	p = tmp_path / "snapshot.json"
	p.write_text(json.dumps(SNAPSHOT))
	model = load_symbol_model(str(p))
	assert [t.name for t in model.types] == ["IBark", "Dog"]


def test_missing_snapshot(tmp_path):
	with pytest.raises(SnapshotNotFoundError):
		load_symbol_model(str(tmp_path / "nope.json"))


def test_invalid_snapshot(tmp_path):
	p = tmp_path / "bad.json"
	p.write_text('{"types": [{"name": "A", "kind": "Struct"}]}')
	with pytest.raises(SnapshotError) as excinfo:
		load_symbol_model(str(p))
	assert str(p) in str(excinfo.value)


def test_malformed_json():
	with pytest.raises(SnapshotError):
		parse_symbol_model("{not json")


def test_load_filter_config(tmp_path):
	p = tmp_path / "filters.json"
	p.write_text(json.dumps({"frameworkNamespaces": ["System", "Newtonsoft.Json"]}))
	config = load_filter_config(str(p))
	assert config.framework_namespaces == ["System", "Newtonsoft.Json"]
	assert SpecialType.OBJECT in config.special_base_types


def test_bad_filter_config(tmp_path):
	p = tmp_path / "filters.json"
	p.write_text(json.dumps({"specialInterfaces": ["INotAThing"]}))
	with pytest.raises(FilterConfigError):
		load_filter_config(str(p))
	with pytest.raises(FilterConfigError):
		load_filter_config(str(tmp_path / "missing.json"))
