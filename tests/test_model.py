from zerovalid.codegen.field_types import Basic, Custom, Generic, Ptr, Slice
from zerovalid.codegen.model import Field, Import, Struct, get_used_imports


def test_imports_collected_from_nested_types_without_duplicates():
    time_type = Custom("Time", "time", "time")
    uuid_type = Custom("UUID", "", "example/subpkg1")
    structs = [
        Struct("A", [Field("At", Ptr(time_type)), Field("Ids", Slice(uuid_type))]),
        Struct("B", [Field("Again", time_type), Field("Name", Basic.STRING)]),
    ]
    assert get_used_imports(structs) == [
        Import("time", "time"),
        Import("example/subpkg1", ""),
    ]


def test_local_types_need_no_import():
    structs = [Struct("A", [Field("Inner", Custom("Inner")), Field("N", Basic.INT)])]
    assert get_used_imports(structs) == []


def test_generic_parts_are_collected():
    generic = Generic(Custom("Optional", "optional", "x/optional"), Custom("Item"))
    assert get_used_imports([Struct("A", [Field("O", generic)])]) == [
        Import("x/optional", "optional")
    ]


def test_used_package_name():
    assert Import("go/some").used_package_name() == "some"
    assert Import("go/some", "alias").used_package_name() == "alias"


def test_field_tags_default_to_independent_dicts():
    first = Field("A", Basic.INT)
    second = Field("B", Basic.INT)
    first.tags["json"] = "a"
    assert second.tags == {}