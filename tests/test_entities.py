import pytest

from qmapkit.entities import (
    DefinitionNotFound,
    InvalidBase,
    PropertyParseError,
    QuakeEntityError,
    QuakeMapEntities,
    QuakeMapEntity,
    RequiredPropertyNotFound,
)


def test_classname_present():
    entity = QuakeMapEntity(properties={"classname": "worldspawn"})
    assert entity.classname() == "worldspawn"


def test_classname_missing_raises():
    entity = QuakeMapEntity()
    with pytest.raises(RequiredPropertyNotFound) as info:
        entity.classname()
    assert info.value.property == "classname"
    assert str(info.value) == "required property `classname` not found"
    assert isinstance(info.value, QuakeEntityError)


def test_get_parses_value():
    entity = QuakeMapEntity(properties={"water_alpha": "0.5", "count": "7"})
    assert entity.get("water_alpha", float) == 0.5
    assert entity.get("count", int) == 7


def test_get_missing_raises():
    entity = QuakeMapEntity(properties={"classname": "light"})
    with pytest.raises(RequiredPropertyNotFound) as info:
        entity.get("water_alpha", float)
    assert info.value.property == "water_alpha"


def test_get_parse_failure():
    entity = QuakeMapEntity(properties={"count": "abc"})
    with pytest.raises(PropertyParseError) as info:
        entity.get("count", int)
    err = info.value
    assert err.property == "count"
    assert err.value == "abc"
    assert err.required_type == "int"
    assert "`count`" in str(err)
    assert "(got `abc`)" in str(err)


def test_get_or_uses_default_only_when_missing():
    entity = QuakeMapEntity(properties={"count": "3", "bad": "x"})
    assert entity.get_or("missing", int, 42) == 42
    assert entity.get_or("count", int, 42) == 3
    with pytest.raises(PropertyParseError):
        entity.get_or("bad", int, 42)


def test_worldspawn_found_anywhere():
    light = QuakeMapEntity(properties={"classname": "light"})
    nameless = QuakeMapEntity()
    world = QuakeMapEntity(properties={"classname": "worldspawn", "water_alpha": "0.5"})
    entities = QuakeMapEntities([nameless, light, world])
    assert entities.worldspawn() is world
    assert len(entities) == 3


def test_worldspawn_absent():
    entities = QuakeMapEntities([QuakeMapEntity(properties={"classname": "light"})])
    assert entities.worldspawn() is None


def test_other_errors_messages():
    missing = DefinitionNotFound("func_door")
    assert missing.classname == "func_door"
    assert str(missing) == 'definition for "func_door" not found'
    base = InvalidBase("func_door", "base_thing")
    assert base.base_name == "base_thing"
    assert str(base) == (
        "Entity class func_door has a base of base_thing, but that class does not exist"
    )