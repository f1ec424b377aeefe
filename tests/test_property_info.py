import pytest
from pydantic import ValidationError

from graphtypes.core.exceptions import PropertyRecordError
from graphtypes.models.property_info import PropertySchemaInput, PropertyTypeInfo


def test_property_type_info_accepts_neo4j_column_names():
    record = PropertyTypeInfo.model_validate(
        {
            "nodeType": ":`Person`",
            "nodeLabels": ["Person"],
            "propertyName": "born",
            "propertyTypes": ["Long"],
            "mandatory": True,
        }
    )

    assert record.node_type == ":`Person`"
    assert record.node_labels == ["Person"]
    assert record.property_name == "born"
    assert record.property_types == ["Long"]
    assert record.mandatory is True


def test_property_type_info_accepts_snake_case():
    record = PropertyTypeInfo(property_name="title", property_types=["String", None])
    assert record.property_types == ["String", None]
    assert record.mandatory is False


def test_null_fields_use_defaults():
    record = PropertyTypeInfo.model_validate({"mandatory": None, "nodeLabels": None, "propertyTypes": None})
    assert record.mandatory is False
    assert record.node_labels == []
    assert record.property_types is None


def test_unknown_keys_are_ignored():
    record = PropertyTypeInfo.model_validate({"propertyName": "x", "somethingElse": 1})
    assert record.property_name == "x"


def test_invalid_property_types_raise_validation_error():
    with pytest.raises(ValidationError):
        PropertyTypeInfo.model_validate({"propertyTypes": "Long"})


def test_schema_input_from_list_and_object():
    rows = [{"propertyName": "a", "propertyTypes": ["Long"]}]
    assert len(PropertySchemaInput.from_payload(rows).properties) == 1
    assert len(PropertySchemaInput.from_payload({"properties": rows}).properties) == 1


@pytest.mark.parametrize("payload", ["not records", 3, {"rows": []}, None])
def test_schema_input_rejects_other_payloads(payload):
    with pytest.raises(PropertyRecordError, match="property records"):
        PropertySchemaInput.from_payload(payload)
