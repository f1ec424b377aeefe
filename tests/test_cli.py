import json

import pytest

import graphtypes.cli as cli_mod
from graphtypes.cli import cli, load_payload, owner_type_name, resolve_file, resolve_records
from graphtypes.core.exceptions import PropertyRecordError
from graphtypes.models.property_info import PropertyTypeInfo


NODE_ROWS = [
    {
        "nodeType": ":`Person`",
        "nodeLabels": ["Person"],
        "propertyName": "born",
        "propertyTypes": ["Long", "Integer"],
        "mandatory": False,
    },
    {
        "nodeType": ":`Person`",
        "nodeLabels": ["Person"],
        "propertyName": "name",
        "propertyTypes": ["String"],
        "mandatory": True,
    },
    {
        "relType": ":`ACTED_IN`",
        "propertyName": "roles",
        "propertyTypes": ["StringArray"],
        "mandatory": False,
    },
]


@pytest.fixture(autouse=True)
def _no_root_handler(monkeypatch):
    monkeypatch.setattr(cli_mod, "configure_root_logger", lambda level: None)


def test_resolve_records_maps_each_property():
    result = resolve_records(NODE_ROWS)

    assert result["status"] == "success"
    assert result["count"] == 3
    assert result["properties"] == [
        {"typeName": "Person", "propertyName": "born", "graphqlType": "Int"},
        {"typeName": "Person", "propertyName": "name", "graphqlType": "String!"},
        {"typeName": "ACTED_IN", "propertyName": "roles", "graphqlType": "[String]"},
    ]


def test_resolve_records_wraps_validation_errors():
    with pytest.raises(PropertyRecordError, match="Invalid property records"):
        resolve_records([{"propertyTypes": "Long"}])


def test_owner_type_name_falls_back_to_node_type():
    assert owner_type_name(PropertyTypeInfo(node_labels=["Person", "Actor"])) == "Person_Actor"
    assert owner_type_name(PropertyTypeInfo(node_type=":`Person`:`Actor`")) == "Person_Actor"
    assert owner_type_name(PropertyTypeInfo(rel_type=":`HAS FRIEND`")) == "HAS_FRIEND"
    assert owner_type_name(PropertyTypeInfo(property_name="x")) is None


def test_resolve_file_reads_json(tmp_path):
    path = tmp_path / "props.json"
    path.write_text(json.dumps({"properties": NODE_ROWS}))

    result = resolve_file(str(path), run_id="run-1")

    assert result["count"] == 3


def test_resolve_file_reads_yaml(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "props.yaml"
    path.write_text("- propertyName: score\n  propertyTypes: [Integer, Float]\n  mandatory: true\n")

    result = resolve_file(str(path))

    assert result["properties"][0]["graphqlType"] == "Float!"


def test_load_payload_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="not found"):
        load_payload(str(tmp_path / "missing.json"))


def test_load_payload_rejects_unknown_suffix(tmp_path):
    path = tmp_path / "props.txt"
    path.write_text("[]")

    with pytest.raises(ValueError, match="Unsupported input format"):
        load_payload(str(path))


def test_cli_resolve_prints_json(tmp_path, capsys):
    path = tmp_path / "props.json"
    path.write_text(json.dumps(NODE_ROWS))

    with pytest.raises(SystemExit) as exc:
        cli(["resolve", str(path)])

    assert exc.value.code == 0
    out = json.loads(capsys.readouterr().out)
    assert [p["graphqlType"] for p in out["properties"]] == ["Int", "String!", "[String]"]


def test_cli_resolve_exits_nonzero_on_bad_input(tmp_path):
    path = tmp_path / "props.json"
    path.write_text(json.dumps("nope"))

    with pytest.raises(SystemExit) as exc:
        cli(["resolve", str(path)])

    assert exc.value.code == 1


def test_cli_label_prints_sanitized_names(capsys):
    with pytest.raises(SystemExit) as exc:
        cli(["label", "Person Node:Label", "Movie"])

    assert exc.value.code == 0
    assert capsys.readouterr().out.splitlines() == ["Person_Node_Label", "Movie"]
