import json

from conftest import CORE, DISPLAY, SUBJECT_ID, SUBJECT_UUID

from ldgraph.cli.main import build_parser


def _run(argv):
    args = build_parser().parse_args(argv)
    return args.func(args)


def _write(tmp_path, doc):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return str(path)


def test_get(tmp_path, scenario, capsys):
    path = _write(tmp_path, scenario)

    assert _run(["get", path, "displayName"]) == 0
    assert json.loads(capsys.readouterr().out) == ["Title"]

    assert _run(["get", path, "id", "--first"]) == 0
    assert json.loads(capsys.readouterr().out) == SUBJECT_UUID

    assert _run(["get", path, "missing"]) == 1


def test_inline(tmp_path, scenario, capsys):
    path = _write(tmp_path, scenario)

    assert _run(["inline", path]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["@graph"][0]["@id"] == SUBJECT_ID
    assert doc["@graph"][0][DISPLAY + "collections"][0]["@id"] == "_:b5"
    assert CORE + "element" in doc["@graph"][0][DISPLAY + "collections"][0]


def test_subset(tmp_path, scenario, capsys):
    path = _write(tmp_path, scenario)

    assert _run(["subset", path, "display#collections"]) == 0
    assert json.loads(capsys.readouterr().out) == [
        "e4108e4b-6b29-4b27-bb72-a6ebaf5ba43c",
        "58e34951-2dcd-4e05-b660-803be70ed538",
    ]


def test_version(capsys):
    assert _run(["version"]) == 0
    assert capsys.readouterr().out.strip() == "0.1.0"
