from conftest import CORE, SUBJECT_ID

from ldgraph.model.containers import ContainerKind, GraphContainer
from ldgraph.model.locator import is_local_id, local_id_pattern, locate


def test_subject_is_moved_to_front(scenario):
    subject = locate(scenario)

    assert subject["@id"] == SUBJECT_ID
    assert [n["@id"] for n in scenario["@graph"]] == [SUBJECT_ID, "_:b5"]


def test_locate_is_idempotent(scenario):
    first = locate(scenario)
    order = [n["@id"] for n in scenario["@graph"]]

    assert locate(scenario) is first
    assert [n["@id"] for n in scenario["@graph"]] == order


def test_persistent_subject_already_first_is_untouched():
    doc = {"@graph": [{"@id": SUBJECT_ID}, {"@id": "_:b1"}]}
    assert locate(doc) is doc["@graph"][0]


def test_no_persistent_node_keeps_position_zero():
    doc = {"@graph": [{"@id": "_:b1"}, {"@id": "_:b2"}]}
    assert locate(doc)["@id"] == "_:b1"
    assert [n["@id"] for n in doc["@graph"]] == ["_:b1", "_:b2"]


def test_wrapped_view_state():
    state = {"_graph": [{"@id": "_:b0"}, {"@id": SUBJECT_ID}], "uuid": "x"}
    assert locate(state)["@id"] == SUBJECT_ID
    assert state["_graph"][0]["@id"] == SUBJECT_ID


def test_wrapped_single_node():
    node = {"@id": SUBJECT_ID}
    assert locate({"_graph": node}) is node


def test_bare_node_is_its_own_subject():
    node = {"@id": SUBJECT_ID, CORE + "displayName": ["x"]}
    assert locate(node) is node


def test_empty_or_unstructured_graph_falls_back_to_container():
    empty = {"@graph": []}
    assert locate(empty) is empty

    odd = {"@graph": ["not-a-node"]}
    assert locate(odd) is odd


def test_container_kinds():
    assert GraphContainer.of({"@graph": []}).kind is ContainerKind.GRAPH
    assert GraphContainer.of({"_graph": []}).kind is ContainerKind.WRAPPED
    assert GraphContainer.of({"@id": "x"}).kind is ContainerKind.NODE
    assert GraphContainer.of([{"@id": "x"}]).kind is ContainerKind.GRAPH

    c = GraphContainer.of({"@graph": []})
    assert GraphContainer.of(c) is c


def test_is_local_id():
    assert is_local_id("_:b12")
    assert is_local_id("_:stored1554")
    assert not is_local_id(SUBJECT_ID)
    assert not is_local_id(None)
    assert not is_local_id("_:x")


def test_local_id_pattern_follows_prefix():
    pattern = local_id_pattern("_:s")

    assert is_local_id("_:s7646", pattern)
    assert is_local_id("_:b3", pattern)
    assert not is_local_id("_:stored7646", pattern)

    doc = {"@graph": [{"@id": "_:s1"}, {"@id": SUBJECT_ID}]}
    assert locate(doc)["@id"] == "_:s1"
    assert locate(doc, local=pattern)["@id"] == SUBJECT_ID
