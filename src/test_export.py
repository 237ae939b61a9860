import json

import pytest

from export import graph_to_dict, to_dot, write_graph
from layout import process_pedigree
from overlay import apply_mutation_overlay


@pytest.fixture
def annotated(trio_graph, trio_layout, trio_variants):
    graph_data = process_pedigree(trio_graph, trio_layout)
    apply_mutation_overlay(trio_graph, trio_variants)
    return graph_data


def test_graph_to_dict(annotated):
    data = graph_to_dict(annotated)

    assert [n["type"] for n in data["nodes"]] == ["person", "person", "person", "marriage"]
    son = data["nodes"][2]
    assert son["id"] == 3
    assert son["dngOutputData"] == {"GT": "0/1"}
    assert son["sampleIds"]["children"][0]["dngOutputData"]["AD"] == [10, 8]
    assert data["nodes"][3]["spouses"] == [1, 2]

    assert data["links"] == [
        {"type": "spouse", "source": 0, "target": 3},
        {"type": "spouse", "source": 1, "target": 3},
        {"type": "child", "source": 2, "target": 3, "data": {"mutation": "A>T"}},
    ]
    json.dumps(data)


def test_to_dot(annotated):
    P = to_dot(annotated)

    assert len(P.get_nodes()) == 4
    assert len(P.get_edges()) == 3
    son = P.get_node("person_3")[0]
    assert son.get("pos") == '"40.0,-100!"'
    assert P.get_node("marriage_3")[0].get("node_type") == "marriage"

    child_edge = P.get_edge("person_3", "marriage_3")[0]
    assert child_edge.get("mutation") == '"A>T"'


def test_write_json(annotated, tmp_path):
    out = tmp_path / "graph.json"
    write_graph(annotated, out)
    assert json.loads(out.read_text())["links"][2]["data"] == {"mutation": "A>T"}


def test_write_dot(annotated, tmp_path):
    out = tmp_path / "graph.dot"
    write_graph(annotated, out)
    text = out.read_text()
    assert text.startswith("digraph")
    assert "person_1" in text
