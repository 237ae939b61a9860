"""Serialization of the positioned graph for the rendering front end."""

import json
from pathlib import Path

import pydot

from models import SampleNode, VisualNode


def sample_tree_to_dict(tree: SampleNode | None) -> dict | None:
    if tree is None:
        return None
    data = {"name": tree.name, "children": [sample_tree_to_dict(c) for c in tree.children]}
    if tree.dng_output_data is not None:
        data["dngOutputData"] = tree.dng_output_data
    return data


def node_to_dict(node: VisualNode) -> dict:
    data = {"type": node.type, "x": node.x, "y": node.y}

    if node.type == "person":
        person = node.data_node
        data["id"] = person.id
        data["sex"] = person.sex
        data["sampleIds"] = sample_tree_to_dict(person.sample_ids)
        if person.dng_output_data is not None:
            data["dngOutputData"] = person.dng_output_data
    else:
        data["spouses"] = [spouse.id for spouse in node.data_node.spouses]

    return data


def graph_to_dict(graph_data: dict) -> dict:
    """
    Convert {nodes, links} into plain JSON-safe data.

    Links refer to nodes by their index in the node list. Child links carry the
    data of their parentage link, which holds the mutation when one was attached.
    """
    nodes = graph_data["nodes"]
    index = {id(node): i for i, node in enumerate(nodes)}

    links = []
    for link in graph_data["links"]:
        data = {
            "type": link.type,
            "source": index[id(link.source)],
            "target": index[id(link.target)],
        }
        if link.data_link is not None:
            data["data"] = dict(link.data_link.data)
        links.append(data)

    return {"nodes": [node_to_dict(node) for node in nodes], "links": links}


def node_name(node: VisualNode, i: int) -> str:
    if node.type == "person":
        return f"person_{node.data_node.id}"
    return f"marriage_{i}"


def to_dot(graph_data: dict) -> pydot.Dot:
    """
    Build a DOT graph with the layout positions pinned.

    Person nodes are named `person_<id>` and marriage nodes `marriage_<index>`.
    Coordinates go into `pos` so `neato -n` keeps them; y is flipped because
    DOT's origin is bottom-left.
    """
    P = pydot.Dot(graph_type="digraph")

    names = {}
    for i, node in enumerate(graph_data["nodes"]):
        name = node_name(node, i)
        names[id(node)] = name
        attrs = {"node_type": node.type, "pos": f'"{node.x},{-node.y}!"'}
        if node.type == "person":
            attrs["label"] = f'"{node.data_node.id}"'
            attrs["sex"] = node.data_node.sex
        else:
            attrs["label"] = '""'
        P.add_node(pydot.Node(name, **attrs))

    for link in graph_data["links"]:
        attrs = {"link_type": link.type}
        if link.data_link is not None and "mutation" in link.data_link.data:
            attrs["mutation"] = f'"{link.data_link.data["mutation"]}"'
        P.add_edge(pydot.Edge(names[id(link.source)], names[id(link.target)], **attrs))

    return P


def write_graph(graph_data: dict, output_path: Path):
    """Write the graph as DOT for a .dot/.gv path, JSON otherwise."""
    ext = output_path.suffix.lower().lstrip(".")

    if ext in ("dot", "gv"):
        to_dot(graph_data).write(str(output_path), format="raw")
    else:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(graph_to_dict(graph_data), f, indent=2)

    print(f"Graph saved to {output_path}")
