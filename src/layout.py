"""Map an externally computed kinship layout onto the pedigree graph."""

from config import DEFAULT_CONFIG, PipelineConfig
from errors import LayoutConsistencyError
from graph import PedigreeGraph
from models import MarriageBuilder, VisualLink, VisualNode


def build_person_nodes(
    ped_graph: PedigreeGraph, layout: dict, config: PipelineConfig = DEFAULT_CONFIG
) -> tuple[list[VisualNode], dict[tuple[int, int], int]]:
    """
    Create one positioned person node per occupied layout cell.

    Cells are visited row by row, columns ascending, and only the first
    `n[row]` columns of a row are occupied.

    Returns:
        The person node list and a map from (row, column) to the node's index
        in that list
    """
    nodes: list[VisualNode] = []
    cells: dict[tuple[int, int], int] = {}

    for row_idx, row in enumerate(layout["nid"]):
        for col_idx in range(layout["n"][row_idx]):
            node = VisualNode(
                type="person",
                x=config.column_spacing * layout["pos"][row_idx][col_idx],
                y=config.row_spacing * row_idx,
                data_node=ped_graph.get_person(row[col_idx]),
            )
            cells[(row_idx, col_idx)] = len(nodes)
            nodes.append(node)

    return nodes, cells


def find_spouse_pairs(layout: dict, cells: dict[tuple[int, int], int]) -> list[tuple[int, int]]:
    """
    Pair each spouse-flagged cell with the cell to its right in the same row.

    Raises:
        LayoutConsistencyError: a flagged cell has no right-hand neighbour
    """
    pairs = []
    for (row_idx, col_idx), index in cells.items():
        if layout["spouse"][row_idx][col_idx] != 1:
            continue
        neighbour = cells.get((row_idx, col_idx + 1))
        if neighbour is None:
            raise LayoutConsistencyError(
                f"Spouse flag at row {row_idx}, column {col_idx} has no spouse to its right"
            )
        pairs.append((index, neighbour))
    return pairs


def parent_ids(pedigree: dict, person_id) -> tuple[str | None, str | None]:
    """
    Look up the father and mother ids of a person in the layout's 1-based index arrays.

    Ids that are not integers or fall outside the arrays have no known parents,
    so (None, None) is returned and the person is never matched as a child.
    """
    try:
        index = int(person_id) - 1
    except (TypeError, ValueError):
        return None, None

    findex, mindex = pedigree["findex"], pedigree["mindex"]
    if not 0 <= index < min(len(findex), len(mindex)):
        return None, None

    return str(findex[index]), str(mindex[index])


def create_marriage_node(spouse_a: VisualNode, spouse_b: VisualNode, marriage) -> VisualNode:
    return VisualNode(
        type="marriage",
        x=(spouse_a.x + spouse_b.x) / 2,
        y=spouse_a.y,
        data_node=marriage,
    )


def process_pedigree(
    ped_graph: PedigreeGraph, layout_data: dict, config: PipelineConfig = DEFAULT_CONFIG
) -> dict:
    """
    Build the positioned {nodes, links} structure for a pedigree.

    Each spouse pair found in the layout becomes a Marriage registered in
    `ped_graph`, a marriage node between the spouses, and two spouse links.
    Every person whose layout parents are exactly that father and mother is
    added as a child of the marriage and linked to the marriage node.

    Args:
        ped_graph: Graph holding every person referenced by the layout
        layout_data: {"layout": {nid, n, pos, spouse}, "pedigree": {findex, mindex}}
        config: Node spacing

    Returns:
        {"nodes": person nodes followed by marriage nodes, "links": spouse and child links}
    """
    layout = layout_data["layout"]
    pedigree = layout_data["pedigree"]

    person_nodes, cells = build_person_nodes(ped_graph, layout, config)
    spouse_pairs = find_spouse_pairs(layout, cells)

    # Parents are resolved once; every marriage still scans all persons
    parents = [parent_ids(pedigree, node.data_node.id) for node in person_nodes]

    marriage_nodes: list[VisualNode] = []
    links: list[VisualLink] = []

    for index_a, index_b in spouse_pairs:
        node_a, node_b = person_nodes[index_a], person_nodes[index_b]

        marriage = (
            MarriageBuilder()
            .spouse(node_a.data_node)
            .spouse(node_b.data_node)
            .build()
        )
        ped_graph.add_marriage(marriage)

        marriage_node = create_marriage_node(node_a, node_b, marriage)
        marriage_nodes.append(marriage_node)

        links.append(VisualLink(type="spouse", source=node_a, target=marriage_node))
        links.append(VisualLink(type="spouse", source=node_b, target=marriage_node))

        father_key, mother_key = marriage.father.key, marriage.mother.key
        for child_node, (f_id, m_id) in zip(person_nodes, parents):
            if f_id == father_key and m_id == mother_key:
                parentage_link = marriage.add_child(child_node.data_node)
                links.append(
                    VisualLink(
                        type="child",
                        source=child_node,
                        target=marriage_node,
                        data_link=parentage_link,
                    )
                )

    return {"nodes": person_nodes + marriage_nodes, "links": links}
