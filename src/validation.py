"""Graph validation for the annotated pedigree."""

from collections import Counter

import networkx as nx

from graph import PedigreeGraph


def validate_graph(ped_graph: PedigreeGraph) -> list[str]:
    """
    Validate the pedigree graph for:
    - Marriages or parentage links referencing persons outside the graph
    - Cycles in parent-child relationships
    - Spouse pairs registered more than once
    - Children linked twice under the same marriage

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    # Referential integrity: references must be the graph's own Person objects
    for marriage in ped_graph.get_marriages():
        for person in marriage.spouses:
            if not ped_graph.has_person(person.id) or ped_graph.get_person(person.id) is not person:
                warnings.append(f"Marriage references unknown person {person.id}")
        for link in marriage.children:
            child = link.child
            if not ped_graph.has_person(child.id) or ped_graph.get_person(child.id) is not child:
                warnings.append(f"Parentage link references unknown person {child.id}")

    # Check for cycles through family nodes
    G = ped_graph.to_networkx()
    try:
        cycle = nx.find_cycle(G, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle if G.nodes[edge[0]].get("node_type") == "person"]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    # Duplicate spouse pairs are not rejected at registration
    pairs = Counter(
        frozenset(spouse.key for spouse in marriage.spouses)
        for marriage in ped_graph.get_marriages()
    )
    for pair, count in pairs.items():
        if count > 1:
            warnings.append(f"Spouse pair {sorted(pair)} registered {count} times")

    for marriage in ped_graph.get_marriages():
        children = Counter(link.child.key for link in marriage.children)
        a, b = (spouse.id for spouse in marriage.spouses)
        for child_id, count in children.items():
            if count > 1:
                warnings.append(
                    f"Person {child_id} is linked {count} times as a child of {a} and {b}"
                )

    return warnings
