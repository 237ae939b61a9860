"""Resolve variant-call sample columns to pedigree persons and sample leaves."""

from dataclasses import dataclass

from config import DEFAULT_CONFIG, PipelineConfig
from graph import PedigreeGraph
from models import Person, SampleNode


@dataclass(frozen=True)
class SampleMatch:
    person: Person
    node: SampleNode


def is_person_column(sample_name: str, config: PipelineConfig = DEFAULT_CONFIG) -> bool:
    return sample_name[: config.prefix_length] == config.person_prefix


def strip_prefix(sample_name: str, config: PipelineConfig = DEFAULT_CONFIG) -> str:
    """Drop the column prefix and anything from the first ':' on.

    "GL-3" -> "3", "LB-NA12878:Solexa-135852" -> "NA12878"
    """
    stripped = sample_name[config.prefix_length :]
    return stripped.split(":", 1)[0]


def find_in_tree(tree: SampleNode | None, sample_name: str) -> SampleNode | None:
    """Depth-first, pre-order search for the node called `sample_name`."""
    if tree is None:
        return None

    if tree.name == sample_name:
        return tree

    for child in tree.children:
        found = find_in_tree(child, sample_name)
        if found is not None:
            return found

    return None


def match_sample(ped_graph: PedigreeGraph, stripped_name: str) -> SampleMatch | None:
    """
    Find the first person, in insertion order, whose sample tree holds `stripped_name`.

    Sample identifiers are assumed unique across the pedigree; when they are not,
    the earliest person wins.
    """
    for person in ped_graph.get_persons():
        node = find_in_tree(person.sample_ids, stripped_name)
        if node is not None:
            return SampleMatch(person=person, node=node)
    return None


def find_owner(ped_graph: PedigreeGraph, stripped_name: str) -> Person | None:
    match = match_sample(ped_graph, stripped_name)
    return match.person if match else None


def find_sample_leaf(ped_graph: PedigreeGraph, stripped_name: str) -> SampleNode | None:
    match = match_sample(ped_graph, stripped_name)
    return match.node if match else None
