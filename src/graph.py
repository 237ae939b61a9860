"""Pedigree graph model and its NetworkX view."""

from typing import Iterable

import networkx as nx

from errors import DuplicateIdError, NotFoundError
from models import SEXES, Marriage, Person, SampleNode


class PedigreeGraph:
    """
    Owns every Person and Marriage of one pedigree.

    Persons are keyed by the string form of their id, so `1` and `"1"` name the
    same individual. Marriages are kept in registration order; registering the
    same spouse pair twice is not prevented.
    """

    def __init__(self):
        self._persons: dict[str, Person] = {}
        self._marriages: list[Marriage] = []

    @classmethod
    def create_graph(cls) -> "PedigreeGraph":
        return cls()

    def add_person(self, person: Person):
        if person.key in self._persons:
            raise DuplicateIdError(person.id)
        self._persons[person.key] = person

    def has_person(self, person_id) -> bool:
        return str(person_id) in self._persons

    def get_person(self, person_id) -> Person:
        try:
            return self._persons[str(person_id)]
        except KeyError:
            raise NotFoundError(person_id) from None

    def get_persons(self) -> list[Person]:
        return list(self._persons.values())

    def add_marriage(self, marriage: Marriage):
        self._marriages.append(marriage)

    def get_marriages(self) -> list[Marriage]:
        return list(self._marriages)

    def to_networkx(self) -> nx.DiGraph:
        """
        Build a union-node graph of the pedigree.

        Every registered Marriage becomes a "family" node that both spouses point
        to, and each child hangs from the family node of its parentage link.

        Returns:
            A DiGraph with person nodes keyed by id string and family nodes keyed
            `FAM_<index>` in marriage registration order
        """
        G = nx.DiGraph()

        for person in self._persons.values():
            G.add_node(person.key, node_type="person", sex=person.sex)

        for index, marriage in enumerate(self._marriages):
            fam_id = f"FAM_{index}"
            G.add_node(
                fam_id,
                node_type="family",
                spouses=tuple(spouse.key for spouse in marriage.spouses),
            )
            for spouse in marriage.spouses:
                G.add_edge(spouse.key, fam_id, edge_type="spouse_to_family")
            for link in marriage.children:
                G.add_edge(fam_id, link.child.key, edge_type="family_to_child")

        return G


def build_graph_from_pedigree(records: Iterable[dict]) -> PedigreeGraph:
    """Create one Person per pedigree record, in record order."""
    ped_graph = PedigreeGraph.create_graph()

    for individual in records:
        sex = individual.get("sex")
        sample_ids = individual.get("sampleIds")
        person = Person(
            id=individual["individualId"],
            sex=sex if sex in SEXES else "unknown",
            sample_ids=SampleNode.from_dict(sample_ids) if sample_ids else None,
        )
        ped_graph.add_person(person)

    return ped_graph
