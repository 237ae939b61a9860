"""Data classes for pedigree and visual graph entities."""

from dataclasses import dataclass, field
from typing import Any


SEXES = ("male", "female", "unknown")


@dataclass
class SampleNode:
    name: str
    children: list["SampleNode"] = field(default_factory=list)
    dng_output_data: dict | None = None

    @classmethod
    def from_dict(cls, tree: dict) -> "SampleNode":
        """Build a sample tree from a nested {name, children} mapping."""
        return cls(
            name=tree["name"],
            children=[cls.from_dict(child) for child in tree.get("children") or []],
        )


@dataclass(eq=False)
class Person:
    id: int | str
    sex: str
    sample_ids: SampleNode | None = None
    dng_output_data: dict | None = None
    parentage_links: list["ParentageLink"] = field(default_factory=list, repr=False)

    @property
    def key(self) -> str:
        return str(self.id)

    def get_parentage_link(self) -> "ParentageLink | None":
        # Only one parentage relationship per person is expected
        return self.parentage_links[0] if self.parentage_links else None


@dataclass(eq=False)
class ParentageLink:
    marriage: "Marriage" = field(repr=False)
    child: Person
    data: dict = field(default_factory=dict)

    def set_data(self, data: dict):
        self.data = data


@dataclass(eq=False)
class Marriage:
    spouses: tuple[Person, Person]
    children: list[ParentageLink] = field(default_factory=list)

    @property
    def father(self) -> Person:
        a, b = self.spouses
        return a if a.sex == "male" else b

    @property
    def mother(self) -> Person:
        a, b = self.spouses
        return b if a.sex == "male" else a

    def add_child(self, person: Person) -> ParentageLink:
        """Append a new parentage link for `person`. Repeated children are not merged."""
        link = ParentageLink(marriage=self, child=person)
        self.children.append(link)
        person.parentage_links.append(link)
        return link


class MarriageBuilder:
    """Collects exactly two spouses and builds a Marriage."""

    def __init__(self):
        self._spouses: list[Person] = []

    def spouse(self, person: Person) -> "MarriageBuilder":
        if len(self._spouses) == 2:
            raise ValueError("A marriage takes exactly two spouses")
        self._spouses.append(person)
        return self

    def build(self) -> Marriage:
        if len(self._spouses) != 2:
            raise ValueError(f"A marriage needs two spouses, got {len(self._spouses)}")
        return Marriage(spouses=(self._spouses[0], self._spouses[1]))


@dataclass(eq=False)
class VisualNode:
    type: str  # person, marriage
    x: float
    y: float
    data_node: Any = None


@dataclass(eq=False)
class VisualLink:
    type: str  # spouse, child
    source: VisualNode
    target: VisualNode
    data_link: ParentageLink | None = field(default=None, repr=False)
