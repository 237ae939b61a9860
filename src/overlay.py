"""Attach a de-novo mutation call to the pedigree graph."""

from dataclasses import dataclass, field

from config import DEFAULT_CONFIG, PipelineConfig
from errors import NotFoundError, OverlayNotFound, UnmatchedSample
from graph import PedigreeGraph
from matching import find_owner, find_sample_leaf, is_person_column, strip_prefix
from models import Person

NO_MUTATION_FOUND = "No mutation found!"


@dataclass
class OverlayResult:
    owner: Person | None = None
    mutation: str | None = None
    annotated: list[str] = field(default_factory=list)
    unmatched: list[str] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)

    @property
    def mutation_found(self) -> bool:
        return self.owner is not None


def resolve_mutation_owner(
    ped_graph: PedigreeGraph, record: dict, config: PipelineConfig = DEFAULT_CONFIG
) -> Person:
    """
    Find the person the record's de-novo location belongs to.

    Raises:
        OverlayNotFound: no person owns the location, or the owner has no parents
            in the graph to carry the mutation
    """
    location = (record.get("INFO") or {}).get(config.location_field)
    if location is None:
        raise OverlayNotFound(f"Record has no INFO.{config.location_field} field")

    owner = find_owner(ped_graph, strip_prefix(location, config))
    if owner is None:
        raise OverlayNotFound(f"No person owns mutation location {location}")

    if owner.get_parentage_link() is None:
        raise OverlayNotFound(f"Person {owner.id} owns {location} but has no parentage link")

    return owner


def annotate_sample_column(
    ped_graph: PedigreeGraph,
    sample_name: str,
    format_data: dict | None,
    config: PipelineConfig = DEFAULT_CONFIG,
):
    """
    Store a column's per-sample FORMAT data on its person or sample node.

    Raises:
        UnmatchedSample: the column resolves to nothing in the pedigree
    """
    stripped = strip_prefix(sample_name, config)

    if is_person_column(sample_name, config):
        try:
            person = ped_graph.get_person(stripped)
        except NotFoundError:
            raise UnmatchedSample(sample_name) from None
        person.dng_output_data = format_data
        return

    sample_node = find_sample_leaf(ped_graph, stripped)
    if sample_node is None:
        raise UnmatchedSample(sample_name)
    sample_node.dng_output_data = format_data


def apply_mutation_overlay(
    ped_graph: PedigreeGraph, vcf_data: dict, config: PipelineConfig = DEFAULT_CONFIG
) -> OverlayResult:
    """
    Annotate the graph with the first de-novo record of `vcf_data`.

    Only `records[0]` is considered. If its owner cannot be resolved nothing is
    annotated and the result carries a "No mutation found!" notice. Otherwise
    the owner's parentage link receives {"mutation": <descriptor>} and every
    sample column of the header is annotated with its FORMAT data; columns that
    match nothing are skipped and listed in `unmatched`.
    """
    result = OverlayResult()

    records = vcf_data.get("records") or []
    if not records:
        result.notices.append(NO_MUTATION_FOUND)
        return result

    record = records[0]
    try:
        owner = resolve_mutation_owner(ped_graph, record, config)
    except OverlayNotFound as err:
        result.notices.append(NO_MUTATION_FOUND)
        result.notices.append(str(err))
        return result

    mutation = record["INFO"].get(config.descriptor_field)
    owner.get_parentage_link().set_data({"mutation": mutation})
    result.owner = owner
    result.mutation = mutation

    for sample_name in vcf_data.get("header", {}).get("sampleNames", []):
        try:
            annotate_sample_column(ped_graph, sample_name, record.get(sample_name), config)
        except UnmatchedSample:
            result.unmatched.append(sample_name)
            continue
        result.annotated.append(sample_name)

    return result
