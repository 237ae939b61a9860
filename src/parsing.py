"""Loading of the pre-parsed pedigree, layout and variant-call documents."""

import json
from pathlib import Path

# Pedigree files use several spellings for sex
SEX_MAP = {
    "male": "male",
    "m": "male",
    "1": "male",
    "female": "female",
    "f": "female",
    "2": "female",
}

LAYOUT_KEYS = ("nid", "n", "pos", "spouse")
PARENT_KEYS = ("findex", "mindex")


def load_json(filepath: Path):
    """Read a JSON document from disk."""
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def normalize_sex(value) -> str:
    """Map a sex code to male/female/unknown."""
    if value is None:
        return "unknown"
    return SEX_MAP.get(str(value).strip().lower(), "unknown")


def parse_pedigree_records(data) -> list[dict]:
    """
    Check and normalize pedigree records.

    Each record needs an `individualId`; `sex` is normalized and a missing
    `sampleIds` tree is left as None.
    """
    if not isinstance(data, list):
        raise ValueError("Pedigree document must be a list of individuals")

    records = []
    for i, individual in enumerate(data):
        if not isinstance(individual, dict) or "individualId" not in individual:
            raise ValueError(f"Pedigree record {i} has no individualId")

        sample_ids = individual.get("sampleIds")
        if sample_ids is not None:
            check_sample_tree(sample_ids, f"Pedigree record {i}")

        records.append(
            {
                "individualId": individual["individualId"],
                "sex": normalize_sex(individual.get("sex")),
                "sampleIds": sample_ids,
            }
        )
    return records


def check_sample_tree(tree, where: str):
    if not isinstance(tree, dict) or "name" not in tree:
        raise ValueError(f"{where}: sample tree node without a name")
    for child in tree.get("children") or []:
        check_sample_tree(child, where)


def parse_layout(data) -> dict:
    """Check that a layout document carries the row arrays and parent indices."""
    if not isinstance(data, dict):
        raise ValueError("Layout document must be an object")

    layout = data.get("layout")
    pedigree = data.get("pedigree")
    if not isinstance(layout, dict) or not isinstance(pedigree, dict):
        raise ValueError("Layout document needs 'layout' and 'pedigree' sections")

    missing = [k for k in LAYOUT_KEYS if k not in layout] + [
        k for k in PARENT_KEYS if k not in pedigree
    ]
    if missing:
        raise ValueError(f"Layout document is missing: {', '.join(missing)}")

    n_rows = len(layout["nid"])
    for key in LAYOUT_KEYS[1:]:
        if len(layout[key]) != n_rows:
            raise ValueError(f"Layout '{key}' has {len(layout[key])} rows, expected {n_rows}")

    # Layouts exported from R give a scalar instead of a list for single-row data
    for key in PARENT_KEYS:
        if not isinstance(pedigree[key], list):
            pedigree[key] = [pedigree[key]]

    return data


def parse_variant_calls(data) -> dict:
    """Check a parsed variant-call document: a header with sample names and a record list."""
    if not isinstance(data, dict):
        raise ValueError("Variant-call document must be an object")

    header = data.get("header") or {}
    sample_names = header.get("sampleNames", [])
    if not isinstance(sample_names, list):
        raise ValueError("header.sampleNames must be a list")

    records = data.get("records", [])
    if not isinstance(records, list):
        raise ValueError("records must be a list")

    for i, record in enumerate(records):
        if not isinstance(record, dict) or not isinstance(record.get("INFO"), dict):
            raise ValueError(f"Variant record {i} has no INFO object")

    return {"header": {**header, "sampleNames": sample_names}, "records": records}
