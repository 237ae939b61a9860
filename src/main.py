"""
1) Load the parsed pedigree, kinship layout and de-novo variant-call documents.
2) Build the pedigree graph of persons.
3) Map the layout onto it: positioned person and marriage nodes, spouse and child links.
4) Attach the de-novo mutation from the first variant record.
5) Validate the resulting pedigree graph.
6) Write the {nodes, links} graph as JSON or DOT.
"""

import argparse
from pathlib import Path

from config import PipelineConfig
from export import write_graph
from graph import build_graph_from_pedigree
from layout import process_pedigree
from overlay import apply_mutation_overlay
from parsing import load_json, parse_layout, parse_pedigree_records, parse_variant_calls
from validation import validate_graph


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a positioned pedigree graph annotated with a de-novo mutation."
    )
    parser.add_argument("pedigree", type=Path, help="Parsed pedigree records (JSON).")
    parser.add_argument("layout", type=Path, help="Kinship layout data (JSON).")
    parser.add_argument("variants", type=Path, help="Parsed de-novo variant calls (JSON).")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("pedigree_graph.json"),
        help="Output file; .dot/.gv writes DOT, anything else JSON (default: pedigree_graph.json).",
    )
    parser.add_argument("--column-spacing", type=float, default=PipelineConfig.column_spacing)
    parser.add_argument("--row-spacing", type=float, default=PipelineConfig.row_spacing)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = PipelineConfig(column_spacing=args.column_spacing, row_spacing=args.row_spacing)

    print(f"Loading pedigree: {args.pedigree}")
    records = parse_pedigree_records(load_json(args.pedigree))
    print(f"  Found {len(records)} individuals")

    print(f"Loading layout: {args.layout}")
    layout_data = parse_layout(load_json(args.layout))

    print(f"Loading variant calls: {args.variants}")
    vcf_data = parse_variant_calls(load_json(args.variants))

    print("Building pedigree graph...")
    ped_graph = build_graph_from_pedigree(records)
    print(f"  Graph has {len(ped_graph.get_persons())} persons")

    print("Mapping layout...")
    graph_data = process_pedigree(ped_graph, layout_data, config)
    print(
        f"  Graph has {len(graph_data['nodes'])} nodes, {len(graph_data['links'])} links "
        f"and {len(ped_graph.get_marriages())} marriages"
    )

    print("Attaching mutation...")
    overlay = apply_mutation_overlay(ped_graph, vcf_data, config)
    for notice in overlay.notices:
        print(f"  {notice}")
    if overlay.mutation_found:
        print(f"  Mutation {overlay.mutation} attached to person {overlay.owner.id}")
        print(f"  Annotated {len(overlay.annotated)} sample columns")
        if overlay.unmatched:
            print(f"  Skipped unmatched columns: {', '.join(overlay.unmatched)}")

    print("Validating graph...")
    warnings = validate_graph(ped_graph)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:  # Show first 10 warnings
            print(f"    - {w}")
        if len(warnings) > 10:
            print(f"    ... and {len(warnings) - 10} more")
    else:
        print("  No validation issues found")

    write_graph(graph_data, args.output)
    print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
