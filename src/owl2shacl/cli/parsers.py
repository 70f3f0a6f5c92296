"""
Argument parsing configuration for the CLI.
"""

import argparse

from ..converters.shacl_serializer import DEFAULT_OUTPUT_FORMAT, DEFAULT_OUTPUT_PATH
from ..shared.models.config import OdityHandling, OdityKind, PropertyRole


ODITY_HELP = (
    "Override odity handling as KIND[:ROLE]=MODE (repeatable). "
    f"KIND: {', '.join(k.value for k in OdityKind)}; "
    f"ROLE: {', '.join(r.value for r in PropertyRole)} (both if omitted); "
    f"MODE: {', '.join(m.value for m in OdityHandling)}. "
    "Example: --odity and-list=error --odity style-mix-ontology:domain=ignore"
)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="owl2shacl",
        description="Convert OWL/RDFS ontologies into SHACL shapes graphs.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # convert
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert an ontology to SHACL shapes",
    )
    convert_parser.add_argument("ontology", help="Path to the ontology file (.ttl, .owl, .rdf, ...)")
    convert_parser.add_argument(
        "-o", "--output",
        default=str(DEFAULT_OUTPUT_PATH),
        help=f"Output file for the shapes graph (default: {DEFAULT_OUTPUT_PATH})",
    )
    convert_parser.add_argument(
        "--format",
        dest="input_format",
        help="Input serialization (inferred from the file extension if omitted)",
    )
    convert_parser.add_argument(
        "--output-format",
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output serialization (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    convert_parser.add_argument("--base-iri", help="Base IRI for resolving relative IRIs")
    convert_parser.add_argument("--config", help="Path to a JSON configuration file")
    convert_parser.add_argument(
        "--odity",
        action="append",
        default=[],
        metavar="KIND[:ROLE]=MODE",
        help=ODITY_HELP,
    )
    convert_parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides the config file, default: INFO)",
    )
    convert_parser.add_argument("--log-file", help="Also log to this file")
    convert_parser.add_argument(
        "--force",
        action="store_true",
        help="Skip memory safety checks for large ontologies",
    )
    convert_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable progress bars",
    )
    convert_parser.add_argument(
        "--summary-json",
        help="Also write the conversion summary as JSON to this file",
    )

    # queries
    queries_parser = subparsers.add_parser(
        "queries",
        help="Print or dump the SPARQL queries used to read ontologies",
    )
    queries_parser.add_argument(
        "--output-dir",
        help="Write each query to <dir>/<NAME>.sparql.txt instead of printing",
    )

    return parser
