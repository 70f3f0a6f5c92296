"""
Convert and queries command implementations.
"""

import argparse
import json
import logging
from pathlib import Path

from ...converters.shacl_serializer import ShaclSerializer
from ...core.exceptions import ConversionError
from ...formats.rdf.ontology_queries import OntologyQueries
from ...shacl_converter import convert_file
from ...shared.models.config import ConverterConfig
from ..helpers import print_footer, print_header
from .base import BaseCommand, ExitCode, print_conversion_summary

logger = logging.getLogger(__name__)


class ConvertCommand(BaseCommand):
    """
    Convert an ontology to SHACL.

    Usage:
        convert <ontology> [-o OUT] [--config FILE] [--odity KIND[:ROLE]=MODE ...]
    """

    def execute(self, args: argparse.Namespace) -> int:
        try:
            self.setup_logging_from_config(args.log_level, args.log_file)
            config = ConverterConfig.from_dict(self.config.get("odity_handling"))
            config = config.with_overrides(args.odity)
        except (ValueError, FileNotFoundError, IOError) as e:
            print(f"✗ Invalid configuration: {e}")
            return ExitCode.INPUT_ERROR

        logger.debug(f"Odity handling: {config.to_dict()}")

        try:
            result = convert_file(
                args.ontology,
                config=config,
                rdf_format=args.input_format,
                base_iri=args.base_iri,
                force_large_file=args.force,
                show_progress=not args.no_progress,
            )
        except FileNotFoundError:
            print(f"✗ File not found: {args.ontology}")
            return ExitCode.INPUT_ERROR
        except (ValueError, MemoryError) as e:
            print(f"✗ Could not load ontology: {e}")
            return ExitCode.INPUT_ERROR
        except ConversionError as e:
            logger.error(f"Conversion aborted: {e}")
            print(f"✗ Conversion aborted: {e}")
            return ExitCode.CONVERSION_ERROR

        try:
            output_path = ShaclSerializer.write(result.store, args.output, args.output_format)
            if args.summary_json:
                summary_path = Path(args.summary_json)
                summary_path.parent.mkdir(parents=True, exist_ok=True)
                summary_path.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
        except (IOError, PermissionError) as e:
            print(f"✗ Could not write output: {e}")
            return ExitCode.INPUT_ERROR

        print_header("CONVERSION RESULT")
        print_conversion_summary(result)
        print(f"\nSHACL shapes written to: {output_path}")
        print_footer()
        return ExitCode.SUCCESS


class QueriesCommand(BaseCommand):
    """
    Print or dump the SPARQL queries used to read ontologies.

    Usage:
        queries [--output-dir DIR]
    """

    def execute(self, args: argparse.Namespace) -> int:
        if args.output_dir:
            try:
                written = OntologyQueries.dump_queries(args.output_dir)
            except OSError as e:
                print(f"✗ Could not write queries: {e}")
                return ExitCode.INPUT_ERROR
            for path in written:
                print(f"✓ {path}")
            return ExitCode.SUCCESS

        for name, text in OntologyQueries.all_queries().items():
            print(f"# {name}")
            print(text)
        return ExitCode.SUCCESS
