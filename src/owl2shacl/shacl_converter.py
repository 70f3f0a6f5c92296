"""
OWL/RDFS to SHACL Converter

This module converts an OWL/RDFS ontology graph into a SHACL shapes graph:
one node shape per class, one property shape per property, with the
properties' range and domain declarations turned into ``sh:class`` /
``sh:datatype`` / ``sh:property`` constraints.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rdflib import Graph

from .converters import (
    ClassShapeGenerator,
    OdityHandler,
    OntologyStyleAuditor,
    PropertyShapeGenerator,
    ShaclSerializer,
)
from .core.shape_store import ShapeStore
from .formats.rdf import OntologyQueries, RDFGraphParser
from .shared.models import ConversionResult, ConverterConfig

logger = logging.getLogger(__name__)


class ShaclConverter:
    """
    Converts OWL/RDFS ontologies to SHACL shapes.

    The conversion runs in three steps:

    1. classes become node shapes
    2. properties become property shapes, with range/domain constraints
    3. the ontology-wide mix of range/domain conventions is audited

    The first fatal condition aborts the run with a ``ConversionError``.
    Triples committed before that point stay in the store.
    """

    def __init__(self, config: Optional[ConverterConfig] = None, show_progress: bool = True):
        """
        Initialize the converter.

        Args:
            config: Odity handling configuration (defaults to WARN everywhere)
            show_progress: Show tqdm progress bars for large ontologies
        """
        self.config = config or ConverterConfig()
        self.show_progress = show_progress

    def convert(self, ontology: Graph, store: Optional[ShapeStore] = None) -> ConversionResult:
        """
        Convert an ontology graph to SHACL.

        Args:
            ontology: The source ontology (only read, never modified)
            store: Optional store to append to; a new one is created otherwise.
                Pass one in to keep the partially filled store on failure.

        Returns:
            ConversionResult holding the store, counts and reported odities

        Raises:
            ConversionError: If an odity in ERROR mode, an unsupported construct,
                a malformed term or a query failure is encountered
        """
        store = store if store is not None else ShapeStore()
        ShaclSerializer.bind_prefixes(store, ontology)
        odities = OdityHandler(self.config)
        queries = OntologyQueries(ontology)
        result = ConversionResult(store=store, warnings=odities.warnings, triple_count=len(ontology))

        logger.info(f"Converting ontology with {result.triple_count} triples to SHACL ...")

        class_records = queries.query_classes()
        result.node_shape_count = ClassShapeGenerator(store, self.show_progress).generate(class_records)

        property_records = queries.query_properties()
        usage = PropertyShapeGenerator(store, odities, self.show_progress).generate(property_records)
        result.property_shape_count = len(property_records)

        OntologyStyleAuditor(odities).audit(usage)

        logger.info(
            f"Generated {result.node_shape_count} node shapes and "
            f"{result.property_shape_count} property shapes ({len(store)} triples, "
            f"{len(result.warnings)} warnings)"
        )
        return result


def convert(
    ontology: Graph,
    config: Optional[ConverterConfig] = None,
    store: Optional[ShapeStore] = None,
    show_progress: bool = False,
) -> ConversionResult:
    """
    Convert an ontology graph to a SHACL shapes graph.

    Args:
        ontology: The source ontology graph
        config: Odity handling configuration
        store: Optional store to append to
        show_progress: Show progress bars

    Returns:
        ConversionResult; ``result.store.graph`` is the shapes graph

    Raises:
        ConversionError: On the first fatal condition
    """
    return ShaclConverter(config, show_progress=show_progress).convert(ontology, store)


def convert_content(
    content: str,
    config: Optional[ConverterConfig] = None,
    rdf_format: Optional[str] = None,
    base_iri: Optional[str] = None,
) -> ConversionResult:
    """
    Parse ontology content and convert it to SHACL.

    Raises:
        ValueError: If the content is empty or not valid RDF
        ConversionError: On the first fatal conversion condition
    """
    graph, _, _ = RDFGraphParser.parse_content(content, rdf_format=rdf_format, base_iri=base_iri)
    return convert(graph, config)


def convert_file(
    file_path: Union[str, Path],
    config: Optional[ConverterConfig] = None,
    rdf_format: Optional[str] = None,
    base_iri: Optional[str] = None,
    force_large_file: bool = False,
    show_progress: bool = True,
) -> ConversionResult:
    """
    Load an ontology file and convert it to SHACL.

    Args:
        file_path: Path to the ontology file
        config: Odity handling configuration
        rdf_format: Serialization of the file (inferred from its extension otherwise)
        base_iri: Base IRI for resolving relative IRIs
        force_large_file: Skip the memory safety checks
        show_progress: Show progress bars

    Returns:
        ConversionResult

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid RDF
        MemoryError: If the file is too large for the available memory
        ConversionError: On the first fatal conversion condition
    """
    graph, _, _ = RDFGraphParser.parse_file(
        file_path,
        rdf_format=rdf_format,
        base_iri=base_iri,
        force_large_file=force_large_file,
    )
    return convert(graph, config, show_progress=show_progress)
