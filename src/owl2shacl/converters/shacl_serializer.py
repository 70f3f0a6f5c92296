"""
SHACL Serializer - writes the generated shapes graph.

Binds the usual prefixes (``sh``, ``rdf``, ``rdfs``, ``xsd``, ``owl``) plus
those of the source ontology so the output reads like the input.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rdflib import Graph, OWL, RDF, RDFS, XSD
from rdflib.namespace import SH

from ..core.shape_store import ShapeStore

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = Path("target") / "shacl.ttl"
DEFAULT_OUTPUT_FORMAT = "turtle"


class ShaclSerializer:
    """
    Serializes a ``ShapeStore`` to any rdflib serialization.

    Example:
        >>> ShaclSerializer.bind_prefixes(store, ontology_graph)
        >>> ttl = ShaclSerializer.serialize(store)
        >>> ShaclSerializer.write(store, "target/shacl.ttl")
    """

    STANDARD_PREFIXES = {
        "sh": SH,
        "rdf": RDF,
        "rdfs": RDFS,
        "xsd": XSD,
        "owl": OWL,
    }

    @staticmethod
    def bind_prefixes(store: ShapeStore, source_graph: Optional[Graph] = None) -> None:
        """
        Bind standard prefixes and, if given, the source ontology's prefixes.

        Args:
            store: The shape store to bind prefixes on.
            source_graph: The ontology graph whose prefixes should be reused.
        """
        manager = store.namespace_manager
        for prefix, namespace in ShaclSerializer.STANDARD_PREFIXES.items():
            manager.bind(prefix, namespace, override=True, replace=True)
        if source_graph is None:
            return
        standard = {str(ns) for ns in ShaclSerializer.STANDARD_PREFIXES.values()}
        for prefix, namespace in source_graph.namespaces():
            if str(namespace) in standard or prefix in ShaclSerializer.STANDARD_PREFIXES:
                continue
            manager.bind(prefix, namespace, override=False)

    @staticmethod
    def serialize(store: ShapeStore, rdf_format: str = DEFAULT_OUTPUT_FORMAT) -> str:
        """Serialize the shapes graph to a string."""
        return store.graph.serialize(format=rdf_format)

    @staticmethod
    def write(
        store: ShapeStore,
        output_path: Union[str, Path] = DEFAULT_OUTPUT_PATH,
        rdf_format: str = DEFAULT_OUTPUT_FORMAT,
    ) -> Path:
        """
        Write the shapes graph to a file, creating parent directories.

        Returns:
            The path written to.

        Raises:
            PermissionError: If the file cannot be written.
            IOError: On other write errors.
        """
        path = Path(output_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            store.graph.serialize(destination=str(path), format=rdf_format, encoding="utf-8")
        except PermissionError:
            logger.error(f"Permission denied writing {path}")
            raise PermissionError(f"Permission denied: {path}")
        except OSError as e:
            logger.error(f"Error writing file {path}: {e}")
            raise IOError(f"Error writing file: {e}")
        logger.info(f"Wrote {len(store)} SHACL triples to {path}")
        return path
