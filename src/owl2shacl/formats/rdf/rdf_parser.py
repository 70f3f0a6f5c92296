"""
RDF Parser Module

This module loads the source ontology into an rdflib graph with memory
management.

Components:
- MemoryManager: Pre-flight memory checks before parsing large files
- RDFGraphParser: RDF parsing and graph creation with validation
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import psutil
from rdflib import ConjunctiveGraph, Graph
from rdflib.util import guess_format

logger = logging.getLogger(__name__)


class MemoryManager:
    """
    Pre-flight memory checks for loading ontologies.

    rdflib keeps the whole graph in memory, roughly 3-4 times the size of
    the serialized file, so very large ontologies are refused up front
    instead of failing half way through parsing.
    """

    MIN_AVAILABLE_MB = 256
    MAX_SAFE_FILE_MB = 500
    MEMORY_MULTIPLIER = 3.5
    LOAD_FACTOR = 0.7

    @staticmethod
    def get_available_memory_mb() -> float:
        """Available system memory in MB (``MIN_AVAILABLE_MB`` if unknown)."""
        try:
            return psutil.virtual_memory().available / (1024 * 1024)
        except Exception as e:
            logger.warning(f"Could not determine available memory: {e}")
            return MemoryManager.MIN_AVAILABLE_MB

    @staticmethod
    def get_memory_usage_mb() -> float:
        try:
            return psutil.Process().memory_info().rss / (1024 * 1024)
        except Exception:
            return 0.0

    @classmethod
    def check_memory_available(cls, file_size_mb: float, force: bool = False) -> Tuple[bool, str]:
        """
        Check whether an ontology of the given size can be loaded.

        Args:
            file_size_mb: Size of the serialized ontology in MB.
            force: Load even if the estimate exceeds the safe threshold.

        Returns:
            Tuple of (can_proceed, message)
        """
        estimated_mb = file_size_mb * cls.MEMORY_MULTIPLIER

        if file_size_mb > cls.MAX_SAFE_FILE_MB and not force:
            return False, (
                f"Ontology file ({file_size_mb:.1f}MB) exceeds safe limit of {cls.MAX_SAFE_FILE_MB}MB "
                f"(~{estimated_mb:.0f}MB needed to load it). Use --force to load it anyway."
            )

        available_mb = cls.get_available_memory_mb()
        if available_mb < cls.MIN_AVAILABLE_MB:
            return False, (
                f"Insufficient free memory: {available_mb:.0f}MB available, "
                f"at least {cls.MIN_AVAILABLE_MB}MB required."
            )

        threshold_mb = available_mb * cls.LOAD_FACTOR
        if estimated_mb <= threshold_mb:
            return True, (
                f"Memory OK: ~{estimated_mb:.0f}MB estimated for {file_size_mb:.1f}MB, "
                f"{available_mb:.0f}MB available"
            )
        if force:
            return True, (
                f"WARNING: ~{estimated_mb:.0f}MB estimated, safe threshold is {threshold_mb:.0f}MB. "
                f"Proceeding due to --force."
            )
        return False, (
            f"Ontology may not fit into memory: ~{estimated_mb:.0f}MB estimated, "
            f"safe threshold is {threshold_mb:.0f}MB ({available_mb:.0f}MB available). "
            f"Use --force to load it anyway."
        )

    @classmethod
    def log_memory_status(cls, context: str = "") -> None:
        prefix = f"[{context}] " if context else ""
        logger.debug(
            f"{prefix}Process memory: {cls.get_memory_usage_mb():.0f}MB, "
            f"available: {cls.get_available_memory_mb():.0f}MB"
        )


class RDFGraphParser:
    """
    Loads ontologies into rdflib graphs.

    This class encapsulates the graph parsing logic, including:
    - Pre-flight memory checks
    - Serialization format resolution (explicit, alias or file extension)
    - Graph creation and parsing for multiple serializations
    - Error handling with helpful messages
    """

    SUPPORTED_FORMATS = {
        "turtle",
        "xml",       # RDF/XML & OWL
        "nt",        # N-Triples
        "n3",        # Notation3
        "trig",      # TriG dataset
        "nquads",    # N-Quads dataset
        "trix",      # TriX dataset
        "json-ld",   # JSON-LD
        "hext",      # HexTuples dataset
    }

    DATASET_FORMATS = {
        "trig",
        "nquads",
        "trix",
        "hext",
    }

    FORMAT_ALIASES = {
        "ttl": "turtle",
        "turtle": "turtle",
        "rdf": "xml",
        "rdfxml": "xml",
        "rdf-xml": "xml",
        "owl": "xml",
        "xml": "xml",
        "nt": "nt",
        "ntriples": "nt",
        "n-triples": "nt",
        "n3": "n3",
        "trig": "trig",
        "nq": "nquads",
        "nquad": "nquads",
        "nquads": "nquads",
        "trix": "trix",
        "jsonld": "json-ld",
        "json_ld": "json-ld",
        "json-ld": "json-ld",
        "hext": "hext",
        "hextuples": "hext",
    }

    DEFAULT_FORMAT = "turtle"

    @classmethod
    def normalize_format(cls, rdf_format: Optional[str]) -> Optional[str]:
        """Normalize user-provided format/alias to an rdflib format."""
        if not rdf_format:
            return None
        fmt = rdf_format.strip().lower()
        return cls.FORMAT_ALIASES.get(fmt, fmt)

    @classmethod
    def infer_format_from_path(cls, file_path: Union[str, Path]) -> Optional[str]:
        """Infer RDF format from file extension using rdflib's guess_format."""
        return cls.normalize_format(guess_format(str(file_path)))

    @classmethod
    def resolve_format(
        cls,
        rdf_format: Optional[str],
        file_path: Optional[Union[str, Path]] = None
    ) -> str:
        """Resolve the effective RDF format using explicit input or file hints."""
        normalized = cls.normalize_format(rdf_format)
        if not normalized and file_path is not None:
            normalized = cls.infer_format_from_path(file_path)
        if not normalized:
            normalized = cls.DEFAULT_FORMAT
        if normalized not in cls.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported RDF serialization format '{rdf_format or normalized}'. "
                f"Supported formats: {sorted(cls.SUPPORTED_FORMATS)}"
            )
        return normalized

    @classmethod
    def _create_graph(cls, format_name: str) -> Graph:
        """Instantiate the correct rdflib graph implementation for a format."""
        if format_name in cls.DATASET_FORMATS:
            return ConjunctiveGraph()
        return Graph()

    @staticmethod
    def _check_memory(size_mb: float, force: bool) -> None:
        can_proceed, memory_message = MemoryManager.check_memory_available(size_mb, force=force)
        if not can_proceed:
            logger.error(f"Memory check failed: {memory_message}")
            raise MemoryError(memory_message)
        logger.info(f"Memory check: {memory_message}")

    @staticmethod
    def _finish(graph: Graph, size_mb: float) -> Tuple[Graph, int, float]:
        MemoryManager.log_memory_status("After parsing")
        triple_count = len(graph)
        logger.info(f"Successfully parsed {triple_count} triples ({size_mb:.1f} MB)")
        if triple_count == 0:
            logger.warning("Parsed graph is empty - no triples found")
            raise ValueError("No RDF triples found in the provided content")
        if triple_count > 100000:
            logger.warning(
                f"Large ontology detected ({triple_count} triples). "
                "Processing may take several minutes."
            )
        return graph, triple_count, size_mb

    @staticmethod
    def parse_content(
        content: str,
        rdf_format: Optional[str] = None,
        base_iri: Optional[str] = None,
        force_large_file: bool = False,
    ) -> Tuple[Graph, int, float]:
        """
        Parse RDF content into a graph with memory safety checks.

        Args:
            content: The RDF content as a string
            rdf_format: Optional explicit serialization name/alias (default: turtle)
            base_iri: Optional base IRI for resolving relative IRIs
            force_large_file: If True, skip memory safety checks for large content

        Returns:
            Tuple of (parsed Graph, triple count, content size in MB)

        Raises:
            ValueError: If the content is empty or has invalid syntax
            MemoryError: If insufficient memory is available to parse the content
        """
        if not content or not content.strip():
            raise ValueError("Empty RDF content provided")

        size_mb = len(content.encode('utf-8')) / (1024 * 1024)
        RDFGraphParser._check_memory(size_mb, force_large_file)
        MemoryManager.log_memory_status("Before parsing")

        format_name = RDFGraphParser.resolve_format(rdf_format)
        logger.info(f"Parsing RDF content ({format_name})...")
        graph = RDFGraphParser._create_graph(format_name)
        try:
            graph.parse(data=content, format=format_name, publicID=base_iri)
        except MemoryError as e:
            raise MemoryError(
                f"Insufficient memory while parsing RDF content ({size_mb:.1f} MB). "
                f"Original error: {e}"
            )
        except Exception as e:
            logger.error(f"Failed to parse RDF content: {e}")
            raise ValueError(f"Invalid RDF/TTL syntax: {e}")

        return RDFGraphParser._finish(graph, size_mb)

    @staticmethod
    def parse_file(
        file_path: Union[str, Path],
        rdf_format: Optional[str] = None,
        base_iri: Optional[str] = None,
        force_large_file: bool = False,
    ) -> Tuple[Graph, int, float]:
        """
        Parse an RDF file into a graph with memory safety checks.

        Args:
            file_path: Path to the ontology file
            rdf_format: Optional explicit serialization name/alias
                (inferred from the extension otherwise)
            base_iri: Optional base IRI for resolving relative IRIs
            force_large_file: If True, skip memory safety checks for large files

        Returns:
            Tuple of (parsed Graph, triple count, file size in MB)

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file has invalid syntax or holds no triples
            MemoryError: If insufficient memory is available
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        size_mb = path.stat().st_size / (1024 * 1024)
        logger.info(f"File size: {size_mb:.2f} MB")
        RDFGraphParser._check_memory(size_mb, force_large_file)
        MemoryManager.log_memory_status("Before parsing")

        format_name = RDFGraphParser.resolve_format(rdf_format, path)
        logger.info(f"Loading {path} ({format_name})...")
        graph = RDFGraphParser._create_graph(format_name)
        try:
            graph.parse(str(path), format=format_name, publicID=base_iri)
        except MemoryError as e:
            raise MemoryError(
                f"Insufficient memory while parsing RDF file ({size_mb:.1f} MB). "
                f"Try splitting the ontology into smaller files or increasing available memory. "
                f"Original error: {e}"
            )
        except Exception as e:
            logger.error(f"Failed to parse RDF file: {e}")
            raise ValueError(f"Invalid RDF/TTL syntax: {e}")

        return RDFGraphParser._finish(graph, size_mb)
