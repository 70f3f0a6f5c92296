"""
Unit tests for ontology loading.

Run with: python -m pytest tests/rdf/test_rdf_parser.py -v
"""

import pytest
from rdflib import ConjunctiveGraph

from owl2shacl.formats.rdf.rdf_parser import MemoryManager, RDFGraphParser


@pytest.mark.unit
class TestRDFGraphParser:
    """Tests for format resolution and parsing."""

    # =========================================================================
    # Format Resolution
    # =========================================================================

    @pytest.mark.parametrize("alias,expected", [
        ("ttl", "turtle"),
        ("owl", "xml"),
        ("rdf-xml", "xml"),
        ("ntriples", "nt"),
        ("nq", "nquads"),
        ("jsonld", "json-ld"),
        ("TTL", "turtle"),
    ])
    def test_format_aliases(self, alias, expected):
        assert RDFGraphParser.normalize_format(alias) == expected

    def test_format_inferred_from_extension(self):
        assert RDFGraphParser.resolve_format(None, "ontology.owl") == "xml"
        assert RDFGraphParser.resolve_format(None, "ontology.ttl") == "turtle"

    def test_explicit_format_wins(self):
        assert RDFGraphParser.resolve_format("nt", "ontology.ttl") == "nt"

    def test_default_format(self):
        assert RDFGraphParser.resolve_format(None) == "turtle"

    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="Unsupported RDF serialization format"):
            RDFGraphParser.resolve_format("yaml")

    def test_dataset_formats_use_conjunctive_graph(self):
        assert isinstance(RDFGraphParser._create_graph("trig"), ConjunctiveGraph)

    # =========================================================================
    # Parsing
    # =========================================================================

    def test_parse_content(self, sample_ttl_content):
        graph, count, size_mb = RDFGraphParser.parse_content(sample_ttl_content)
        assert count == len(graph) > 0
        assert size_mb > 0

    def test_parse_empty_content(self):
        with pytest.raises(ValueError, match="Empty RDF content"):
            RDFGraphParser.parse_content("")

    def test_parse_invalid_content(self):
        with pytest.raises(ValueError, match="Invalid RDF/TTL syntax"):
            RDFGraphParser.parse_content("@prefix : <broken")

    def test_parse_content_without_triples(self):
        with pytest.raises(ValueError, match="No RDF triples found"):
            RDFGraphParser.parse_content("@prefix ex: <http://example.org/> .")

    def test_parse_file(self, temp_ttl_file):
        graph, count, _ = RDFGraphParser.parse_file(temp_ttl_file)
        assert count == len(graph)

    def test_parse_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="File not found"):
            RDFGraphParser.parse_file(tmp_path / "missing.ttl")

    def test_memory_check_failure(self, temp_ttl_file, monkeypatch):
        monkeypatch.setattr(
            MemoryManager,
            "check_memory_available",
            classmethod(lambda cls, size, force=False: (False, "not enough memory")),
        )
        with pytest.raises(MemoryError, match="not enough memory"):
            RDFGraphParser.parse_file(temp_ttl_file)


@pytest.mark.unit
class TestMemoryManager:
    """Tests for pre-flight memory checks."""

    def test_force_allows_large_file(self, monkeypatch):
        monkeypatch.setattr(MemoryManager, "get_available_memory_mb", staticmethod(lambda: 1024.0))
        can_proceed, message = MemoryManager.check_memory_available(10_000, force=True)
        assert can_proceed
        assert "--force" in message

    def test_large_file_refused_without_force(self):
        can_proceed, message = MemoryManager.check_memory_available(10_000)
        assert not can_proceed
        assert "exceeds safe limit" in message

    def test_small_file_passes(self, monkeypatch):
        monkeypatch.setattr(MemoryManager, "get_available_memory_mb", staticmethod(lambda: 8192.0))
        can_proceed, _ = MemoryManager.check_memory_available(1.0)
        assert can_proceed

    def test_low_memory_fails(self, monkeypatch):
        monkeypatch.setattr(MemoryManager, "get_available_memory_mb", staticmethod(lambda: 100.0))
        can_proceed, message = MemoryManager.check_memory_available(1.0)
        assert not can_proceed
        assert message
