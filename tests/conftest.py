"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # End-to-end conversions of whole ontologies
    pytest -m cli           # Command line interface tests
"""

import pytest
import sys
import os

from rdflib import Graph

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from owl2shacl.core.shape_store import ShapeStore  # noqa: E402
from owl2shacl.converters.odity_handler import OdityHandler  # noqa: E402
from owl2shacl.shared.models.config import ConverterConfig  # noqa: E402


PREFIXES = '''
    @prefix : <http://example.org/> .
    @prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
    @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
    @prefix owl: <http://www.w3.org/2002/07/owl#> .
    @prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
    @prefix schema: <http://schema.org/> .
    @prefix dcam: <http://purl.org/dc/dcam/> .
'''


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: End-to-end conversion tests")
    config.addinivalue_line("markers", "cli: Command line interface tests")


def make_graph(body: str) -> Graph:
    """Parse a Turtle body (prefixes are added) into a graph."""
    graph = Graph()
    graph.parse(data=PREFIXES + body, format="turtle")
    return graph


@pytest.fixture
def sample_ttl_content():
    """Small ontology using direct range/domain declarations only."""
    return PREFIXES + '''
        :Person a owl:Class ;
            rdfs:label "Person" .

        :Organization a owl:Class .

        :name a owl:DatatypeProperty ;
            rdfs:label "name" ;
            rdfs:comment "The name of a person" ;
            rdfs:domain :Person ;
            rdfs:range xsd:string .

        :worksFor a owl:ObjectProperty ;
            rdfs:domain :Person ;
            rdfs:range :Organization .
    '''


@pytest.fixture
def sample_graph(sample_ttl_content):
    graph = Graph()
    graph.parse(data=sample_ttl_content, format="turtle")
    return graph


@pytest.fixture
def temp_ttl_file(tmp_path, sample_ttl_content):
    """Create a temporary TTL file for testing."""
    ttl_file = tmp_path / "test_ontology.ttl"
    ttl_file.write_text(sample_ttl_content, encoding="utf-8")
    return str(ttl_file)


@pytest.fixture
def store():
    return ShapeStore()


@pytest.fixture
def odities():
    """Odity handler with the default configuration (WARN everywhere)."""
    return OdityHandler(ConverterConfig())


@pytest.fixture(name="make_graph")
def make_graph_fixture():
    """The ``make_graph`` helper, for tests that build their own ontologies."""
    return make_graph
