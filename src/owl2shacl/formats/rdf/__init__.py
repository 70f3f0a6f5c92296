"""
RDF/OWL Format Support Package

Components:
- rdf_parser: RDFGraphParser for loading ontologies with memory management
- ontology_queries: OntologyQueries running the fixed class/property queries

Usage:
    from owl2shacl.formats.rdf import RDFGraphParser, OntologyQueries

    graph, triple_count, size_mb = RDFGraphParser.parse_file("ontology.ttl")
    properties = OntologyQueries(graph).query_properties()
"""

from .rdf_parser import (
    MemoryManager,
    RDFGraphParser,
)
from .ontology_queries import (
    OntologyQueries,
    QUERY_PRELUDE,
    QUERY_TEMPLATES,
    Q_CLASSES,
    Q_PROPERTIES,
    PROPERTY_TYPE_PRECEDENCE,
)

__all__ = [
    'MemoryManager',
    'RDFGraphParser',
    'OntologyQueries',
    'QUERY_PRELUDE',
    'QUERY_TEMPLATES',
    'Q_CLASSES',
    'Q_PROPERTIES',
    'PROPERTY_TYPE_PRECEDENCE',
]
