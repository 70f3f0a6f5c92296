"""
Unit tests for the ontology query layer.

Run with: python -m pytest tests/test_ontology_queries.py -v
"""

from unittest.mock import MagicMock

import pytest
from rdflib import BNode, Literal, OWL, URIRef, XSD

from owl2shacl.core.exceptions import UpstreamQueryError
from owl2shacl.formats.rdf.ontology_queries import (
    OntologyQueries,
    QUERY_TEMPLATES,
    query_name,
)
from owl2shacl.shared.models.config import PropertyRole
from owl2shacl.shared.models.records import ConventionKind

EX = "http://example.org/"


def ex(name: str) -> URIRef:
    return URIRef(EX + name)


@pytest.mark.unit
class TestClassQuery:
    """Tests for class discovery."""

    def test_typed_and_subclass_classes(self, make_graph):
        """Classes come from rdf:type and rdfs:subClassOf, distinct and sorted"""
        graph = make_graph('''
            :B a owl:Class .
            :A a rdfs:Class .
            :C rdfs:subClassOf :A .
            :B rdfs:subClassOf :A .
        ''')
        subjects = [r.subject for r in OntologyQueries(graph).query_classes()]
        assert subjects == [ex("A"), ex("B"), ex("C")]

    def test_anonymous_classes_skipped(self, make_graph):
        """Blank-node classes (e.g. union expressions) are not classes to shape"""
        graph = make_graph('''
            :A a owl:Class .
            [] a owl:Class ; owl:unionOf ( :A ) .
        ''')
        subjects = [r.subject for r in OntologyQueries(graph).query_classes()]
        assert subjects == [ex("A")]

    def test_no_classes(self, make_graph):
        graph = make_graph(':p a rdf:Property .')
        assert OntologyQueries(graph).query_classes() == []


@pytest.mark.unit
class TestPropertyQuery:
    """Tests for property discovery and value grouping."""

    def test_annotations_and_cardinalities(self, make_graph):
        graph = make_graph('''
            :p a owl:DatatypeProperty ;
                rdfs:label "b label", "a label" ;
                rdfs:comment "desc" ;
                owl:cardinality 1 ;
                owl:minCardinality 0 ;
                owl:maxCardinality 3 .
        ''')
        [record] = OntologyQueries(graph).query_properties()
        assert record.subject == ex("p")
        assert record.property_type == OWL.DatatypeProperty
        assert record.labels == (Literal("a label"), Literal("b label"))
        assert record.descriptions == (Literal("desc"),)
        assert [int(c) for c in record.cardinalities] == [1]
        assert [int(c) for c in record.min_cardinalities] == [0]
        assert [int(c) for c in record.max_cardinalities] == [3]

    def test_all_property_types_found(self, make_graph):
        graph = make_graph('''
            :a a rdf:Property .
            :b a owl:ObjectProperty .
            :c a owl:DatatypeProperty .
            :d a owl:AnnotationProperty .
        ''')
        records = OntologyQueries(graph).query_properties()
        assert [r.subject for r in records] == [ex("a"), ex("b"), ex("c"), ex("d")]

    def test_multi_typed_property_uses_precedence(self, make_graph):
        """A property typed several ways gets a single record with the most specific type"""
        graph = make_graph(':p a rdf:Property, owl:DatatypeProperty .')
        [record] = OntologyQueries(graph).query_properties()
        assert record.property_type == OWL.DatatypeProperty

    def test_direct_values(self, make_graph):
        graph = make_graph('''
            :p a owl:ObjectProperty ;
                rdfs:range :B, :A ;
                rdfs:domain :C .
        ''')
        [record] = OntologyQueries(graph).query_properties()
        assert record.values_for(PropertyRole.RANGE, ConventionKind.DIRECT) == (ex("A"), ex("B"))
        assert record.values_for(PropertyRole.DOMAIN, ConventionKind.DIRECT) == (ex("C"),)
        assert record.values_for(PropertyRole.RANGE, ConventionKind.INCLUDES) == ()

    def test_includes_values_from_all_vocabularies(self, make_graph):
        """rangeIncludes/domainIncludes are recognised in every supported namespace"""
        graph = make_graph('''
            @prefix schemas: <https://schema.org/> .
            @prefix dcid: <https://datacommons.org/browser/> .
            :p a rdf:Property ;
                schema:rangeIncludes :A ;
                schemas:rangeIncludes :B ;
                dcam:rangeIncludes :C ;
                dcid:domainIncludes :D .
        ''')
        [record] = OntologyQueries(graph).query_properties()
        assert record.values_for(PropertyRole.RANGE, ConventionKind.INCLUDES) == (ex("A"), ex("B"), ex("C"))
        assert record.values_for(PropertyRole.DOMAIN, ConventionKind.INCLUDES) == (ex("D"),)

    def test_non_union_anonymous_direct_values_kept(self, make_graph):
        """Only union nodes are left to the union list convention"""
        graph = make_graph('''
            :p a owl:ObjectProperty ;
                rdfs:range [ owl:intersectionOf ( :A :B ) ] .
        ''')
        [record] = OntologyQueries(graph).query_properties()
        [value] = record.values_for(PropertyRole.RANGE, ConventionKind.DIRECT)
        assert isinstance(value, BNode)

    def test_union_list_values(self, make_graph):
        """Union list members are returned; the union node itself is not a direct value"""
        graph = make_graph('''
            :p a owl:ObjectProperty ;
                rdfs:range [ owl:unionOf ( :A :B :C ) ] .
        ''')
        [record] = OntologyQueries(graph).query_properties()
        assert record.values_for(PropertyRole.RANGE, ConventionKind.UNION_LIST) == (ex("A"), ex("B"), ex("C"))
        assert record.values_for(PropertyRole.RANGE, ConventionKind.DIRECT) == ()

    def test_values_of_non_properties_ignored(self, make_graph):
        graph = make_graph(':notAProperty rdfs:range :A .')
        assert OntologyQueries(graph).query_properties() == []

    def test_query_failure_wrapped(self):
        """Failures of the underlying query engine become UpstreamQueryError"""
        graph = MagicMock()
        graph.query.side_effect = RuntimeError("engine down")
        with pytest.raises(UpstreamQueryError, match="Q_CLASSES failed: engine down") as exc_info:
            OntologyQueries(graph).query_classes()
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.query_name == "Q_CLASSES"


@pytest.mark.unit
class TestQueryTexts:
    """Tests for query naming and dumping."""

    def test_query_names(self):
        assert query_name((PropertyRole.RANGE, ConventionKind.UNION_LIST)) == "Q_RANGE_UNION_LIST"
        names = set(OntologyQueries.all_queries())
        assert {"Q_CLASSES", "Q_PROPERTIES"} <= names
        assert len(names) == 2 + len(QUERY_TEMPLATES)

    def test_queries_carry_prelude(self):
        for text in OntologyQueries.all_queries().values():
            assert "PREFIX owl:" in text
            assert "SELECT" in text

    def test_dump_queries(self, tmp_path):
        written = OntologyQueries.dump_queries(tmp_path / "queries")
        assert len(written) == len(OntologyQueries.all_queries())
        classes = tmp_path / "queries" / "Q_CLASSES.sparql.txt"
        assert classes in written
        assert "rdfs:subClassOf" in classes.read_text(encoding="utf-8")

    def test_xsd_range_kept_as_iri(self, make_graph):
        graph = make_graph(':p a owl:DatatypeProperty ; rdfs:range xsd:string .')
        [record] = OntologyQueries(graph).query_properties()
        assert record.values_for(PropertyRole.RANGE, ConventionKind.DIRECT) == (XSD.string,)
