"""
End-to-end tests for the OWL to SHACL converter.

Run with: python -m pytest tests/test_converter.py -v
"""

import json

import pytest
from rdflib import Graph, Literal, RDF, URIRef
from rdflib.compare import isomorphic
from rdflib.namespace import SH

from owl2shacl import (
    ConversionError,
    ConverterConfig,
    OdityError,
    OdityKind,
    ShapeStore,
    UnsupportedConstructError,
    convert,
    convert_content,
    convert_file,
)
from owl2shacl.converters.shacl_serializer import ShaclSerializer

EX = "http://example.org/"


def ex(name: str) -> URIRef:
    return URIRef(EX + name)


def shape(name: str) -> URIRef:
    return URIRef(EX + name + "Shape")


MIXED_RANGE_TTL = '''
    :Person a owl:Class .
    :Organization a owl:Class .

    :worksFor a owl:ObjectProperty ;
        rdfs:range :Organization .

    :knows a rdf:Property ;
        schema:rangeIncludes :Person .
'''


@pytest.mark.integration
class TestConvert:
    """Tests for whole-ontology conversion."""

    def test_sample_ontology(self, sample_graph):
        result = convert(sample_graph)
        store = result.store

        assert result.node_shape_count == 2
        assert result.property_shape_count == 2
        assert not result.has_warnings

        assert (shape("Person"), RDF.type, SH.NodeShape) in store
        assert (shape("Person"), SH.targetClass, ex("Person")) in store
        assert (shape("name"), SH.path, ex("name")) in store
        assert (shape("name"), SH.name, Literal("name")) in store
        assert (shape("name"), SH.description, Literal("The name of a person")) in store
        assert (shape("name"), SH.datatype, URIRef("http://www.w3.org/2001/XMLSchema#stringShape")) in store
        assert (shape("worksFor"), SH["class"], shape("Organization")) in store
        assert (shape("Person"), SH.property, shape("name")) in store
        assert (shape("Person"), SH.property, shape("worksFor")) in store

    def test_ontology_not_modified(self, sample_graph):
        before = len(sample_graph)
        convert(sample_graph)
        assert len(sample_graph) == before

    def test_idempotent(self, sample_graph):
        """Converting twice yields the same graph"""
        first = convert(sample_graph).store.graph
        second = convert(sample_graph).store.graph
        assert isomorphic(first, second)

    def test_and_list_error_aborts(self, make_graph):
        graph = make_graph('''
            :A a owl:Class .
            :B a owl:Class .
            :p a owl:ObjectProperty ; rdfs:range :A, :B .
        ''')
        config = ConverterConfig().with_overrides(["and-list:range=error"])
        store = ShapeStore()
        with pytest.raises(OdityError):
            convert(graph, config, store=store)

        # classes were converted before the failing property, the property itself left nothing
        assert (shape("A"), RDF.type, SH.NodeShape) in store
        assert list(store.triples((shape("p"), None, None))) == []

    def test_and_list_ignore_keeps_shape(self, make_graph):
        graph = make_graph(':p a owl:ObjectProperty ; rdfs:label "p" ; rdfs:range :A, :B .')
        config = ConverterConfig().with_overrides(["and-list=ignore"])
        store = convert(graph, config).store

        assert (shape("p"), SH.name, Literal("p")) in store
        assert list(store.triples((shape("p"), SH["class"], None))) == []

    def test_and_list_warn_recorded(self, make_graph):
        graph = make_graph(':p a owl:ObjectProperty ; rdfs:range :A, :B .')
        result = convert(graph)

        assert result.warnings_by_kind == {"and-list": 1}
        assert len(list(result.store.triples((shape("p"), SH["class"], None)))) == 2

    def test_style_mix_ontology_error_after_scan(self, make_graph):
        """The ontology-wide check fails only once every property was converted"""
        graph = make_graph(MIXED_RANGE_TTL)
        config = ConverterConfig().with_overrides(["style-mix-ontology=error"])
        store = ShapeStore()
        with pytest.raises(OdityError) as exc_info:
            convert(graph, config, store=store)

        assert exc_info.value.odity_kind is OdityKind.STYLE_MIX_ONTOLOGY
        assert "direct" in str(exc_info.value)
        assert "includes" in str(exc_info.value)
        assert (shape("knows"), SH["class"], shape("Person")) in store
        assert (shape("worksFor"), SH["class"], shape("Organization")) in store

    def test_style_mix_ontology_warn(self, make_graph):
        result = convert(make_graph(MIXED_RANGE_TTL))
        assert result.warnings_by_kind == {"style-mix-ontology": 1}

    def test_union_list_domain(self, make_graph):
        graph = make_graph('''
            :p a owl:ObjectProperty ;
                rdfs:domain [ owl:unionOf ( :A :B ) ] .
        ''')
        store = convert(graph).store
        assert (shape("A"), SH.property, shape("p")) in store
        assert (shape("B"), SH.property, shape("p")) in store

    def test_nested_class_expression_unsupported(self, make_graph):
        graph = make_graph('''
            :p a owl:ObjectProperty ;
                rdfs:range [ owl:unionOf ( :A [ owl:intersectionOf ( :B :C ) ] ) ] .
        ''')
        with pytest.raises(UnsupportedConstructError):
            convert(graph)

    @pytest.mark.parametrize("expression", [
        "rdfs:range [ owl:intersectionOf ( :A :B ) ]",
        "rdfs:range [ a owl:Restriction ; owl:onProperty :q ; owl:someValuesFrom :A ]",
        "rdfs:domain [ owl:oneOf ( :a :b ) ]",
        "rdfs:domain [ owl:complementOf :A ]",
    ])
    def test_anonymous_class_expression_unsupported(self, make_graph, expression):
        """Anonymous ranges/domains other than union lists abort instead of vanishing"""
        graph = make_graph(f":p a owl:ObjectProperty ; {expression} .")
        store = ShapeStore()
        with pytest.raises(UnsupportedConstructError):
            convert(graph, store=store)
        assert list(store.triples((shape("p"), None, None))) == []

    def test_errors_share_base_class(self, make_graph):
        graph = make_graph(':p a owl:ObjectProperty ; rdfs:range :A, :B .')
        with pytest.raises(ConversionError):
            convert(graph, ConverterConfig().with_overrides(["and-list=error"]))

    def test_result_to_dict(self, make_graph):
        result = convert(make_graph(MIXED_RANGE_TTL))
        data = result.to_dict()

        assert data["node_shape_count"] == 2
        assert data["property_shape_count"] == 2
        assert data["shacl_triple_count"] == len(result.store)
        assert data["warnings"][0]["kind"] == "style-mix-ontology"
        json.dumps(data)

    def test_summary(self, make_graph):
        summary = convert(make_graph(MIXED_RANGE_TTL)).get_summary()
        assert "Node Shapes: 2" in summary
        assert "Warnings: 1" in summary


@pytest.mark.integration
class TestConvertEntryPoints:
    """Tests for the content and file entry points."""

    def test_convert_content(self, sample_ttl_content):
        result = convert_content(sample_ttl_content)
        assert result.node_shape_count == 2
        assert result.triple_count > 0

    def test_convert_content_empty(self):
        with pytest.raises(ValueError, match="Empty RDF content"):
            convert_content("   ")

    def test_convert_file(self, temp_ttl_file):
        result = convert_file(temp_ttl_file, show_progress=False)
        assert result.property_shape_count == 2

    def test_convert_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            convert_file(tmp_path / "missing.ttl")


@pytest.mark.integration
class TestShaclSerializer:
    """Tests for writing the shapes graph."""

    def test_write_creates_directories(self, sample_graph, tmp_path):
        store = convert(sample_graph).store
        output = ShaclSerializer.write(store, tmp_path / "target" / "shacl.ttl")

        assert output.exists()
        reloaded = Graph().parse(str(output), format="turtle")
        assert isomorphic(reloaded, store.graph)

    def test_prefixes_bound(self, sample_graph):
        text = ShaclSerializer.serialize(convert(sample_graph).store)
        assert "@prefix sh: <http://www.w3.org/ns/shacl#>" in text
        assert "sh:NodeShape" in text
