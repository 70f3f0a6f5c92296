"""
Ontology Queries - fixed SPARQL queries over the source ontology.

The queries are plain data: a class query, a property query and one
range/domain query per (role, convention) in ``QUERY_TEMPLATES``. Results
are folded into ``ClassRecord`` and ``PropertyRecord`` rows sorted by
subject, with range/domain values grouped and de-duplicated per property.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from rdflib import BNode, Graph, OWL, RDF, URIRef
from rdflib.term import Node

from ...core.exceptions import UpstreamQueryError
from ...shared.models.config import PropertyRole
from ...shared.models.records import ClassRecord, ConventionKind, PropertyRecord, ValueKey

logger = logging.getLogger(__name__)


QUERY_PRELUDE = """\
PREFIX rdf:     <http://www.w3.org/1999/02/22-rdf-syntax-ns#>
PREFIX rdfs:    <http://www.w3.org/2000/01/rdf-schema#>
PREFIX owl:     <http://www.w3.org/2002/07/owl#>
PREFIX xsd:     <http://www.w3.org/2001/XMLSchema#>
PREFIX schema:  <http://schema.org/>
PREFIX schemas: <https://schema.org/>
PREFIX dcam:    <http://purl.org/dc/dcam/>
PREFIX dcid:    <https://datacommons.org/browser/>
PREFIX sh:      <http://www.w3.org/ns/shacl#>
"""

Q_CLASSES = """
SELECT DISTINCT ?s
WHERE {
    {
        VALUES ?t { rdfs:Class owl:Class }
        ?s rdf:type ?t .
    }
    UNION
    {
        ?s rdfs:subClassOf ?o .
    }
    FILTER(isIRI(?s))
}
ORDER BY ?s
"""

Q_PROPERTIES = """
SELECT ?s ?t ?label ?description ?cardinality ?minCardinality ?maxCardinality
WHERE {
    VALUES ?t {
        rdf:Property owl:ObjectProperty owl:DatatypeProperty owl:AnnotationProperty
    }
    ?s rdf:type ?t .
    OPTIONAL { ?s rdfs:label ?label . }
    OPTIONAL { ?s rdfs:comment ?description . }
    OPTIONAL { ?s owl:cardinality ?cardinality . }
    OPTIONAL { ?s owl:minCardinality ?minCardinality . }
    OPTIONAL { ?s owl:maxCardinality ?maxCardinality . }
}
ORDER BY ?s
"""

_DIRECT = """
SELECT DISTINCT ?s ?value
WHERE {{
    ?s {predicate} ?value .
    FILTER(!isBlank(?value) || NOT EXISTS {{ ?value owl:unionOf ?members }})
}}
ORDER BY ?s
"""

_INCLUDES = """
SELECT DISTINCT ?s ?value
WHERE {{
    ?s (schema:{name} | schemas:{name} | dcam:{name} | dcid:{name}) ?value .
}}
ORDER BY ?s
"""

_UNION_LIST = """
SELECT DISTINCT ?s ?value
WHERE {{
    ?s {predicate} ?union .
    ?union owl:unionOf ?list .
    ?list rdf:rest*/rdf:first ?value .
}}
ORDER BY ?s
"""

QUERY_TEMPLATES: Dict[ValueKey, str] = {
    (PropertyRole.RANGE, ConventionKind.DIRECT): _DIRECT.format(predicate="rdfs:range"),
    (PropertyRole.RANGE, ConventionKind.INCLUDES): _INCLUDES.format(name="rangeIncludes"),
    (PropertyRole.RANGE, ConventionKind.UNION_LIST): _UNION_LIST.format(predicate="rdfs:range"),
    (PropertyRole.DOMAIN, ConventionKind.DIRECT): _DIRECT.format(predicate="rdfs:domain"),
    (PropertyRole.DOMAIN, ConventionKind.INCLUDES): _INCLUDES.format(name="domainIncludes"),
    (PropertyRole.DOMAIN, ConventionKind.UNION_LIST): _UNION_LIST.format(predicate="rdfs:domain"),
}

# Most specific first; a property typed several ways keeps the first match
PROPERTY_TYPE_PRECEDENCE = (
    OWL.DatatypeProperty,
    OWL.ObjectProperty,
    OWL.AnnotationProperty,
    RDF.Property,
)


def term_sort_key(term: Node) -> Tuple[int, str]:
    """Sort IRIs before blank nodes before literals, then lexically."""
    if isinstance(term, URIRef):
        return 0, str(term)
    if isinstance(term, BNode):
        return 1, str(term)
    return 2, str(term)


def query_name(key: ValueKey) -> str:
    role, kind = key
    return f"Q_{role.name}_{kind.name}"


def _append_unique(values: List[Node], value: Optional[Node]) -> None:
    if value is not None and value not in values:
        values.append(value)


class OntologyQueries:
    """
    Runs the fixed queries against an ontology graph.

    The graph is only read, never modified.

    Example:
        >>> queries = OntologyQueries(graph)
        >>> classes = queries.query_classes()
        >>> properties = queries.query_properties()
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    @staticmethod
    def all_queries() -> Dict[str, str]:
        """All query texts, prelude included, keyed by name."""
        queries = {
            "Q_CLASSES": QUERY_PRELUDE + Q_CLASSES,
            "Q_PROPERTIES": QUERY_PRELUDE + Q_PROPERTIES,
        }
        for key, template in QUERY_TEMPLATES.items():
            queries[query_name(key)] = QUERY_PRELUDE + template
        return queries

    @staticmethod
    def dump_queries(output_dir: Union[str, Path]) -> List[Path]:
        """
        Write every query to ``<output_dir>/<NAME>.sparql.txt``.

        Returns:
            Paths of the written files.
        """
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        written = []
        for name, text in OntologyQueries.all_queries().items():
            path = directory / f"{name}.sparql.txt"
            path.write_text(text, encoding="utf-8")
            written.append(path)
        logger.info(f"Wrote {len(written)} queries to {directory}")
        return written

    def _run(self, name: str, query: str) -> Iterable:
        try:
            return list(self.graph.query(QUERY_PRELUDE + query))
        except Exception as e:
            logger.error(f"Query {name} failed: {e}")
            raise UpstreamQueryError(str(e), name) from e

    def query_classes(self) -> List[ClassRecord]:
        """
        Classes: subjects typed ``rdfs:Class``/``owl:Class`` or having an
        ``rdfs:subClassOf``, IRIs only, distinct and sorted.
        """
        subjects: Set[Node] = {row[0] for row in self._run("Q_CLASSES", Q_CLASSES)}
        records = [ClassRecord(subject) for subject in sorted(subjects, key=term_sort_key)]
        logger.info(f"Found {len(records)} classes")
        return records

    def query_properties(self) -> List[PropertyRecord]:
        """
        Properties with their annotations and range/domain values, sorted
        by subject.
        """
        types: Dict[Node, Set[Node]] = {}
        columns: Dict[Node, Dict[str, List[Node]]] = {}
        column_names = ("label", "description", "cardinality", "minCardinality", "maxCardinality")

        for row in self._run("Q_PROPERTIES", Q_PROPERTIES):
            subject = row[0]
            types.setdefault(subject, set()).add(row[1])
            subject_columns = columns.setdefault(subject, {name: [] for name in column_names})
            for index, name in enumerate(column_names, start=2):
                _append_unique(subject_columns[name], row[index])

        values: Dict[Node, Dict[ValueKey, List[Node]]] = {}
        for key, template in QUERY_TEMPLATES.items():
            for subject, value in self._run(query_name(key), template):
                if subject not in types:
                    continue
                _append_unique(values.setdefault(subject, {}).setdefault(key, []), value)

        records = []
        for subject in sorted(types, key=term_sort_key):
            subject_columns = columns[subject]
            property_type = next(t for t in PROPERTY_TYPE_PRECEDENCE if t in types[subject])
            if len(types[subject]) > 1:
                logger.debug(f"Property {subject} has several types, using {property_type}")
            records.append(PropertyRecord(
                subject=subject,
                property_type=property_type,
                labels=tuple(sorted(subject_columns["label"], key=term_sort_key)),
                descriptions=tuple(sorted(subject_columns["description"], key=term_sort_key)),
                cardinalities=tuple(sorted(subject_columns["cardinality"], key=term_sort_key)),
                min_cardinalities=tuple(sorted(subject_columns["minCardinality"], key=term_sort_key)),
                max_cardinalities=tuple(sorted(subject_columns["maxCardinality"], key=term_sort_key)),
                values={
                    key: tuple(sorted(found, key=term_sort_key))
                    for key, found in values.get(subject, {}).items()
                },
            ))

        logger.info(f"Found {len(records)} properties")
        return records
