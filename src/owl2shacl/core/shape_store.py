"""
Shape Store - append-only sink for generated SHACL triples.

The store wraps an rdflib ``Graph``. Triples are only ever added; nothing
is retracted or rewritten once inserted. A ``TripleBatch`` collects the
triples of one unit of work (e.g. one property) so they can be committed
together once the unit completed without a fatal condition.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import NamespaceManager
from rdflib.term import Node

from .exceptions import MalformedTermError

logger = logging.getLogger(__name__)

Triple = Tuple[Node, Node, Node]


def check_triple(subject: Node, predicate: Node, obj: Node) -> Triple:
    """
    Check that a triple is well formed.

    Raises:
        MalformedTermError: If the subject is not an IRI or blank node, the
            predicate is not an IRI, or the object is not an RDF term.
    """
    if not isinstance(subject, (URIRef, BNode)):
        raise MalformedTermError(subject, "IRI or blank node", "triple subject")
    if not isinstance(predicate, URIRef):
        raise MalformedTermError(predicate, "IRI", "triple predicate")
    if not isinstance(obj, (URIRef, BNode, Literal)):
        raise MalformedTermError(obj, "RDF term", "triple object")
    return subject, predicate, obj


class TripleBatch:
    """Pending triples, validated on insert, not yet visible in a store."""

    def __init__(self) -> None:
        self._triples: List[Triple] = []

    def insert(self, subject: Node, predicate: Node, obj: Node) -> None:
        self._triples.append(check_triple(subject, predicate, obj))

    def __iter__(self) -> Iterator[Triple]:
        return iter(self._triples)

    def __len__(self) -> int:
        return len(self._triples)


class ShapeStore:
    """
    Accumulates emitted SHACL triples.

    ``insert_count`` counts every insertion, including triples the
    underlying graph already held (de-duplication is the graph's concern).

    Example:
        >>> store = ShapeStore()
        >>> store.insert(shape, RDF.type, SH.NodeShape)
        >>> store.graph.serialize(format="turtle")
    """

    def __init__(self, graph: Optional[Graph] = None) -> None:
        self._graph = graph if graph is not None else Graph()
        self.insert_count = 0

    @property
    def graph(self) -> Graph:
        """The underlying rdflib graph (treat as read-only)."""
        return self._graph

    @property
    def namespace_manager(self) -> NamespaceManager:
        return self._graph.namespace_manager

    def insert(self, subject: Node, predicate: Node, obj: Node) -> None:
        """
        Append one triple.

        Raises:
            MalformedTermError: If the triple is not well formed.
        """
        self._graph.add(check_triple(subject, predicate, obj))
        self.insert_count += 1

    def commit(self, batch: TripleBatch) -> int:
        """
        Append all triples of a batch.

        Returns:
            Number of triples inserted.
        """
        for triple in batch:
            self._graph.add(triple)
        self.insert_count += len(batch)
        logger.debug(f"Committed {len(batch)} triples")
        return len(batch)

    def triples(self, pattern: Tuple[Optional[Node], Optional[Node], Optional[Node]] = (None, None, None)) -> Iterator[Triple]:
        return self._graph.triples(pattern)

    def __contains__(self, triple: Triple) -> bool:
        return triple in self._graph

    def __len__(self) -> int:
        return len(self._graph)
