"""
Ontology query result records.

These are the rows the query layer hands to the converters: one
``ClassRecord`` per class and one ``PropertyRecord`` per property, the
latter with its range/domain values already grouped per convention.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from rdflib import OWL
from rdflib.term import Node

from .config import PropertyRole


class ConventionKind(str, Enum):
    """
    Syntactic conventions for declaring a property's range or domain.

    The definition order is the order in which the converter processes them.

    - DIRECT: ``rdfs:range`` / ``rdfs:domain``
    - INCLUDES: ``schema:rangeIncludes`` / ``dcam:domainIncludes`` and friends
    - UNION_LIST: members of an ``owl:unionOf`` list behind ``rdfs:range`` / ``rdfs:domain``
    """
    DIRECT = "direct"
    INCLUDES = "includes"
    UNION_LIST = "union-list"

    def __str__(self) -> str:
        return self.value

    @property
    def is_and(self) -> bool:
        """Multiple values of this kind mean "all of them" (not "any of them")."""
        return self is ConventionKind.DIRECT


ValueKey = Tuple[PropertyRole, ConventionKind]


@dataclass(frozen=True)
class ClassRecord:
    """A class found in the ontology."""
    subject: Node


@dataclass(frozen=True)
class PropertyRecord:
    """
    A property found in the ontology, with everything needed to build its shape.

    Attributes:
        subject: The property itself.
        property_type: Its ``rdf:type`` (``rdf:Property``, ``owl:ObjectProperty``,
            ``owl:DatatypeProperty`` or ``owl:AnnotationProperty``).
        labels: ``rdfs:label`` values.
        descriptions: ``rdfs:comment`` values.
        cardinalities: ``owl:cardinality`` values.
        min_cardinalities: ``owl:minCardinality`` values.
        max_cardinalities: ``owl:maxCardinality`` values.
        values: Range/domain values per (role, convention), duplicate free,
            in query order. Missing keys mean the convention is not used.
    """
    subject: Node
    property_type: Node
    labels: Tuple[Node, ...] = ()
    descriptions: Tuple[Node, ...] = ()
    cardinalities: Tuple[Node, ...] = ()
    min_cardinalities: Tuple[Node, ...] = ()
    max_cardinalities: Tuple[Node, ...] = ()
    values: Dict[ValueKey, Tuple[Node, ...]] = field(default_factory=dict, hash=False)

    @property
    def is_datatype_property(self) -> bool:
        return self.property_type == OWL.DatatypeProperty

    def values_for(self, role: PropertyRole, kind: ConventionKind) -> Tuple[Node, ...]:
        """Values declared for ``role`` through ``kind``; empty if unused."""
        return self.values.get((role, kind), ())
