"""
Property Shape Generator - one property shape per ontology property.

For each property ``p``::

    pShape a sh:PropertyShape ;
        sh:path p ;
        sh:name "label" ;               # per rdfs:label
        sh:description "comment" ;      # per rdfs:comment
        sh:minCount N ; sh:maxCount N . # from owl:(min|max)Cardinality

plus the range/domain constraints emitted by ``RangeDomainResolver``.
"""

import logging
import re
from typing import Sequence

from rdflib import Literal, RDF, XSD
from rdflib.namespace import SH
from rdflib.term import Node, URIRef
from tqdm import tqdm

from ..core.exceptions import MalformedTermError
from ..core.shape_store import ShapeStore, TripleBatch
from ..shared.models.config import OdityKind, PropertyRole
from ..shared.models.records import PropertyRecord
from .odity_handler import OdityHandler
from .range_domain_resolver import RangeDomainResolver
from .style_auditor import StyleUsage, describe_styles
from .uri_utils import URIUtils

logger = logging.getLogger(__name__)

# xsd:nonNegativeInteger lexical space
_COUNT = re.compile(r"^\+?[0-9]+$")


def _count_literal(value: Node, source: str) -> Literal:
    """Convert a cardinality value to an ``xsd:integer`` count."""
    if not isinstance(value, Literal) or not _COUNT.match(str(value)):
        raise MalformedTermError(value, "non-negative integer", source)
    return Literal(int(str(value)), datatype=XSD.integer)


class PropertyShapeGenerator:
    """
    Generates property shapes and tracks the range/domain conventions used.

    The triples of each property are collected in a ``TripleBatch`` and only
    committed to the store once the property was converted without a fatal
    condition.
    """

    def __init__(
        self,
        store: ShapeStore,
        odities: OdityHandler,
        show_progress: bool = True,
    ) -> None:
        self.store = store
        self.odities = odities
        self.resolver = RangeDomainResolver(odities)
        self.show_progress = show_progress

    def generate(self, records: Sequence[PropertyRecord]) -> StyleUsage:
        """
        Generate property shapes for all property records.

        Args:
            records: Property records, sorted by subject.

        Returns:
            The conventions used per role across all properties.

        Raises:
            ConversionError: On the first fatal condition.
        """
        logger.info("Converting properties ...")
        usage = StyleUsage()
        if not records:
            logger.warning("No properties found.")
            return usage

        for record in tqdm(
            records,
            desc="Creating property shapes",
            unit="property",
            disable=not self.show_progress or len(records) < 10,
        ):
            self.generate_one(record, usage)

        logger.info(f"Converting properties - done ({len(records)} property shapes).")
        return usage

    def generate_one(self, record: PropertyRecord, usage: StyleUsage) -> URIRef:
        """
        Generate the shape of a single property.

        Args:
            record: The property record.
            usage: Ontology-wide accumulator, updated in place.

        Returns:
            The property shape IRI.
        """
        logger.debug(f"Property: {record.subject}")
        shape = URIUtils.shape_iri(record.subject, "property subject")
        batch = TripleBatch()

        batch.insert(shape, RDF.type, SH.PropertyShape)
        batch.insert(shape, SH.path, record.subject)
        for label in record.labels:
            batch.insert(shape, SH.name, label)
        for description in record.descriptions:
            batch.insert(shape, SH.description, description)

        for value in record.cardinalities:
            count = _count_literal(value, f"owl:cardinality of {record.subject}")
            batch.insert(shape, SH.minCount, count)
            batch.insert(shape, SH.maxCount, count)
        for value in record.min_cardinalities:
            batch.insert(shape, SH.minCount, _count_literal(value, f"owl:minCardinality of {record.subject}"))
        for value in record.max_cardinalities:
            batch.insert(shape, SH.maxCount, _count_literal(value, f"owl:maxCardinality of {record.subject}"))

        for role in PropertyRole:
            used = self.resolver.resolve(batch, shape, record, role)
            usage.record(role, used)
            if len(used) > 1 and not self.odities.mode_for(OdityKind.STYLE_MIX_PROPERTY, role).ignore:
                styles = describe_styles(used)
                self.odities.handle(
                    OdityKind.STYLE_MIX_PROPERTY,
                    role,
                    f"Mixed styles of {role} definitions in Property {record.subject}: {', '.join(styles)}",
                    subject=record.subject,
                    values=styles,
                )

        self.store.commit(batch)
        return shape
