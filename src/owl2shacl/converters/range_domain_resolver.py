"""
Range/Domain Resolver - turns a property's range and domain declarations
into SHACL constraints.

A property's range (or domain) may be declared through any combination of:

- DIRECT: ``rdfs:range`` / ``rdfs:domain``. Several values mean the value
  (or subject) has to be an instance of *all* of them, which SHACL targets
  cannot express faithfully and which is usually an authoring mistake.
- INCLUDES: ``schema:rangeIncludes`` / ``dcam:domainIncludes`` etc., which
  are "any of" by definition.
- UNION_LIST: the members of an ``owl:unionOf`` list, also "any of".

Constraints emitted per retained value ``v``:

- range of a datatype property: ``(shape, sh:datatype, vShape)``
- range of any other property: ``(shape, sh:class, vShape)``
- domain: ``(vShape, sh:property, shape)``, i.e. the domain class' shape
  references the property shape.
"""

import logging
from typing import Set

from rdflib.namespace import SH
from rdflib.term import Node, URIRef

from ..core.exceptions import UnsupportedConstructError
from ..shared.models.config import OdityHandling, OdityKind, PropertyRole
from ..shared.models.records import ConventionKind, PropertyRecord
from .odity_handler import OdityHandler
from .uri_utils import URIUtils

logger = logging.getLogger(__name__)


class RangeDomainResolver:
    """
    Resolves the range or domain declarations of one property.

    Example:
        >>> resolver = RangeDomainResolver(OdityHandler(config))
        >>> used = resolver.resolve(batch, shape, record, PropertyRole.RANGE)
        >>> used
        {<ConventionKind.DIRECT: 'direct'>}
    """

    def __init__(self, odities: OdityHandler) -> None:
        self.odities = odities

    def resolve(
        self,
        sink,
        shape: URIRef,
        record: PropertyRecord,
        role: PropertyRole,
    ) -> Set[ConventionKind]:
        """
        Emit the constraints for one role of one property.

        Args:
            sink: Where to insert triples (``ShapeStore`` or ``TripleBatch``).
            shape: The property's shape IRI.
            record: The property record.
            role: RANGE or DOMAIN.

        Returns:
            The conventions used for this role on this property.

        Raises:
            OdityError: If an and-list is found and its mode is ERROR.
            UnsupportedConstructError: For anonymous class expressions.
            MalformedTermError: For values that are not IRIs.
        """
        used: Set[ConventionKind] = set()
        for kind in ConventionKind:
            values = record.values_for(role, kind)
            if not values:
                continue
            used.add(kind)
            logger.debug(f"    {role}/{kind}: {', '.join(str(v) for v in values)}")

            if kind.is_and and len(values) > 1:
                mode = self.odities.handle(
                    OdityKind.AND_LIST,
                    role,
                    f"And list detected for property {record.subject} ({role}: "
                    f"{', '.join(str(v) for v in values)}); "
                    f"this is not supported in our to-SHACL converter.",
                    subject=record.subject,
                    values=[str(v) for v in values],
                )
                if mode is OdityHandling.IGNORE:
                    continue

            for value in values:
                self._emit(sink, shape, record, role, value)

        return used

    def _emit(
        self,
        sink,
        shape: URIRef,
        record: PropertyRecord,
        role: PropertyRole,
        value: Node,
    ) -> None:
        """Emit the constraint of a single range/domain value."""
        if URIUtils.is_blank(value):
            raise UnsupportedConstructError(
                f"Anonymous class expression as {role} of property {record.subject} "
                f"is not supported (only IRIs and simple owl:unionOf lists are)",
                subject=record.subject,
                role=role,
                construct=value,
            )
        value_shape = URIUtils.shape_iri(value, f"{role} of {record.subject}")

        if role is PropertyRole.RANGE:
            predicate = SH.datatype if record.is_datatype_property else SH["class"]
            sink.insert(shape, predicate, value_shape)
        else:
            sink.insert(value_shape, SH.property, shape)
