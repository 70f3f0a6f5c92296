"""
URI Utilities - IRI checks and shape IRI derivation.

Shapes are named after the class or property they describe by appending
``SHAPE_SUFFIX`` to its IRI, so the same source IRI always yields the same
shape IRI and re-running a conversion is idempotent.
"""

import logging
import re
from typing import Optional

from rdflib import BNode, Literal, URIRef
from rdflib.term import Node

from ..core.exceptions import MalformedTermError

logger = logging.getLogger(__name__)

SHAPE_SUFFIX = "Shape"

# scheme ":" followed by characters allowed in an IRI reference
_ABSOLUTE_IRI = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:[^\s<>"{}|\\^`]*$')


class URIUtils:
    """
    Utility class for IRI handling.

    Handles:
    - Checking that a term is (or names) an absolute IRI
    - Deriving shape IRIs from class and property IRIs
    """

    @staticmethod
    def is_absolute_iri(value: str) -> bool:
        """Check whether a string is an absolute IRI (has a scheme, no illegal characters)."""
        return bool(value) and _ABSOLUTE_IRI.match(value) is not None

    @staticmethod
    def to_iri(term: Optional[Node], context: Optional[str] = None) -> URIRef:
        """
        Coerce a term to an IRI.

        Literals are accepted when their lexical form is an absolute IRI,
        since aggregating query engines may hand IRIs over as strings.

        Args:
            term: The term to coerce.
            context: Optional description used in error messages.

        Returns:
            The IRI.

        Raises:
            MalformedTermError: If the term is not an IRI.
        """
        if isinstance(term, URIRef):
            return term
        if isinstance(term, Literal) and URIUtils.is_absolute_iri(str(term)):
            return URIRef(str(term))
        raise MalformedTermError(term, "IRI", context)

    @staticmethod
    def shape_iri(term: Optional[Node], context: Optional[str] = None) -> URIRef:
        """
        Derive the shape IRI of a class or property.

        Example:
            >>> URIUtils.shape_iri(URIRef("http://example.org/Person"))
            rdflib.term.URIRef('http://example.org/PersonShape')

        Raises:
            MalformedTermError: If the term is not an IRI.
        """
        iri = URIUtils.to_iri(term, context)
        shape = URIRef(f"{iri}{SHAPE_SUFFIX}")
        logger.debug(f"Shape: {shape}")
        return shape

    @staticmethod
    def is_blank(term: Optional[Node]) -> bool:
        return isinstance(term, BNode)
