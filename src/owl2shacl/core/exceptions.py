"""
Conversion errors.

Every condition that aborts a conversion run is raised as a subclass of
``ConversionError``. Nothing is retried: the first fatal condition stops
the whole run and should be caught at the top level (see ``cli``).
"""

from typing import Iterable, Optional, Tuple

from rdflib.term import Node

from ..shared.models.config import OdityKind, PropertyRole


class ConversionError(Exception):
    """
    Base class for all errors that abort a conversion.

    Attributes:
        message: Human-readable description of the failure.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class OdityError(ConversionError):
    """
    Raised when an odity is detected whose resolution mode is ERROR.

    Attributes:
        odity_kind: The kind of odity detected.
        role: The property role (range or domain) it concerns.
        subject: The offending property, or None for ontology-wide odities.
        values: The offending values or convention names.
    """

    def __init__(
        self,
        message: str,
        odity_kind: OdityKind,
        role: PropertyRole,
        subject: Optional[Node] = None,
        values: Iterable[str] = (),
    ):
        self.odity_kind = odity_kind
        self.role = role
        self.subject = subject
        self.values: Tuple[str, ...] = tuple(values)
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.odity_kind.value}/{self.role.value}] {self.message}"


class UnsupportedConstructError(ConversionError):
    """
    Raised for ontology constructs the converter explicitly does not handle,
    e.g. anonymous class expressions other than simple ``owl:unionOf`` lists.

    Attributes:
        subject: The property whose declaration uses the construct.
        role: The property role concerned.
        construct: The offending term.
    """

    def __init__(
        self,
        message: str,
        subject: Optional[Node] = None,
        role: Optional[PropertyRole] = None,
        construct: Optional[Node] = None,
    ):
        self.subject = subject
        self.role = role
        self.construct = construct
        super().__init__(message)


class MalformedTermError(ConversionError):
    """
    Raised when a term does not have the expected form,
    e.g. a blank node or a plain literal where an IRI is required.

    Attributes:
        term: The malformed term.
        expected: Description of what was expected (e.g. "IRI").
    """

    def __init__(self, term: object, expected: str = "IRI", context: Optional[str] = None):
        self.term = term
        self.expected = expected
        message = f"Expected {expected}, got {type(term).__name__} '{term}'"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)


class UpstreamQueryError(ConversionError):
    """
    Raised by the query layer when querying the ontology graph fails.

    The original exception is chained as ``__cause__``.

    Attributes:
        query_name: Name of the query that failed.
    """

    def __init__(self, message: str, query_name: Optional[str] = None):
        self.query_name = query_name
        if query_name:
            message = f"Query {query_name} failed: {message}"
        super().__init__(message)
