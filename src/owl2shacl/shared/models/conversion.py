"""
Conversion result data types.

This module defines data structures for tracking conversion results,
including the generated shapes and the odities reported along the way.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING

from rdflib.term import Node

from .config import OdityKind, PropertyRole

if TYPE_CHECKING:
    from ...core.shape_store import ShapeStore


@dataclass
class OdityWarning:
    """
    An odity that was detected and reported in WARN mode.

    Attributes:
        kind: The odity kind.
        role: The property role it concerns.
        message: Human-readable description, as logged.
        subject: The property concerned (None for ontology-wide odities).
        values: The offending values or convention names.

    Example:
        >>> warning = OdityWarning(
        ...     kind=OdityKind.AND_LIST,
        ...     role=PropertyRole.RANGE,
        ...     message="And list detected ...",
        ...     subject=URIRef("http://example.org/owns"),
        ... )
    """
    kind: OdityKind
    role: PropertyRole
    message: str
    subject: Optional[Node] = None
    values: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for serialization."""
        return {
            "kind": self.kind.value,
            "role": self.role.value,
            "message": self.message,
            "subject": str(self.subject) if self.subject is not None else None,
            "values": list(self.values),
        }


@dataclass
class ConversionResult:
    """
    Results of an ontology to SHACL conversion.

    Attributes:
        store: The shape store holding the generated SHACL graph.
        node_shape_count: Number of node shapes generated from classes.
        property_shape_count: Number of property shapes generated.
        warnings: Odities reported in WARN mode.
        triple_count: Number of triples in the source ontology.
    """
    store: "ShapeStore"
    node_shape_count: int = 0
    property_shape_count: int = 0
    warnings: List[OdityWarning] = field(default_factory=list)
    triple_count: int = 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def warnings_by_kind(self) -> Dict[str, int]:
        """Get a count of warnings grouped by odity kind."""
        counts: Dict[str, int] = {}
        for warning in self.warnings:
            counts[warning.kind.value] = counts.get(warning.kind.value, 0) + 1
        return counts

    def get_summary(self) -> str:
        """
        Get a human-readable summary of the conversion results.

        Returns:
            Summary string with shape counts and warnings.
        """
        lines = [
            "Conversion Summary:",
            f"  ✓ Node Shapes: {self.node_shape_count}",
            f"  ✓ Property Shapes: {self.property_shape_count}",
            f"  ✓ SHACL Triples: {len(self.store)}",
        ]

        if self.warnings:
            lines.append(f"  ⚠ Warnings: {len(self.warnings)}")
            for kind, count in self.warnings_by_kind.items():
                lines.append(f"      - {kind}: {count}")
            for warning in self.warnings[:3]:
                lines.append(f"      - {warning.message}")
            if len(self.warnings) > 3:
                lines.append(f"      ... and {len(self.warnings) - 3} more")

        if self.triple_count > 0:
            lines.append(f"  Total Ontology Triples: {self.triple_count}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize conversion result to dictionary format."""
        return {
            "node_shape_count": self.node_shape_count,
            "property_shape_count": self.property_shape_count,
            "shacl_triple_count": len(self.store),
            "insert_count": self.store.insert_count,
            "warnings": [w.to_dict() for w in self.warnings],
            "triple_count": self.triple_count,
        }
