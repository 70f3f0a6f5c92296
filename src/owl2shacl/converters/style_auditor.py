"""
Style Auditor - checks which range/domain conventions an ontology mixes.

``StyleUsage`` accumulates, per property role, the conventions used by the
properties processed so far. ``OntologyStyleAuditor`` inspects the final
accumulation once per role, after all properties were converted.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from ..shared.models.config import OdityKind, PropertyRole
from ..shared.models.records import ConventionKind
from .odity_handler import OdityHandler

logger = logging.getLogger(__name__)


def describe_styles(kinds: Iterable[ConventionKind]) -> List[str]:
    """Convention names in processing order, for messages."""
    kinds = set(kinds)
    return [kind.value for kind in ConventionKind if kind in kinds]


@dataclass
class StyleUsage:
    """Conventions used per property role."""
    used: Dict[PropertyRole, Set[ConventionKind]] = field(
        default_factory=lambda: {role: set() for role in PropertyRole}
    )

    def record(self, role: PropertyRole, kinds: Iterable[ConventionKind]) -> None:
        self.used[role].update(kinds)

    def kinds_for(self, role: PropertyRole) -> Set[ConventionKind]:
        return set(self.used[role])

    def is_mixed(self, role: PropertyRole) -> bool:
        return len(self.used[role]) > 1


class OntologyStyleAuditor:
    """
    Reports ontologies whose properties disagree on the convention used
    for the same role (e.g. some use ``rdfs:range``, others
    ``schema:rangeIncludes``).
    """

    def __init__(self, odities: OdityHandler) -> None:
        self.odities = odities

    def audit(self, usage: StyleUsage) -> None:
        """
        Check the ontology-wide usage, once per role.

        Raises:
            OdityError: If styles are mixed and the mode is ERROR.
        """
        for role in PropertyRole:
            kinds = usage.kinds_for(role)
            logger.info(f"Ontology {role} styles: {', '.join(describe_styles(kinds)) or 'none'}")
            if not usage.is_mixed(role):
                continue
            if self.odities.mode_for(OdityKind.STYLE_MIX_ONTOLOGY, role).ignore:
                continue
            styles = describe_styles(kinds)
            self.odities.handle(
                OdityKind.STYLE_MIX_ONTOLOGY,
                role,
                f"Mixed styles of {role} definitions in Ontology: {', '.join(styles)}",
                values=styles,
            )
