"""
Odity Handler - applies the configured resolution mode to detected odities.
"""

import logging
from typing import Iterable, List, Optional

from rdflib.term import Node

from ..core.exceptions import OdityError
from ..shared.models.config import ConverterConfig, OdityHandling, OdityKind, PropertyRole
from ..shared.models.conversion import OdityWarning

logger = logging.getLogger(__name__)


class OdityHandler:
    """
    Resolves odities according to a ``ConverterConfig``.

    - ERROR raises ``OdityError``
    - WARN logs a warning and records an ``OdityWarning``
    - IGNORE does nothing

    The caller decides what "continue" means for the odity at hand, based on
    the returned mode.
    """

    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        self.config = config or ConverterConfig()
        self.warnings: List[OdityWarning] = []

    def mode_for(self, kind: OdityKind, role: PropertyRole) -> OdityHandling:
        return self.config.mode_for(kind, role)

    def handle(
        self,
        kind: OdityKind,
        role: PropertyRole,
        message: str,
        subject: Optional[Node] = None,
        values: Iterable[str] = (),
    ) -> OdityHandling:
        """
        Report an odity.

        Args:
            kind: The odity kind.
            role: The property role concerned.
            message: Description naming the property/role/values involved.
            subject: The property concerned, if any.
            values: Offending values or convention names.

        Returns:
            The mode that was applied (WARN or IGNORE).

        Raises:
            OdityError: If the configured mode is ERROR.
        """
        mode = self.mode_for(kind, role)
        values = tuple(values)
        if mode is OdityHandling.ERROR:
            raise OdityError(message, kind, role, subject, values)
        if mode is OdityHandling.WARN:
            logger.warning(message)
            self.warnings.append(OdityWarning(kind, role, message, subject, values))
        return mode
