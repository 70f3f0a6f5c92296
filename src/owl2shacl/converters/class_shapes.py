"""
Class Shape Generator - one closed-by-default node shape per ontology class.
"""

import logging
from typing import Sequence

from rdflib import Literal, RDF
from rdflib.namespace import SH
from tqdm import tqdm

from ..core.shape_store import ShapeStore
from ..shared.models.records import ClassRecord
from .uri_utils import URIUtils

logger = logging.getLogger(__name__)


class ClassShapeGenerator:
    """
    Emits, for each class ``C``::

        CShape a sh:NodeShape ;
            sh:targetClass C ;
            sh:closed false .
    """

    def __init__(self, store: ShapeStore, show_progress: bool = True) -> None:
        self.store = store
        self.show_progress = show_progress

    def generate(self, records: Sequence[ClassRecord]) -> int:
        """
        Generate node shapes for all class records.

        Args:
            records: Class records, sorted by subject.

        Returns:
            Number of node shapes generated.

        Raises:
            MalformedTermError: If a class subject is not an IRI.
        """
        logger.info("Converting classes ...")
        if not records:
            logger.warning("No classes found.")
            return 0

        for record in tqdm(
            records,
            desc="Creating node shapes",
            unit="class",
            disable=not self.show_progress or len(records) < 10,
        ):
            logger.debug(f"Class: {record.subject}")
            target = URIUtils.to_iri(record.subject, "class subject")
            shape = URIUtils.shape_iri(target)
            self.store.insert(shape, RDF.type, SH.NodeShape)
            self.store.insert(shape, SH.targetClass, target)
            self.store.insert(shape, SH.closed, Literal(False))

        logger.info(f"Converting classes - done ({len(records)} node shapes).")
        return len(records)
