"""
Converters package - the OWL to SHACL conversion components.

Components:
- uri_utils: IRI checks and shape IRI derivation
- odity_handler: applies the configured odity resolution modes
- class_shapes: node shapes from classes
- property_shapes: property shapes from properties
- range_domain_resolver: range/domain constraints per convention
- style_auditor: ontology-wide convention mix check
- shacl_serializer: shapes graph serialization
"""

from .uri_utils import URIUtils, SHAPE_SUFFIX
from .odity_handler import OdityHandler
from .class_shapes import ClassShapeGenerator
from .range_domain_resolver import RangeDomainResolver
from .style_auditor import StyleUsage, OntologyStyleAuditor
from .property_shapes import PropertyShapeGenerator
from .shacl_serializer import ShaclSerializer

__all__ = [
    'URIUtils',
    'SHAPE_SUFFIX',
    'OdityHandler',
    'ClassShapeGenerator',
    'RangeDomainResolver',
    'StyleUsage',
    'OntologyStyleAuditor',
    'PropertyShapeGenerator',
    'ShaclSerializer',
]
