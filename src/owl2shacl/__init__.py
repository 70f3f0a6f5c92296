"""OWL/RDFS ontology to SHACL shapes converter."""

__version__ = "1.0.0"
__author__ = "OWL to SHACL Converter Contributors"

from .shacl_converter import (
    ShaclConverter,
    convert,
    convert_content,
    convert_file,
)

from .shared.models import (
    ConverterConfig,
    ConversionResult,
    OdityHandling,
    OdityKind,
    PropertyRole,
)

from .core import (
    ShapeStore,
    ConversionError,
    OdityError,
    UnsupportedConstructError,
    MalformedTermError,
    UpstreamQueryError,
)

__all__ = [
    # Converter
    "ShaclConverter",
    "convert",
    "convert_content",
    "convert_file",
    # Config & results
    "ConverterConfig",
    "ConversionResult",
    "OdityHandling",
    "OdityKind",
    "PropertyRole",
    # Store & errors
    "ShapeStore",
    "ConversionError",
    "OdityError",
    "UnsupportedConstructError",
    "MalformedTermError",
    "UpstreamQueryError",
]
