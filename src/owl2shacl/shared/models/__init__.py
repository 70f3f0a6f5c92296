"""
Shared data models for the OWL to SHACL converter.

This module contains the data classes passed between the query layer,
the shape generators and the CLI.

Usage:
    from owl2shacl.shared.models import ConverterConfig, PropertyRecord, ConversionResult
"""

from .config import (
    OdityHandling,
    OdityKind,
    PropertyRole,
    RoleModes,
    ConverterConfig,
)
from .records import (
    ConventionKind,
    ClassRecord,
    PropertyRecord,
)
from .conversion import (
    ConversionResult,
    OdityWarning,
)

__all__ = [
    # Configuration
    "OdityHandling",
    "OdityKind",
    "PropertyRole",
    "RoleModes",
    "ConverterConfig",
    # Query records
    "ConventionKind",
    "ClassRecord",
    "PropertyRecord",
    # Conversion results
    "ConversionResult",
    "OdityWarning",
]
