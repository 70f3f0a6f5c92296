"""
Core infrastructure for the OWL to SHACL converter.

- Conversion errors (ConversionError, OdityError, UnsupportedConstructError,
  MalformedTermError, UpstreamQueryError)
- The append-only shape store (ShapeStore, TripleBatch)

Usage:
    from owl2shacl.core import ShapeStore, ConversionError
"""

from .exceptions import (
    ConversionError,
    OdityError,
    UnsupportedConstructError,
    MalformedTermError,
    UpstreamQueryError,
)

from .shape_store import (
    ShapeStore,
    TripleBatch,
    check_triple,
)

__all__ = [
    # Errors
    'ConversionError',
    'OdityError',
    'UnsupportedConstructError',
    'MalformedTermError',
    'UpstreamQueryError',
    # Store
    'ShapeStore',
    'TripleBatch',
    'check_triple',
]
