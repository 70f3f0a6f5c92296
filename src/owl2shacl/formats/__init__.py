"""
Source format support.

- rdf: loading OWL/RDFS ontologies and querying them
"""

from . import rdf

__all__ = ['rdf']
