"""
Domain models — Pydantic types for the fragment generators.

All models are re-exported here for convenient access:

    from lspgen.core.models import ConnectorSpec, FragmentSet, ClientFragments
"""

from lspgen.core.models.connector import ConnectorSpec
from lspgen.core.models.template import ClientFragments, FragmentSet

__all__ = [
    # template.py
    "ClientFragments",
    # connector.py
    "ConnectorSpec",
    "FragmentSet",
]
