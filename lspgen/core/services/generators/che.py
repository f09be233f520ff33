"""
Eclipse Che client generator — file-type pattern for the workspace plugin.
"""

from __future__ import annotations

from lspgen.core.services.generators._common import check_file_types


def get_file_type_regex(file_types: list[str]) -> str:
    """Return the file types as a regex alternation: ``xml | java``.

    Raises:
        InvalidInput: If a file type contains ``|``.
    """
    check_file_types(file_types, forbidden="|")
    return " | ".join(file_types).strip()
