"""
VS Code client generator — package.json and extension.ts fragments.

Fragment lists are spliced into JSON arrays, so the last fragment never
carries a trailing comma.
"""

from __future__ import annotations

import logging

from lspgen.core.services.generators._common import (
    check_file_types,
    strip_trailing_comma,
)

logger = logging.getLogger(__name__)

LANGUAGE_CONFIGURATION = "./language-configuration.json"


def get_activation_events(file_types: list[str]) -> list[str]:
    """Return ``onLanguage`` + ``workspaceContains`` events per file type."""
    check_file_types(file_types)
    events = [
        f"""
        "onLanguage:{ft}",
        "workspaceContains:*.{ft}","""
        for ft in file_types
    ]
    return strip_trailing_comma(events)


def get_contributes_languages(file_types: list[str]) -> list[str]:
    """Return one ``contributes.languages`` entry per file type.

    Each entry registers the file type as a language id with its dotted
    extension and the shared language configuration.
    """
    check_file_types(file_types)
    languages = [
        f"""
          {{
            "id": "{ft}",
            "extensions": [
              ".{ft}"
            ],
            "configuration": "{LANGUAGE_CONFIGURATION}"
          }},"""
        for ft in file_types
    ]
    return strip_trailing_comma(languages)


def get_file_events(file_types: list[str]) -> list[str]:
    """Return one file-system watcher expression per file type."""
    check_file_types(file_types)
    events = [
        f"""
                workspace.createFileSystemWatcher('**/*.{ft}')"""
        for ft in file_types
    ]
    return strip_trailing_comma(events)


def get_file_types_as_string_array_format(file_types: list[str]) -> str:
    """Return the file types as quoted array items: ``'ts', 'js'``."""
    check_file_types(file_types)
    return ", ".join(f"'{ft}'" for ft in file_types)


def get_document_language_id(file_types: list[str]) -> str:
    """Return a JS condition matching the active document's language id.

    Example:
        ``editor.document.languageId === 'ts' || editor.document.languageId === 'js'``

    Raises:
        InvalidInput: If a file type contains ``||``.
    """
    check_file_types(file_types, forbidden="||")
    condition = " || ".join(
        f"editor.document.languageId === '{ft}'" for ft in file_types
    )
    logger.debug("Document language condition over %d file type(s)", len(file_types))
    return condition
