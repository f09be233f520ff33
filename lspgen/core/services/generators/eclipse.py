"""
Eclipse client generator — plugin.xml extension-point fragments.

Produces the LSP4E ``languageServer`` extension (server declarations plus
content-type mappings) and, for marker file types, fixed completion
proposal extensions.
"""

from __future__ import annotations

import logging

from lspgen.core.services.generators._common import check_file_types

logger = logging.getLogger(__name__)

CONNECTION_PROVIDER = "org.vutbr.lsp.client.LSPStreamConnectionProvider"

XML_CONTENT_TYPE = "org.eclipse.core.runtime.xml"
SOURCE_CONTENT_TYPE = "org.eclipse.jdt.core.javaSource"


# ── Completion proposals ────────────────────────────────────────


# Emitted untrimmed; the mixed tab/space indentation is part of the output
_XML_PROPOSALS = (
    "\n"
    '    <extension point="org.eclipse.wst.sse.ui.completionProposal">\n'
    "   \t    <proposalCategory\n"
    '            id="org.category"\n'
    '            name="Completion proposals">\n'
    "  \t    </proposalCategory>\n"
    " \n"
    "  \t    <proposalComputer\n"
    '       \t    activate="true"\n'
    '            categoryId="org.category"\n'
    '            class="org.vutbr.lsp.xml.completion.XMLCompletionProposalComputer"\n'
    '            id="org.xml.proposalcomputer">      \n'
    '      \t  <contentType id="org.eclipse.core.runtime.xml"/>      \n'
    "  \t    </proposalComputer> \n"
    "    </extension>"
)

_JAVA_PROPOSALS = """
    <extension id="idJavaComputer" point="org.eclipse.jdt.ui.javaCompletionProposalComputer">
        <javaCompletionProposalComputer
            activate="true"
            categoryId="org.eclipse.jdt.ui.defaultProposalCategory"
            class="org.vutbr.lsp.java.completion.JavaCompletionProposalComputer"
            needsSortingAfterFiltering="false">
        </javaCompletionProposalComputer>
    </extension>"""

# Marker file type → fixed extension fragment, emitted in this order
COMPLETION_PROPOSALS: dict[str, str] = {
    "xml": _XML_PROPOSALS,
    "java": _JAVA_PROPOSALS,
}


def _content_type_for(file_type: str) -> str:
    if file_type == "xml":
        return XML_CONTENT_TYPE
    return SOURCE_CONTENT_TYPE


def get_server_extensions(file_types: list[str]) -> list[str]:
    """Return one ``<server>`` declaration per file type.

    Args:
        file_types: File-type identifiers.

    Returns:
        Server blocks in input order.
    """
    check_file_types(file_types)
    return [
        f"""\
<server
            class="{CONNECTION_PROVIDER}"
            id="lsp.server.{ft}"
            label="LSP Server for {ft}">
        </server>"""
        for ft in file_types
    ]


def get_content_type_mapping(file_types: list[str], server_id: str) -> list[str]:
    """Return one ``<contentTypeMapping>`` per file type.

    ``xml`` maps to the Eclipse XML content type, every other file type
    to the Java source content type.

    Args:
        file_types: File-type identifiers.
        server_id: Language-server identifier used as ``languageId``.

    Returns:
        Mapping blocks in input order.
    """
    check_file_types(file_types)
    return [
        f"""\
<contentTypeMapping
            contentType="{_content_type_for(ft)}"
            id="lsp.server.{ft}"
            languageId="{server_id}">
        </contentTypeMapping>"""
        for ft in file_types
    ]


def get_extension_points(
    file_types: list[str],
    server_id: str,
    proposals: dict[str, str] | None = None,
) -> list[str]:
    """Return every plugin.xml extension point for the connector.

    The first entry is always the ``languageServer`` extension wrapping
    all content-type mappings and server declarations. It is followed by
    one completion-proposal extension per marker present in ``file_types``.

    Args:
        file_types: File-type identifiers.
        server_id: Language-server identifier.
        proposals: Extra marker → fragment entries. Appended after the
            built-in ``xml`` and ``java`` entries, never replacing them.

    Returns:
        Extension point fragments.
    """
    check_file_types(file_types)

    mappings = "\n\t\t".join(get_content_type_mapping(file_types, server_id))
    servers = "\n\t\t".join(get_server_extensions(file_types))
    server = f"""
    <extension point="org.eclipse.lsp4e.languageServer">
        {mappings}
        {servers}
    </extension>"""

    table = dict(COMPLETION_PROPOSALS)
    for marker, fragment in (proposals or {}).items():
        table.setdefault(marker, fragment)

    extension_points = [server.strip()]
    for marker, fragment in table.items():
        if marker in file_types:
            extension_points.append(fragment)

    logger.debug(
        "Eclipse extension points for %s: %d fragment(s)",
        server_id, len(extension_points),
    )
    return extension_points
