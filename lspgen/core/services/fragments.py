"""Client fragment generation — Eclipse, VS Code and Eclipse Che at once."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from lspgen.core.models import ClientFragments, ConnectorSpec, FragmentSet
from lspgen.core.services.generators import che, eclipse, vscode

logger = logging.getLogger(__name__)


def build_client_fragments(spec: ConnectorSpec) -> ClientFragments:
    """Run every generator for a connector and group the results per platform.

    Raises:
        InvalidInput: If a generator rejects the file types.
    """
    file_types = list(spec.file_types)
    listed = ", ".join(file_types)

    eclipse_set = FragmentSet(
        platform="eclipse",
        fragments={
            "extension_points": eclipse.get_extension_points(
                file_types, spec.server_id, spec.proposals,
            ),
        },
        reason=f"Eclipse extension points for file types: {listed}",
    )
    vscode_set = FragmentSet(
        platform="vscode",
        fragments={
            "activation_events": vscode.get_activation_events(file_types),
            "languages": vscode.get_contributes_languages(file_types),
            "file_events": vscode.get_file_events(file_types),
            "file_types": vscode.get_file_types_as_string_array_format(file_types),
            "document_language_id": vscode.get_document_language_id(file_types),
        },
        reason=f"VS Code contributions for file types: {listed}",
    )
    che_set = FragmentSet(
        platform="che",
        fragments={"file_type_regex": che.get_file_type_regex(file_types)},
        reason=f"Eclipse Che file pattern for file types: {listed}",
    )

    logger.debug("Built client fragments for %s (%s)", spec.server_id, listed)
    return ClientFragments(
        server_id=spec.server_id,
        eclipse=eclipse_set,
        vscode=vscode_set,
        che=che_set,
    )


def generate_client_fragments(
    file_types: list[str],
    server_id: str,
    proposals: dict[str, str] | None = None,
) -> dict:
    """Generate fragments for every client platform.

    Returns:
        {"ok": True, "fragments": {...}} or {"error": "..."}
    """
    try:
        spec = ConnectorSpec(
            server_id=server_id,
            file_types=file_types,
            proposals=proposals or {},
        )
    except ValidationError as e:
        logger.warning("Rejected connector %r: %s", server_id, e)
        return {"error": f"Invalid connector: {e}"}

    result = build_client_fragments(spec)

    logger.info(
        "Generated client fragments for %s (%d file types)",
        server_id, len(file_types),
    )
    return {"ok": True, "fragments": result.model_dump()}
