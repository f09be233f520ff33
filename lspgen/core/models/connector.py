"""
Connector model — what the editor clients are generated for.

A connector pairs one language-server identifier with the file types
it serves. Loaded from connector.yml or built directly by callers.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

# File extension names without the dot (xml, java, ts, c++, ...)
_FILE_TYPE_RE = re.compile(r"^[A-Za-z0-9_+\-.]+$")


class ConnectorSpec(BaseModel):
    """A language-server connector and the file types it handles.

    Attributes:
        server_id:  Language-server identifier, interpolated into fragments.
        file_types: File-type identifiers, order preserved in every output.
        proposals:  Extra marker → completion-proposal fragments (Eclipse).
    """

    server_id: str = Field(min_length=1)
    file_types: list[str] = Field(min_length=1)
    proposals: dict[str, str] = Field(default_factory=dict)

    @field_validator("file_types")
    @classmethod
    def _check_file_types(cls, value: list[str]) -> list[str]:
        seen: set[str] = set()
        for ft in value:
            if not _FILE_TYPE_RE.match(ft):
                raise ValueError(f"Invalid file type identifier: {ft!r}")
            if ft in seen:
                raise ValueError(f"Duplicate file type identifier: {ft!r}")
            seen.add(ft)
        return value

    def has_file_type(self, name: str) -> bool:
        """Check if the connector serves a file type."""
        return name in self.file_types
