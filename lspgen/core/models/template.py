"""
Fragment models — what the generators hand to the manifest assembler.
"""

from __future__ import annotations

from pydantic import BaseModel


class FragmentSet(BaseModel):
    """Fragments generated for one editor platform.

    Attributes:
        platform:  Target platform name (eclipse, vscode, che).
        fragments: Fragment name → fragment list or joined string.
        reason:    Why these fragments were generated.
    """

    platform: str
    fragments: dict[str, list[str] | str]
    reason: str = ""

    def get(self, name: str) -> list[str] | str | None:
        """Look up a fragment by name."""
        return self.fragments.get(name)


class ClientFragments(BaseModel):
    """Fragments for every supported editor platform."""

    server_id: str
    eclipse: FragmentSet
    vscode: FragmentSet
    che: FragmentSet

    @property
    def platforms(self) -> dict[str, FragmentSet]:
        """Fragment sets keyed by platform name."""
        return {s.platform: s for s in (self.eclipse, self.vscode, self.che)}
