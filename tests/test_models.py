"""
Tests for domain models — validation, lookups.
"""

import pytest
from pydantic import ValidationError

from lspgen.core.models import ClientFragments, ConnectorSpec, FragmentSet


class TestConnectorSpec:
    def test_minimal(self):
        spec = ConnectorSpec(server_id="s", file_types=["xml"])
        assert spec.proposals == {}
        assert spec.has_file_type("xml")
        assert not spec.has_file_type("java")

    def test_order_preserved(self):
        spec = ConnectorSpec(server_id="s", file_types=["ts", "c++", "d.ts", "objective_c"])
        assert spec.file_types == ["ts", "c++", "d.ts", "objective_c"]

    @pytest.mark.parametrize("file_types", [[], [""], ["has space"], ["a|b"], ["x", "x"]])
    def test_invalid_file_types(self, file_types):
        with pytest.raises(ValidationError):
            ConnectorSpec(server_id="s", file_types=file_types)

    def test_roundtrip(self):
        spec = ConnectorSpec(server_id="s", file_types=["xml"], proposals={"xml": "<x/>"})
        assert ConnectorSpec.model_validate(spec.model_dump()) == spec


class TestClientFragments:
    def test_platforms(self):
        sets = {
            name: FragmentSet(platform=name, fragments={"k": name})
            for name in ("eclipse", "vscode", "che")
        }
        result = ClientFragments(server_id="s", **sets)
        assert result.platforms == sets
        assert result.vscode.get("k") == "vscode"

    def test_list_fragments_stay_lists(self):
        fs = FragmentSet(platform="vscode", fragments={"events": ["a", "b"], "ids": "'a'"})
        assert fs.get("events") == ["a", "b"]
        assert fs.get("ids") == "'a'"
