"""Tests for the parent-linked JSON tree."""

import pytest

from armory_stripper.content.tree import JsonNode, NodeKind, find_strings, kind_of


def _node_for(root: JsonNode, value: str) -> JsonNode:
    matches = find_strings(root, value)
    assert len(matches) == 1
    return matches[0]


class TestKinds:
    def test_kind_of(self) -> None:
        assert kind_of({}) is NodeKind.OBJECT
        assert kind_of([]) is NodeKind.ARRAY
        assert kind_of("x") is NodeKind.STRING
        assert kind_of(True) is NodeKind.BOOL
        assert kind_of(3) is NodeKind.NUMBER
        assert kind_of(1.5) is NodeKind.NUMBER
        assert kind_of(None) is NodeKind.NULL


class TestNavigation:
    def test_descendants_in_document_order(self) -> None:
        root = JsonNode.root({"a": [1, {"b": "x"}], "c": None})
        assert [node.path for node in root.descendants()] == ["a", "a[0]", "a[1]", "a[1].b", "c"]

    def test_path_quotes_unusual_keys(self) -> None:
        root = JsonNode.root({"a": {"b c": [1, {"d": "x"}]}})
        assert _node_for(root, "x").path == "a['b c'][1].d"

    def test_root_path_is_empty(self) -> None:
        assert JsonNode.root({}).path == ""

    def test_find_strings_ignores_case_and_keys(self) -> None:
        root = JsonNode.root({"Scope": "scope", "other": ["SCOPE", "scope_extra"]})
        assert [node.path for node in find_strings(root, "Scope")] == ["Scope", "other[0]"]


class TestEnclosingRecord:
    def test_property_value_resolves_to_its_object(self) -> None:
        record_value = {"id": "A", "count": 1}
        root = JsonNode.root({"list": [record_value]})
        record = _node_for(root, "A").enclosing_record()
        assert record is not None
        assert record.value is record_value
        assert record.path == "list[0]"

    def test_array_element_has_no_record(self) -> None:
        root = JsonNode.root({"filter": ["A", "B"]})
        assert _node_for(root, "A").enclosing_record() is None

    def test_top_level_value_resolves_to_root(self) -> None:
        root = JsonNode.root({"id": "A"})
        record = _node_for(root, "A").enclosing_record()
        assert record is not None and record.is_root


class TestDetach:
    def test_detach_from_array_by_identity(self) -> None:
        first, second = {"id": "A"}, {"id": "A"}
        document = {"list": [first, second]}
        root = JsonNode.root(document)
        nodes = [match.enclosing_record() for match in find_strings(root, "A")]

        # Detaching the first shifts the second, which must still be found
        assert nodes[0].detach()
        assert nodes[1].detach()
        assert document == {"list": []}

    def test_detach_property_value(self) -> None:
        document = {"reward": {"id": "A"}, "keep": 1}
        record = _node_for(JsonNode.root(document), "A").enclosing_record()
        assert record.detach()
        assert document == {"keep": 1}

    def test_detach_twice_reports_false(self) -> None:
        document = {"list": [{"id": "A"}]}
        record = _node_for(JsonNode.root(document), "A").enclosing_record()
        assert record.detach()
        assert not record.detach()

    def test_root_cannot_be_detached(self) -> None:
        with pytest.raises(ValueError):
            JsonNode.root({}).detach()
