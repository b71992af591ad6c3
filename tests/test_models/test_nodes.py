"""
Tests for Flow Graph Input Models

Tests for updl/models/nodes.py and updl/models/records.py
"""

from updl.core.constants import NodeKind
from updl.models.nodes import FlowEdge, FlowNode, parse_edges, parse_nodes
from updl.models.records import Component, Object3D, Scene, Space, SpaceSettings, Vector3


class TestFlowNode:
    """Tests for FlowNode parsing."""

    def test_from_dict(self):
        node = FlowNode.from_dict({
            "id": "e1",
            "data": {"name": "Entity", "label": "Ship", "category": "UPDL", "inputs": {"entityType": "ship"}},
        })

        assert node.id == "e1"
        assert node.kind is NodeKind.ENTITY
        assert node.label == "Ship"
        assert node.category == "UPDL"
        assert node.inputs == {"entityType": "ship"}

    def test_numeric_id(self):
        assert FlowNode.from_dict({"id": 7}).id == "7"

    def test_unusable_ids(self):
        assert FlowNode.from_dict({"id": True}) is None
        assert FlowNode.from_dict({"id": None}) is None
        assert FlowNode.from_dict({"data": {"name": "Space"}}) is None

    def test_missing_data(self):
        """Test that a node without data is kept but has no kind."""
        node = FlowNode.from_dict({"id": "n1", "data": "broken"})

        assert node.kind is None
        assert node.inputs == {}

    def test_non_dict_inputs(self):
        node = FlowNode.from_dict({"id": "n1", "data": {"name": "Object", "inputs": []}})

        assert node.kind is NodeKind.OBJECT
        assert node.inputs == {}


class TestParseArrays:
    """Tests for tolerant array parsing."""

    def test_parse_nodes_skips_junk(self):
        nodes = parse_nodes([
            {"id": "a", "data": {"name": "Space"}},
            "not a node",
            {"data": {"name": "Object"}},
            {"id": "b"},
        ])

        assert [node.id for node in nodes] == ["a", "b"]

    def test_parse_edges_skips_junk(self):
        edges = parse_edges([
            {"source": "a", "target": "b"},
            {"source": "a"},
            42,
            {"source": 1, "target": 2},
        ])

        assert edges == [FlowEdge("a", "b"), FlowEdge("1", "2")]

    def test_non_list_input(self):
        assert parse_nodes(None) == []
        assert parse_edges({"source": "a"}) == []


class TestRecords:
    """Tests for record serialization."""

    def test_to_dict_uses_camel_case(self):
        space = Space(id="s1", name="Intro", show_points=True)

        data = space.to_dict()

        assert data["showPoints"] is True
        assert data["leadCollection"] == {"collectName": False, "collectEmail": False, "collectPhone": False}
        assert data["settings"] == {"background": "#000000"}

    def test_populate_by_alias(self):
        component = Component.model_validate({"id": "c1", "componentType": "weapon", "fireRate": 4})

        assert component.component_type == "weapon"
        assert component.fire_rate == 4
        assert "maxCapacity" not in component.to_dict()

    def test_emptied_keeps_identity(self):
        space = Space(
            id="s1",
            name="Intro",
            space_type="quiz",
            settings=SpaceSettings(background="#123456"),
            universo=[{"name": "Universo"}],
        )
        space.objects.append(Object3D(id="o1", name="Box"))

        empty = space.emptied()

        assert empty.id == "s1"
        assert empty.space_type == "quiz"
        assert empty.settings.background == "#123456"
        assert empty.objects == []
        assert empty.universo == []
        assert len(space.objects) == 1

    def test_scene_wire_shape(self):
        scene = Scene(space_id="s1", space_data=Space(id="s1", name="Intro"), order=0, is_last=True)

        data = scene.to_dict()

        assert data["spaceId"] == "s1"
        assert data["isLast"] is True
        assert data["isResultsScene"] is False
        assert "nextSceneId" not in data

    def test_vector_defaults(self):
        assert Vector3().to_dict() == {"x": 0, "y": 0, "z": 0}
