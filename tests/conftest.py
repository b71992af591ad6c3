"""
Pytest Configuration and Fixtures

Shared fixtures for all tests.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Any, Dict, List

from updl.core.config import CompilerConfig, set_config
from updl.graph.flow_graph import FlowGraph
from updl.models.nodes import parse_edges, parse_nodes


@pytest.fixture(autouse=True)
def default_config():
    """Keep the process-wide config at defaults for every test."""
    config = CompilerConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def make_node():
    """Factory for raw editor nodes: make_node("e1", "entity", entityType="ship")."""

    def _factory(node_id: str, name: str, label: str = None, category: str = None, **inputs) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": name, "inputs": inputs}
        if label is not None:
            data["label"] = label
        if category is not None:
            data["category"] = category
        return {"id": node_id, "data": data}

    return _factory


@pytest.fixture
def make_flow():
    """Factory turning nodes and (source, target) pairs into editor JSON."""

    def _factory(nodes: List[Dict[str, Any]], edges: List[tuple] = ()) -> str:
        return json.dumps({
            "nodes": nodes,
            "edges": [{"source": source, "target": target} for source, target in edges],
        })

    return _factory


@pytest.fixture
def make_graph():
    """Factory building a FlowGraph from raw nodes and (source, target) pairs."""

    def _factory(nodes: List[Dict[str, Any]], edges: List[tuple] = ()) -> FlowGraph:
        raw_edges = [{"source": source, "target": target} for source, target in edges]
        return FlowGraph(parse_nodes(nodes), parse_edges(raw_edges))

    return _factory


@pytest.fixture
def quiz_flow(make_node, make_flow) -> str:
    """Two chained quiz spaces, each with a question and its answers."""
    nodes = [
        make_node("s1", "Space", label="Intro", showPoints="true"),
        make_node("s2", "Space", label="Round 2"),
        make_node("q1", "Data", dataType="Question", content="2 + 2?"),
        make_node("a1", "Data", dataType="Answer", content="4", isCorrect=True),
        make_node("a2", "Data", dataType="Answer", content="5"),
        make_node("o1", "Object", primitive="sphere", color="#ff0000"),
        make_node("q2", "Data", dataType="Question", content="Capital of France?"),
        make_node("a3", "Data", dataType="Answer", content="Paris", isCorrect="true"),
    ]
    edges = [
        ("a1", "q1"),
        ("a2", "q1"),
        ("q1", "s1"),
        ("o1", "s1"),
        ("s1", "s2"),
        ("a3", "q2"),
        ("q2", "s2"),
    ]
    return make_flow(nodes, edges)


@pytest.fixture
def game_flow(make_node, make_flow) -> str:
    """Single space with a ship entity carrying components and a click event."""
    nodes = [
        make_node("space", "Space", label="Sector", background="#101020"),
        make_node("ship", "Entity", entityType="ship", tags="player, ship",
                  transform='{"pos": [0, 2, 0]}'),
        make_node("inv", "Component", componentType="inventory", maxCapacity="40"),
        make_node("gun", "Component", componentType="weapon"),
        make_node("click", "Event", eventType="click"),
        make_node("shoot", "Action", actionType="fire", params={"burst": 3}),
        make_node("cam", "Camera", fov=60),
        make_node("sun", "Light", lightType="point", intensity=2),
        make_node("chat", "ChatOpenAI"),
    ]
    edges = [
        ("inv", "ship"),
        ("gun", "ship"),
        ("click", "ship"),
        ("shoot", "click"),
        ("ship", "space"),
        ("cam", "space"),
        ("sun", "space"),
    ]
    return make_flow(nodes, edges)
