"""Tests for GestureResolver."""

import pytest

from sketchgraph.graph.models import EntityKind, Position
from sketchgraph.interaction.events import Clicked, ClickedEmpty, Consumed
from sketchgraph.interaction.tools import Tool
from sketchgraph.resolver.events import AddedEdge, AddedNode, RemovedEdge, RemovedNode
from sketchgraph.resolver.gestures import GestureIntent


def node_click(node_id: int, tool: Tool = Tool.EDGE) -> Clicked:
    return Clicked(target=node_id, target_kind=EntityKind.NODE, tool=tool)


def edge_click(edge_id: int, tool: Tool) -> Clicked:
    return Clicked(target=edge_id, target_kind=EntityKind.EDGE, tool=tool)


def empty_click(tool: Tool, x: float = 0.0, y: float = 0.0) -> ClickedEmpty:
    return ClickedEmpty(tool=tool, position=Position(x=x, y=y))


@pytest.fixture
def click(interaction_log, resolver):
    """Record a click and run the resolver, like one editor tick."""

    def _click(event):
        interaction_log.record(event)
        return resolver.run()

    return _click


@pytest.fixture
def nodes(store):
    """Three nodes A, B, C already in the store."""
    return [store.add_node(Position(x=i * 100, y=0)) for i in range(3)]


class TestEmptySpace:
    @pytest.mark.parametrize("tool", [Tool.SELECTOR, Tool.EDGE])
    def test_empty_clicks_are_noops(self, tool, click, store, event_log, interaction_log):
        for _ in range(3):
            resolution = click(empty_click(tool))
            assert resolution.intent == GestureIntent.NONE
            assert not resolution.committed

        assert store.node_count == 0
        assert store.edge_count == 0
        assert len(event_log) == 0
        assert not any(isinstance(e, Consumed) for e in interaction_log)

    def test_node_tool_adds_one_node(self, click, store, event_log, interaction_log):
        resolution = click(empty_click(Tool.NODE, x=12, y=-7))

        assert resolution.intent == GestureIntent.ADD_NODE
        assert store.node_count == 1
        node = store.get_node(resolution.target)
        assert node.position == Position(x=12, y=-7)
        assert len(event_log) == 1
        assert event_log.latest() == AddedNode(node=node)
        assert isinstance(interaction_log.last(), Consumed)

    def test_repeated_node_clicks_each_add_a_node(self, click, store, event_log):
        for i in range(3):
            click(empty_click(Tool.NODE, x=i * 50))

        assert store.node_count == 3
        assert [type(e) for e in event_log] == [AddedNode] * 3


class TestEdgeGesture:
    def test_two_node_clicks_create_edge(self, click, nodes, store, event_log, interaction_log):
        a, b, _ = nodes

        first = click(node_click(a))
        second = click(node_click(b))

        assert not first.committed
        assert second.intent == GestureIntent.CONNECT_NODES
        assert second.consumed
        assert store.edge_count == 1
        edge = store.get_edge(second.target)
        assert (edge.node_a, edge.node_b) == (a, b)
        assert event_log.entries == (AddedEdge(edge=edge),)
        assert interaction_log.tail(3) == (node_click(a), node_click(b), Consumed())

    def test_completed_gesture_is_not_reused(self, click, nodes, store):
        a, b, c = nodes

        click(node_click(a))
        click(node_click(b))
        third = click(node_click(c))

        assert not third.committed
        assert store.edge_count == 1
        assert store.edges_between(a, c) == []
        assert store.edges_between(b, c) == []

    def test_chain_of_four_clicks_makes_two_edges(self, click, nodes, store):
        a, b, c = nodes

        click(node_click(a))
        click(node_click(b))
        click(node_click(c))
        click(node_click(a))

        assert store.edge_count == 2
        assert len(store.edges_between(a, b)) == 1
        assert len(store.edges_between(c, a)) == 1

    def test_same_node_twice_stays_pending(self, click, nodes, store, interaction_log):
        a, b, _ = nodes

        click(node_click(a))
        repeat = click(node_click(a))

        assert not repeat.committed
        assert store.edge_count == 0
        assert not isinstance(interaction_log.last(), Consumed)

        follow_up = click(node_click(b))

        assert follow_up.committed
        assert len(store.edges_between(a, b)) == 1

    def test_intervening_click_drops_pending(self, click, nodes, store):
        a, b, _ = nodes

        click(node_click(a))
        click(node_click(a, Tool.SELECTOR))
        result = click(node_click(b))

        assert not result.committed
        assert store.edge_count == 0

    def test_empty_click_drops_pending(self, click, nodes, store):
        a, b, _ = nodes

        click(node_click(a))
        click(empty_click(Tool.EDGE))
        click(node_click(b))

        assert store.edge_count == 0

    def test_click_after_node_placement_starts_new_gesture(self, click, store):
        click(empty_click(Tool.NODE))
        click(empty_click(Tool.NODE, x=100))
        a, b = [n.identity for n in store.iter_nodes()]

        first = click(node_click(a))
        second = click(node_click(b))

        assert not first.committed
        assert second.committed

    def test_duplicate_edges_allowed(self, click, nodes, store):
        a, b, _ = nodes

        for _ in range(2):
            click(node_click(a))
            click(node_click(b))

        assert len(store.edges_between(a, b)) == 2


class TestIdempotentReplay:
    def test_resolving_again_changes_nothing(self, click, resolver, nodes, store, event_log):
        a, b, _ = nodes
        click(node_click(a))
        click(node_click(b))

        again = resolver.resolve()

        assert again.intent == GestureIntent.NONE
        assert store.edge_count == 1
        assert len(event_log) == 1

    def test_run_without_new_click_is_noop(self, click, resolver, store):
        click(empty_click(Tool.NODE))

        assert resolver.run() is None
        assert store.node_count == 1

    def test_resolving_node_placement_again(self, click, resolver, store):
        click(empty_click(Tool.NODE))

        resolver.resolve()
        resolver.resolve()

        assert store.node_count == 1

    def test_empty_log(self, resolver):
        assert resolver.resolve().intent == GestureIntent.NONE
        assert resolver.run() is None


class TestInspect:
    @pytest.mark.parametrize("tool", [Tool.SELECTOR, Tool.NODE])
    def test_node_click_inspects(self, tool, click, nodes, event_log, interaction_log):
        resolution = click(node_click(nodes[0], tool))

        assert resolution.intent == GestureIntent.INSPECT_NODE
        assert resolution.target == nodes[0]
        assert not resolution.committed
        assert len(event_log) == 0
        assert not isinstance(interaction_log.last(), Consumed)

    @pytest.mark.parametrize("tool", [Tool.SELECTOR, Tool.EDGE])
    def test_edge_click_inspects(self, tool, click, nodes, store):
        edge_id = store.add_edge(nodes[0], nodes[1])

        resolution = click(edge_click(edge_id, tool))

        assert resolution.intent == GestureIntent.INSPECT_EDGE
        assert resolution.target == edge_id

    def test_edge_with_node_tool_is_noop(self, click, nodes, store):
        edge_id = store.add_edge(nodes[0], nodes[1])

        resolution = click(edge_click(edge_id, Tool.NODE))

        assert resolution.intent == GestureIntent.NONE
        assert store.node_count == 3


class TestStoreErrors:
    def test_unknown_node_leaves_everything_unchanged(
        self, click, nodes, store, event_log, interaction_log
    ):
        a, _, _ = nodes
        click(node_click(a))
        before = len(interaction_log)

        resolution = click(node_click(999))

        assert resolution.failed
        assert "999" in resolution.error
        assert store.edge_count == 0
        assert len(event_log) == 0
        assert len(interaction_log) == before + 1
        assert not isinstance(interaction_log.last(), Consumed)

    def test_rejected_duplicate_is_reported(self, click, nodes, store, event_log):
        store.allow_duplicate_edges = False
        a, b, _ = nodes
        click(node_click(a))
        click(node_click(b))
        click(node_click(a))

        resolution = click(node_click(b))

        assert resolution.failed
        assert store.edge_count == 1
        assert len(event_log) == 1


class TestRemoval:
    def test_remove_node_emits_cascade_then_node(self, resolver, nodes, store, event_log):
        a, b, c = nodes
        ab = store.add_edge(a, b)
        store.add_edge(b, c)

        resolution = resolver.remove_node(a)

        assert resolution.intent == GestureIntent.REMOVE_NODE
        assert [type(e) for e in resolution.events] == [RemovedEdge, RemovedNode]
        assert resolution.events[0].edge.identity == ab
        assert event_log.latest() == RemovedNode(node=resolution.events[1].node)
        assert store.edge_count == 1

    def test_remove_edge(self, resolver, nodes, store, event_log):
        edge_id = store.add_edge(nodes[0], nodes[1])

        resolution = resolver.remove_edge(edge_id)

        assert resolution.committed
        assert isinstance(event_log.latest(), RemovedEdge)
        assert store.edge_count == 0

    def test_remove_unknown_is_reported(self, resolver, event_log):
        node_result = resolver.remove_node(42)
        edge_result = resolver.remove_edge(42)

        assert node_result.failed
        assert edge_result.failed
        assert len(event_log) == 0

    def test_removal_retires_pending_click(
        self, click, resolver, nodes, store, interaction_log
    ):
        a, b, c = nodes
        edge_id = store.add_edge(b, c)
        click(node_click(a))

        resolution = resolver.remove_edge(edge_id)
        follow_up = click(node_click(b))

        assert resolution.consumed
        assert not follow_up.committed
        assert interaction_log.tail(3) == (node_click(a), Consumed(), node_click(b))

    def test_removal_without_pending_click_adds_no_marker(
        self, click, resolver, nodes, interaction_log
    ):
        click(empty_click(Tool.NODE, x=500))
        before = len(interaction_log)

        resolution = resolver.remove_node(nodes[0])

        assert not resolution.consumed
        assert len(interaction_log) == before
