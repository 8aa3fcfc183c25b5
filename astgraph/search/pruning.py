"""
Multi-Path Pruning Search for astgraph

Breadth-first search over a Graph that keeps only the first path found to
each node. Later paths ending at an already explored node are dropped
when they reach the front of the frontier.

Algorithm:
    frontier = [[start]], explored = {}
    while frontier:
        path = frontier.pop_front()
        node = path[-1]
        if node in explored: continue
        explored.add(node)
        if goal(node): return path
        for each stored edge leaving node whose target is not on path:
            frontier.push_back(path + [target])
    return not found

Properties:
    - The returned path has the fewest edges; ties go to the edge that
      was added to the graph first
    - Terminates on cyclic graphs: each node is expanded at most once
    - Nodes are compared by key (name), not object identity

Reference: Poole & Mackworth, Artificial Intelligence 3e, section 3.7.2
"""

import logging
from collections import deque
from typing import Callable, Optional

from astgraph.graph.model import Graph
from astgraph.models import Node

logger = logging.getLogger(__name__)

Goal = Callable[[Node], bool]


def multi_path_pruning(
    graph: Graph,
    start: Node,
    goal: Goal,
) -> Optional[list[Node]]:
    """
    Find the first path from start to a node satisfying goal.

    Args:
        graph: The graph to search (not modified)
        start: Node the search begins at
        goal: Predicate that ends the search when it holds

    Returns:
        The path as a list of nodes from start to the goal node,
        or None if no reachable node satisfies goal

    Example:
        >>> path = multi_path_pruning(graph, main, lambda n: n.name == "println")
        >>> [n.name for n in path]
        ['main', 'printMore', 'println']
    """
    frontier: deque[list[Node]] = deque([[start]])
    explored: set[str] = set()

    while frontier:
        path = frontier.popleft()
        node = path[-1]

        if node.key in explored:
            continue
        explored.add(node.key)

        if goal(node):
            logger.debug("Reached %s after exploring %d node(s)", node.name, len(explored))
            return path

        on_path = {step.key for step in path}
        for edge in graph.edges:
            if edge.source.key == node.key and edge.target.key not in on_path:
                frontier.append(path + [edge.target])

    logger.debug("No path from %s; explored %d node(s)", start.name, len(explored))
    return None


def find_path(
    graph: Graph,
    start_name: str,
    goal_name: str,
) -> Optional[list[Node]]:
    """
    Find a path between two named nodes.

    Args:
        graph: The graph to search
        start_name: Name of the registered start node
        goal_name: Name of the node to reach

    Returns:
        The path, or None if the start node is unknown or no path exists
    """
    start = graph.get_node(start_name)
    if start is None:
        logger.debug("Start node %r is not registered", start_name)
        return None
    return multi_path_pruning(graph, start, lambda node: node.name == goal_name)
