"""Graph traversals, cycle detection, topological ordering and safe states."""

from __future__ import annotations

import math
from collections import deque
from itertools import pairwise
from typing import Iterable, Sequence

_DONE = object()
_ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyz")


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def _adjacency_lists(graph: Iterable[Iterable[int]]) -> list[list[int]]:
    lists = [list(neighbours) for neighbours in graph]
    for neighbours in lists:
        for vertex in neighbours:
            _check_vertex(vertex, len(lists))
    return lists


def _directed(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    _check_count(vertex_count)
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for edge in edges:
        u, v = edge[0], edge[1]
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
    return adjacency


def _undirected(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    _check_count(vertex_count)
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for edge in edges:
        u, v = edge[0], edge[1]
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def is_bipartite_bfs(graph: Iterable[Iterable[int]]) -> bool:
    """Tell whether the undirected graph can be two-coloured, using BFS levels."""
    adjacency = _adjacency_lists(graph)
    level: list[int | None] = [None] * len(adjacency)
    for start in range(len(adjacency)):
        if level[start] is not None:
            continue
        level[start] = 0
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in adjacency[current]:
                if level[neighbour] is None:
                    level[neighbour] = level[current] + 1
                    queue.append(neighbour)
                elif level[neighbour] == level[current]:
                    return False
    return True


def is_bipartite_dfs(graph: Iterable[Iterable[int]]) -> bool:
    """Tell whether the undirected graph can be two-coloured, using DFS depths."""
    adjacency = _adjacency_lists(graph)
    depth: list[int | None] = [None] * len(adjacency)
    for start in range(len(adjacency)):
        if depth[start] is not None:
            continue
        depth[start] = 0
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            neighbour = next(neighbours, _DONE)
            if neighbour is _DONE:
                stack.pop()
            elif depth[neighbour] is None:
                depth[neighbour] = depth[node] + 1
                stack.append((neighbour, iter(adjacency[neighbour])))
            elif (depth[node] - depth[neighbour]) % 2 == 0:
                return False
    return True


def has_undirected_cycle_bfs(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether an undirected graph holds a cycle, tracking BFS parents."""
    adjacency = _undirected(vertex_count, edges)
    visited = [False] * vertex_count
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([(start, -1)])
        while queue:
            current, parent = queue.popleft()
            for neighbour in adjacency[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append((neighbour, current))
                elif neighbour != parent:
                    return True
    return False


def has_undirected_cycle_dfs(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether an undirected graph holds a cycle, tracking DFS parents."""
    adjacency = _undirected(vertex_count, edges)
    visited = [False] * vertex_count
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, -1, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            neighbour = next(neighbours, _DONE)
            if neighbour is _DONE:
                stack.pop()
            elif not visited[neighbour]:
                visited[neighbour] = True
                stack.append((neighbour, node, iter(adjacency[neighbour])))
            elif neighbour != parent:
                return True
    return False


def has_directed_cycle(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether a directed graph holds a cycle, using the DFS path."""
    adjacency = _directed(vertex_count, edges)
    visited = [False] * vertex_count
    on_path = [False] * vertex_count
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            neighbour = next(neighbours, _DONE)
            if neighbour is _DONE:
                on_path[node] = False
                stack.pop()
            elif not visited[neighbour]:
                visited[neighbour] = on_path[neighbour] = True
                stack.append((neighbour, iter(adjacency[neighbour])))
            elif on_path[neighbour]:
                return True
    return False


def _kahn(adjacency: list[list[int]]) -> list[int]:
    indegree = [0] * len(adjacency)
    for neighbours in adjacency:
        for vertex in neighbours:
            indegree[vertex] += 1
    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbour in adjacency[current]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def has_directed_cycle_kahn(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether a directed graph holds a cycle: Kahn's algorithm cannot finish."""
    return len(_kahn(_directed(vertex_count, edges))) != vertex_count


def topo_sort_kahn(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Topological order by repeatedly removing vertices of in-degree zero.

    On a cyclic graph the vertices on or behind a cycle are left out.
    """
    return _kahn(_directed(vertex_count, edges))


def _reverse_postorder(adjacency: list[list[int]]) -> list[int]:
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for start in range(len(adjacency)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            neighbour = next(neighbours, _DONE)
            if neighbour is _DONE:
                finished.append(node)
                stack.pop()
            elif not visited[neighbour]:
                visited[neighbour] = True
                stack.append((neighbour, iter(adjacency[neighbour])))
    finished.reverse()
    return finished


def topo_sort_dfs(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Topological order as reversed DFS finishing order."""
    return _reverse_postorder(_directed(vertex_count, edges))


def eventual_safe_nodes(graph: Iterable[Iterable[int]]) -> list[int]:
    """Ascending list of nodes from which every path ends at a terminal node (DFS)."""
    adjacency = _adjacency_lists(graph)
    unvisited, visiting, safe, unsafe = range(4)
    state = [unvisited] * len(adjacency)
    for start in range(len(adjacency)):
        if state[start] != unvisited:
            continue
        state[start] = visiting
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            neighbour = next(neighbours, _DONE)
            if neighbour is _DONE:
                state[node] = safe
                stack.pop()
            elif state[neighbour] == unvisited:
                state[neighbour] = visiting
                stack.append((neighbour, iter(adjacency[neighbour])))
            elif state[neighbour] in (visiting, unsafe):
                for on_path, _ in stack:
                    state[on_path] = unsafe
                stack.clear()
    return [node for node, status in enumerate(state) if status == safe]


def eventual_safe_nodes_topological(graph: Iterable[Iterable[int]]) -> list[int]:
    """Ascending list of safe nodes, peeling terminal nodes off the reversed graph."""
    adjacency = _adjacency_lists(graph)
    reverse: list[list[int]] = [[] for _ in adjacency]
    outdegree = [len(neighbours) for neighbours in adjacency]
    for node, neighbours in enumerate(adjacency):
        for neighbour in neighbours:
            reverse[neighbour].append(node)
    queue = deque(node for node, degree in enumerate(outdegree) if degree == 0)
    safe = [False] * len(adjacency)
    while queue:
        current = queue.popleft()
        safe[current] = True
        for predecessor in reverse[current]:
            outdegree[predecessor] -= 1
            if outdegree[predecessor] == 0:
                queue.append(predecessor)
    return [node for node, is_safe in enumerate(safe) if is_safe]


def bfs_order(adjacency: Iterable[Iterable[int]]) -> list[int]:
    """Breadth-first visiting order over every component, starting from low indices."""
    lists = _adjacency_lists(adjacency)
    visited = [False] * len(lists)
    order = []
    for start in range(len(lists)):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in lists[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
    return order


def dfs_order(adjacency: Iterable[Iterable[int]], start: int) -> list[int]:
    """Depth-first preorder of the vertices reachable from ``start``."""
    lists = _adjacency_lists(adjacency)
    _check_vertex(start, len(lists))
    visited = [False] * len(lists)
    visited[start] = True
    order = [start]
    stack = [iter(lists[start])]
    while stack:
        neighbour = next(stack[-1], _DONE)
        if neighbour is _DONE:
            stack.pop()
        elif not visited[neighbour]:
            visited[neighbour] = True
            order.append(neighbour)
            stack.append(iter(lists[neighbour]))
    return order


def count_provinces(matrix: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    size = len(matrix)
    seen = [False] * size
    provinces = 0
    for start in range(size):
        if seen[start]:
            continue
        provinces += 1
        seen[start] = True
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for other, connected in enumerate(matrix[current]):
                if connected and not seen[other]:
                    seen[other] = True
                    queue.append(other)
    return provinces


def alien_order(words: Sequence[str]) -> str:
    """Letter order of an alien alphabet implied by sorted words.

    Returns an empty string when the words are inconsistent: a word precedes
    its own prefix, or the letter constraints form a cycle.
    """
    letters = set("".join(words))
    if not letters <= _ALPHABET:
        raise ValueError("words must use lowercase letters a-z only")
    successors: dict[str, set[str]] = {}
    for previous, word in pairwise(words):
        for a, b in zip(previous, word):
            if a != b:
                successors.setdefault(a, set()).add(b)
                break
        else:
            if len(previous) > len(word):
                return ""

    finished: list[str] = []
    state: dict[str, bool] = {}

    def visit(letter: str) -> bool:
        state[letter] = True
        for following in sorted(successors.get(letter, ())):
            if state.get(following):
                return True
            if following not in state and visit(following):
                return True
        state[letter] = False
        finished.append(letter)
        return False

    for letter in sorted(letters):
        if letter not in state and visit(letter):
            return ""
    return "".join(reversed(finished))


def shortest_path_dag(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Shortest distances from vertex 0 in a weighted DAG; -1 where unreachable.

    Each edge is ``(u, v, weight)``.
    """
    if vertex_count < 1:
        raise ValueError("at least one vertex is needed")
    weighted: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        weighted[u].append((v, weight))
    order = _reverse_postorder([[v for v, _ in out] for out in weighted])
    distance: list[float] = [math.inf] * vertex_count
    distance[0] = 0
    for node in order:
        if math.isinf(distance[node]):
            continue
        for neighbour, weight in weighted[node]:
            distance[neighbour] = min(distance[neighbour], distance[node] + weight)
    return [-1 if math.isinf(d) else int(d) for d in distance]