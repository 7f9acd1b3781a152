from typing import Any, Union

from graphviz import Digraph, Graph, Source  # type: ignore[import]

GraphLike = Union[str, Graph, Digraph, Source]


def serialize(graph: Any) -> str:
    """Return the DOT source of ``graph``.

    Accepts DOT text as is, graphviz graphs and sources, or any object with
    a ``source`` string attribute.
    """
    if isinstance(graph, str):
        return graph
    if isinstance(graph, (Graph, Digraph, Source)):
        return graph.source
    source = getattr(graph, "source", None)
    if isinstance(source, str):
        return source
    raise TypeError(f"{graph!r} is not a valid graph description")
