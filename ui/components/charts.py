"""
Plotly chart components for the comparison page.
"""

from __future__ import annotations

import plotly.graph_objects as go

from pathfinder.config import (
    COLOR_EXPLORED,
    COLOR_GOAL,
    COLOR_PATH,
    COLOR_START,
    COLOR_UNVISITED,
    GRAPH_EDGE_WIDTH,
    GRAPH_NODE_SIZE,
)
from pathfinder.graph import Graph
from pathfinder.metrics import SearchMetrics
from pathfinder.search import SearchResult


def _vertex_color(name: str, result: SearchResult | None) -> str:
    if result is None:
        return COLOR_UNVISITED
    if name == result.start:
        return COLOR_START
    if name == result.goal:
        return COLOR_GOAL
    if name in result.path:
        return COLOR_PATH
    if name in result.explored_order:
        return COLOR_EXPLORED
    return COLOR_UNVISITED


def create_graph_figure(graph: Graph, result: SearchResult | None = None, title: str = "") -> go.Figure:
    """Graph drawing with explored vertices and the found path highlighted."""
    fig = go.Figure()
    path_edges = set(zip(result.path, result.path[1:])) if result else set()

    # One line per undirected pair; the reverse edge of a bidirectional pair is skipped
    drawn: set[frozenset[str]] = set()
    for edge in graph.edges():
        pair = frozenset((edge.source, edge.target))
        if pair in drawn:
            continue
        drawn.add(pair)

        source = graph.vertex(edge.source)
        target = graph.vertex(edge.target)
        on_path = (edge.source, edge.target) in path_edges or (edge.target, edge.source) in path_edges

        fig.add_trace(go.Scatter(
            x=[source.x, target.x],
            y=[source.y, target.y],
            mode="lines",
            line=dict(
                color=COLOR_PATH if on_path else "#7f8c8d",
                width=GRAPH_EDGE_WIDTH * (4 if on_path else 1),
            ),
            hoverinfo="skip",
            showlegend=False,
        ))
        fig.add_annotation(
            x=(source.x + target.x) / 2,
            y=(source.y + target.y) / 2,
            text=f"{edge.cost:g}",
            showarrow=False,
            font=dict(size=10, color="#555"),
            bgcolor="white",
        )

    vertices = graph.vertices()
    order = {name: i + 1 for i, name in enumerate(result.explored_order)} if result else {}
    fig.add_trace(go.Scatter(
        x=[v.x for v in vertices],
        y=[v.y for v in vertices],
        mode="markers+text",
        marker=dict(
            size=GRAPH_NODE_SIZE,
            color=[_vertex_color(v.name, result) for v in vertices],
            line=dict(width=2, color="#2c3e50"),
        ),
        text=[v.name for v in vertices],
        textposition="middle center",
        textfont=dict(size=10, color="#2c3e50"),
        hovertext=[
            f"<b>{v.name}</b><br>h = {v.h:g}"
            + (f"<br>visited #{order[v.name]}" if v.name in order else "")
            for v in vertices
        ],
        hoverinfo="text",
        showlegend=False,
    ))

    fig.update_layout(
        title=title,
        height=360,
        margin=dict(t=35, b=15, l=15, r=15),
        plot_bgcolor="white",
    )
    fig.update_xaxes(visible=False)
    # Canvas coordinates grow downward
    fig.update_yaxes(visible=False, autorange="reversed", scaleanchor="x")
    return fig


def create_metrics_chart(metrics: list[SearchMetrics]) -> go.Figure:
    """Grouped bars of precision, recall and F1 per strategy."""
    found = [m for m in metrics if m.found]
    labels = [m.strategy for m in found]

    fig = go.Figure(data=[
        go.Bar(name="Precision", x=labels, y=[m.precision * 100 for m in found], marker_color="#3498db"),
        go.Bar(name="Recall", x=labels, y=[m.recall * 100 for m in found], marker_color="#9b59b6"),
        go.Bar(name="F1", x=labels, y=[m.f1_score * 100 for m in found], marker_color="#2ecc71"),
    ])

    fig.update_layout(
        title="Efficiency",
        barmode="group",
        yaxis_title="%",
        yaxis_range=[0, 105],
        height=280,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig


def create_exploration_chart(results: list[SearchResult]) -> go.Figure:
    """Bars of nodes explored next to path cost per strategy."""
    labels = [r.strategy for r in results]

    fig = go.Figure(data=[
        go.Bar(name="Nodes explored", x=labels, y=[r.nodes_explored for r in results], marker_color="#3498db"),
        go.Bar(name="Path cost", x=labels, y=[r.path_cost for r in results], marker_color="#e67e22"),
    ])

    fig.update_layout(
        title="Exploration vs Cost",
        barmode="group",
        height=280,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig
