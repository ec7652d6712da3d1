"""
Graph Search Comparison

Run with: streamlit run ui/app.py
"""

import sys
from pathlib import Path

import streamlit as st

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pathfinder.config import DEFAULT_GOAL, DEFAULT_INFORMED, DEFAULT_START, DEFAULT_UNINFORMED  # noqa: E402
from pathfinder.graph import build_default_graph  # noqa: E402
from pathfinder.metrics import format_cost, format_percent, format_time  # noqa: E402
from pathfinder.search import INFORMED, UNINFORMED, SearchEngine, get_strategy  # noqa: E402
from ui.components.charts import (  # noqa: E402
    create_exploration_chart,
    create_graph_figure,
    create_metrics_chart,
)

st.set_page_config(page_title="Graph Search", page_icon="🧭", layout="wide")

st.title("Graph Search Comparison")
st.caption("Uninformed vs informed search on a weighted graph.")

graph = build_default_graph()
engine = SearchEngine(graph)
names = [v.name for v in graph.vertices()]

c1, c2, c3, c4 = st.columns(4)
start = c1.selectbox("Start", names, index=names.index(DEFAULT_START))
goal = c2.selectbox("Goal", names, index=names.index(DEFAULT_GOAL))
uninformed = c3.selectbox(
    "Uninformed", UNINFORMED, index=UNINFORMED.index(DEFAULT_UNINFORMED),
    format_func=lambda s: get_strategy(s).description,
)
informed = c4.selectbox(
    "Informed", INFORMED, index=INFORMED.index(DEFAULT_INFORMED),
    format_func=lambda s: get_strategy(s).description,
)

if st.button("Run comparison", type="primary", use_container_width=True):
    comparison = engine.compare(uninformed, informed, start, goal)

    st.divider()

    col1, col2 = st.columns(2)
    for col, result, metrics in (
        (col1, comparison.uninformed, comparison.uninformed_metrics),
        (col2, comparison.informed, comparison.informed_metrics),
    ):
        with col:
            st.subheader(get_strategy(result.strategy).description)
            st.plotly_chart(create_graph_figure(graph, result), use_container_width=True)

            m1, m2, m3 = st.columns(3)
            m1.metric("Path cost", format_cost(metrics.path_cost))
            m2.metric("Explored", metrics.nodes_explored)
            m3.metric("Time", format_time(metrics.time_taken_ms))

            m1, m2, m3 = st.columns(3)
            m1.metric("Precision", format_percent(metrics.precision))
            m2.metric("Recall", format_percent(metrics.recall))
            m3.metric("F1", format_percent(metrics.f1_score))

            if result.found:
                st.write("Path: " + " → ".join(result.path))
            else:
                st.warning(f"No path from {start} to {goal}")
            st.caption("Explored: " + " → ".join(result.explored_order))

    st.divider()

    if comparison.winner_name is None:
        st.info("🤝 It's a Tie!")
    else:
        st.success(f"🏆 Winner: {get_strategy(comparison.winner_name).description}")
    for reason in comparison.reasons:
        st.write(f"✓ {reason}")

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(
            create_metrics_chart([comparison.uninformed_metrics, comparison.informed_metrics]),
            use_container_width=True,
        )
    with col2:
        st.plotly_chart(
            create_exploration_chart([comparison.uninformed, comparison.informed]),
            use_container_width=True,
        )
else:
    st.plotly_chart(create_graph_figure(graph, title="Default graph"), use_container_width=True)
