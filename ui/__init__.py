"""
Streamlit UI module.

Provides the web interface for comparing search strategies:
- app: Side-by-side run of one uninformed and one informed strategy
- components.charts: Plotly graph drawing and metric charts
"""
