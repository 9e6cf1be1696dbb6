"""Visualization modules for dietary insights."""

from dietary_insights.visualizers.plotly_viz import PlotlyVisualizer

__all__ = ["PlotlyVisualizer"]
