"""
Plotly Visualizer - Interactive charts for the insights screens.

Each chart takes the analyzer output directly. Empty or insufficient
series render an empty figure carrying an explanatory annotation.
"""

from typing import Optional, List

import plotly.graph_objects as go

from dietary_insights.analyzers.distribution import DistributionAnalyzer
from dietary_insights.config import AnalysisConfig
from dietary_insights.metrics.series import TrendPoint, FlagDistributionRow, SlotRow, BalancePoint
from dietary_insights.utils.colors import get_category_color, get_flag_color


class PlotlyVisualizer:
    """Interactive Plotly visualizations with consistent styling."""

    def __init__(self, config: Optional[AnalysisConfig] = None, dark: bool = False):
        """Initialize visualizer.

        Args:
            config: Optional configuration.
            dark: Use dark-theme shades.
        """
        self.config = config or AnalysisConfig()
        self.dark = dark
        self.font_family = "Inter, sans-serif"

    def _get_base_layout(self, height: int = 400, **kwargs) -> dict:
        """Get base layout for consistent styling."""
        return {
            'height': height,
            'margin': dict(l=50, r=30, t=50, b=30),
            'paper_bgcolor': 'rgba(0,0,0,0)',
            'plot_bgcolor': 'rgba(0,0,0,0)',
            'font': dict(family=self.font_family, size=12),
            'hoverlabel': dict(font_size=12, bordercolor='rgba(128,128,128,0.3)'),
            **kwargs
        }

    def _empty_state(self, title: str, message: str, height: int) -> go.Figure:
        fig = go.Figure()
        fig.add_annotation(
            text=message,
            xref='paper', yref='paper',
            x=0.5, y=0.5,
            showarrow=False,
            font=dict(size=14, color='#78716c'),
        )
        fig.update_layout(
            **self._get_base_layout(height=height),
            title=dict(text=title, font=dict(size=14)),
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
        )
        return fig

    # =========================================================================
    # TREND
    # =========================================================================

    def create_trend_chart(self, points: List[TrendPoint], height: int = 300) -> go.Figure:
        """Stacked area chart of daily category counts."""
        title = 'Weekly Flag Trend'
        if not points:
            return self._empty_state(
                title,
                f'Log meals on at least {self.config.trend.min_distinct_days} days to see trends',
                height,
            )

        labels = [p.label for p in points]
        fig = go.Figure()
        for key, name in (('processed', 'Processed Foods'), ('timing', 'Timing Issues'), ('plastic', 'Plastic Exposure')):
            fig.add_trace(go.Scatter(
                x=labels,
                y=[getattr(p, key) for p in points],
                name=name,
                mode='lines',
                stackgroup='flags',
                line=dict(color=get_category_color(key, self.dark), width=2, shape='spline'),
                hovertemplate='%{x}<br><b>%{y}</b> meals<extra></extra>',
            ))

        fig.update_layout(
            **self._get_base_layout(height=height),
            title=dict(text=title, font=dict(size=14)),
            legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='right', x=1),
        )
        fig.update_yaxes(showgrid=True, gridcolor='rgba(128,128,128,0.15)', rangemode='tozero', dtick=1)
        return fig

    # =========================================================================
    # DISTRIBUTION
    # =========================================================================

    def create_flag_donut(
        self,
        rows: List[FlagDistributionRow],
        max_slices: int = 6,
        height: int = 300
    ) -> go.Figure:
        """Donut chart of flag occurrences.

        Rows past ``max_slices`` are folded into a single "Other" slice.
        """
        title = 'Flag Breakdown'
        if not rows:
            return self._empty_state(title, 'No flags recorded yet', height)

        rows = DistributionAnalyzer.with_other(rows, limit=max_slices)

        total = sum(row.count for row in rows)
        fig = go.Figure(data=[go.Pie(
            labels=[row.label for row in rows],
            values=[row.count for row in rows],
            hole=0.55,
            marker_colors=[get_flag_color(row.flag, self.dark) for row in rows],
            textinfo='percent',
            textposition='inside',
            hovertemplate='%{label}<br><b>%{value}</b> occurrences<extra></extra>',
        )])
        fig.add_annotation(
            text=f'{total}<br>total flags',
            xref='paper', yref='paper',
            x=0.5, y=0.5,
            showarrow=False,
            font=dict(size=14),
        )
        fig.update_layout(
            **self._get_base_layout(height=height),
            title=dict(text=title, font=dict(size=14)),
            showlegend=True,
            legend=dict(orientation='h', y=-0.1),
        )
        return fig

    # =========================================================================
    # TIMING
    # =========================================================================

    def create_timing_comparison(self, rows: List[SlotRow], height: int = 350) -> go.Figure:
        """Grouped bars of weekday vs weekend meals per slot.

        The danger-zone slot is drawn in the danger color.
        """
        title = 'Meal Timing'
        if not any(row.total for row in rows):
            return self._empty_state(title, 'No meals logged yet', height)

        labels = [row.label for row in rows]
        danger = get_category_color('danger', self.dark)

        fig = go.Figure()
        for key, name in (('weekday', 'Weekdays'), ('weekend', 'Weekends')):
            base = get_category_color(key, self.dark)
            fig.add_trace(go.Bar(
                x=labels,
                y=[getattr(row, key) for row in rows],
                name=name,
                marker_color=[danger if row.is_danger_zone else base for row in rows],
                hovertemplate='%{x}<br><b>%{y}</b> meals<extra></extra>',
            ))

        fig.update_layout(
            **self._get_base_layout(height=height),
            title=dict(text=title, font=dict(size=14)),
            barmode='group',
            legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='right', x=1),
        )
        fig.update_yaxes(showgrid=True, gridcolor='rgba(128,128,128,0.15)', dtick=1)
        return fig

    # =========================================================================
    # NUTRITION
    # =========================================================================

    def create_nutrition_radar(self, points: Optional[List[BalancePoint]], height: int = 350) -> go.Figure:
        """Radar of macro scores against the target ring."""
        title = 'Nutrition Balance'
        if points is None:
            return self._empty_state(
                title,
                f'Need nutrition data for at least {self.config.nutrition.min_meals} meals',
                height,
            )

        metrics = [p.metric for p in points]
        # Close the polygon
        theta = metrics + metrics[:1]

        fig = go.Figure()
        fig.add_trace(go.Scatterpolar(
            r=[p.target for p in points] + [points[0].target],
            theta=theta,
            name='Target',
            mode='lines',
            line=dict(color='rgba(128,128,128,0.6)', dash='dash'),
            hoverinfo='skip',
        ))
        fig.add_trace(go.Scatterpolar(
            r=[p.value for p in points] + [points[0].value],
            theta=theta,
            name='Your Average',
            fill='toself',
            line=dict(color=get_category_color('nutrition', self.dark), width=2),
            hovertemplate='%{theta}<br><b>%{r:.0f}</b><extra></extra>',
        ))
        fig.update_layout(
            **self._get_base_layout(height=height),
            title=dict(text=title, font=dict(size=14)),
            polar=dict(radialaxis=dict(range=[0, points[0].full_mark], showticklabels=False)),
            showlegend=True,
        )
        return fig
