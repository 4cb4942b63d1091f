"""
Figura Plotly del climograma (barras de precipitación + línea de temperatura).
"""
import plotly.graph_objects as go

from services.climogram import ChartSpec


def build_figure(chart: ChartSpec) -> go.Figure:
    x = list(chart.categories)
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=x,
        y=list(chart.precip),
        name="Precipitação mensal (mm)",
        yaxis="y",
        opacity=0.85,
    ))

    for line in chart.reference_lines:
        if line.axis != "precip":
            continue
        fig.add_trace(go.Scatter(
            x=x,
            y=[line.value] * len(x),
            mode="lines",
            name=line.name,
            yaxis="y",
            line=dict(dash="dot", width=2),
        ))

    fig.add_trace(go.Scatter(
        x=x,
        y=list(chart.temp),
        mode="lines+markers",
        name="Temp. média mensal (°C)",
        yaxis="y2",
        line=dict(width=3),
        marker=dict(size=6),
    ))

    for line in chart.reference_lines:
        if line.axis != "temp":
            continue
        fig.add_trace(go.Scatter(
            x=x,
            y=[line.value] * len(x),
            mode="lines",
            name=line.name,
            yaxis="y2",
            line=dict(dash="dot", width=2),
        ))

    fig.update_layout(
        margin=dict(l=62, r=62, t=18, b=48),
        hovermode="x unified",
        legend=dict(orientation="h", y=-0.25, x=0, font=dict(size=12)),
        xaxis=dict(title="Mês"),
        yaxis=dict(title="Precipitação (mm)", rangemode="tozero", gridcolor="rgba(15,23,42,0.08)"),
        yaxis2=dict(title="Temperatura (°C)", overlaying="y", side="right", showgrid=False),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def chart_config(chart: ChartSpec) -> dict:
    """Config de Plotly: exportar PNG desde la barra con el nombre del climograma."""
    return {
        "displaylogo": False,
        "responsive": True,
        "toImageButtonOptions": {"format": "png", "filename": chart.filename},
    }
