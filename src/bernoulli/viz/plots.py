from __future__ import annotations
from typing import Mapping, Sequence
import numpy as np
import plotly.graph_objects as go
from bernoulli.constants import THERMO
from bernoulli.core.bernoulli import bernoulli_terms
from bernoulli.helpers import InvalidArgument, as_array, require_positive, Pa2kPa

TYPE_COLORS = {'Component': 'steelblue', 'Total': 'darkred'}
TERM_ORDER = ['Pressure', 'Velocity', 'Elevation', 'Total']


def _title(title: str, subtitle: str) -> dict:
    return dict(text=f'<b>{title}</b><br><sup>{subtitle}</sup>', x=0.5, xanchor='center')


def _layout(fig: go.Figure, title: str, subtitle: str, legend_title: str, **kwargs) -> go.Figure:
    fig.update_layout(
        title=_title(title, subtitle),
        xaxis_title='Term',
        yaxis_title='Specific energy (kPa)',
        template='plotly_white',
        font=dict(size=12),
        legend=dict(title=dict(text=legend_title), orientation='h', yanchor='bottom', y=1.02, xanchor='center', x=0.5),
        **kwargs,
    )
    fig.update_xaxes(categoryorder='array', categoryarray=TERM_ORDER)
    return fig


def plot_bernoulli_terms(P: float, v: float, h: float, rho: float, g: float = THERMO.g) -> go.Figure:
    """
    Bar chart of the contribution of each term of the Bernoulli equation (pressure, kinetic, potential) 
    and of the total energy, in kPa

    Parameters
    ----------
    P : float
        Static pressure [Pa]
    v : float
        Flow velocity [m/s]
    h : float
        Elevation [m]
    rho : float
        Fluid density [kg/m3]. Must be positive
    g : float, optional
        Gravitational acceleration [m/s2]. Defaults to 9.81

    Returns
    -------
    plotly.graph_objects.Figure
    """
    for name, value in (('P', P), ('v', v), ('h', h), ('rho', rho)):
        if value is None:
            raise InvalidArgument(f'All the parameters P, v, h and rho must be specified, {name} is missing')
    require_positive(rho, 'rho')
    require_positive(g, 'g')
    data = bernoulli_terms(P, v, h, rho, g).to_dataframe()

    fig = go.Figure()
    for term_type, group in data.groupby('type', sort=False):
        fig.add_trace(go.Bar(
            x=group['term'],
            y=group['value_kPa'],
            name=term_type,
            width=0.7,
            marker=dict(color=TYPE_COLORS[term_type], line=dict(color='black', width=0.5)),
            text=[f'{value:.1f}' for value in group['value_kPa']],
            textposition='outside',
            textfont=dict(size=12),
        ))
    subtitle = f'P = {P:.0f} Pa, v = {v:.1f} m/s, h = {h:.1f} m, ρ = {rho:.1f} kg/m³'
    return _layout(fig, 'Contribution of Bernoulli Terms', subtitle, legend_title='Type')


def plot_bernoulli_comparison(point1: Mapping[str, float], point2: Mapping[str, float], rho: float, 
                              g: float = THERMO.g, labels: Sequence[str] = ('Point 1', 'Point 2')) -> go.Figure:
    """
    Grouped bar chart of the Bernoulli terms [kPa] at two points of the same streamline. 
    Each point is a mapping with keys 'P', 'v' and 'h'
    """
    require_positive(rho, 'rho')
    require_positive(g, 'g')
    if len(labels) != 2:
        raise InvalidArgument(f'Exactly two labels must be provided, {len(labels)} were given')
    fig = go.Figure()
    for point, label in zip((point1, point2), labels):
        missing = {'P', 'v', 'h'} - set(point)
        if missing:
            raise InvalidArgument(f'The point {label} is missing the keys {", ".join(sorted(missing))}')
        data = bernoulli_terms(point['P'], point['v'], point['h'], rho, g).to_dataframe()
        fig.add_trace(go.Bar(
            x=data['term'],
            y=data['value_kPa'],
            name=label,
            marker=dict(line=dict(color='black', width=0.5)),
            text=[f'{value:.1f}' for value in data['value_kPa']],
            textposition='outside',
        ))
    subtitle = f'ρ = {rho:.1f} kg/m³, g = {g:.2f} m/s²'
    return _layout(fig, 'Bernoulli Terms Along the Streamline', subtitle, legend_title='Point', barmode='group')


def plot_pressure_velocity(total_pressure: float, v, rho: float) -> go.Figure:
    """Static pressure P = P_total - 0.5 rho v^2 as a function of the velocity, at constant elevation"""
    require_positive(rho, 'rho')
    v = np.atleast_1d(as_array(v, 'v'))
    P = total_pressure - 0.5 * rho * v**2
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=v, y=Pa2kPa(P), mode='lines', name='Static pressure'))
    fig.add_hline(y=Pa2kPa(total_pressure), line_dash='dash', line_color='darkred', annotation_text='Total pressure')
    fig.update_layout(
        title=_title('Pressure-Velocity Relation', f'P_total = {total_pressure:.0f} Pa, ρ = {rho:.1f} kg/m³'),
        xaxis_title='Velocity (m/s)',
        yaxis_title='Static pressure (kPa)',
        template='plotly_white',
    )
    return fig
