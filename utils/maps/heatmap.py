# utils/maps/heatmap.py
"""
Mock geographic data for the crime map.

Points are scattered uniformly around the district center. There is no
real incident feed; pass a seed for repeatable output.

VERSION: 1.0.0
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

import numpy as np
import pandas as pd

from .constants import (
    DEFAULT_DISTRICT_ID,
    DISTRICT_CENTERS,
    HIGH_CRIME_DISTRICTS,
    HEATMAP_TYPES,
    HEATMAP_POINTS,
    HEATMAP_SPREAD,
    MAP_LAYERS,
    MARKER_COLORS,
    TIME_RANGES,
)

logger = logging.getLogger(__name__)

HEATMAP_COLUMNS = ['lat', 'lng', 'intensity', 'type', 'timestamp', 'district_id', 'severity']


def district_center(district_id: str, centers: Dict[str, Tuple[float, float]] = None) -> Tuple[float, float]:
    """Center of a district; unknown ids fall back to Alajuelita."""
    centers = centers or DISTRICT_CENTERS
    return centers.get(district_id, centers[DEFAULT_DISTRICT_ID])


def _severity(intensity: float) -> str:
    if intensity > 4:
        return 'high'
    if intensity > 2:
        return 'medium'
    return 'low'


# =============================================================================
# HEATMAP POINTS
# =============================================================================

def generate_heatmap_points(
    district_id: str,
    point_type: str = 'crime',
    n_points: int = HEATMAP_POINTS,
    seed: Optional[int] = None,
    now: Optional[datetime] = None
) -> pd.DataFrame:
    """
    Heatmap points around a district center.

    Intensity is U(1, 6); crime points in high-crime districts are scaled
    by 1.5 and patrol points use U(1, 4). Severity is judged before
    rounding. Timestamps fall within the last 24 hours.

    Raises:
        ValueError: Unknown point_type
    """
    if point_type not in HEATMAP_TYPES:
        raise ValueError(f"Unknown heatmap type: {point_type}")

    rng = np.random.default_rng(seed)
    now = now or datetime.now(timezone.utc)
    lat, lng = district_center(district_id)

    lats = lat + (rng.random(n_points) - 0.5) * HEATMAP_SPREAD
    lngs = lng + (rng.random(n_points) - 0.5) * HEATMAP_SPREAD

    if point_type == 'patrol':
        intensity = rng.random(n_points) * 3 + 1
    else:
        intensity = rng.random(n_points) * 5 + 1
        if point_type == 'crime' and district_id in HIGH_CRIME_DISTRICTS:
            intensity = intensity * 1.5

    ages = rng.random(n_points) * 86400
    timestamps = [now - timedelta(seconds=float(age)) for age in ages]

    return pd.DataFrame({
        'lat': lats,
        'lng': lngs,
        'intensity': np.round(intensity).astype(int),
        'type': point_type,
        'timestamp': pd.to_datetime(timestamps, utc=True),
        'district_id': district_id,
        'severity': [_severity(v) for v in intensity],
    }, columns=HEATMAP_COLUMNS)


def filter_time_range(points: pd.DataFrame, time_range: str, now: Optional[datetime] = None) -> pd.DataFrame:
    """Keep points newer than the selected window."""
    if time_range not in TIME_RANGES:
        raise ValueError(f"Unknown time range: {time_range}")
    now = now or datetime.now(timezone.utc)
    cutoff = pd.Timestamp(now - timedelta(hours=TIME_RANGES[time_range]['hours']))
    return points[points['timestamp'] >= cutoff].reset_index(drop=True)


# =============================================================================
# MARKER LAYERS
# =============================================================================

def _crime_color(severity: int) -> str:
    if severity > 3:
        return MARKER_COLORS['red']
    if severity > 2:
        return MARKER_COLORS['amber']
    return MARKER_COLORS['green']


def _risk_color(risk: float) -> str:
    if risk > 0.7:
        return MARKER_COLORS['red']
    if risk > 0.4:
        return MARKER_COLORS['amber']
    return MARKER_COLORS['green']


def generate_layer_markers(district_id: str, layer: str, seed: Optional[int] = None) -> pd.DataFrame:
    """
    Markers for one map layer with color, size and hover label resolved.

    Layers: crime (severity 1-5), patrol (active/idle), cctv
    (online/offline + coverage), prediction (risk + confidence).
    """
    layer_def = next((l for l in MAP_LAYERS if l['id'] == layer), None)
    if layer_def is None:
        raise ValueError(f"Unknown map layer: {layer}")

    rng = np.random.default_rng(seed)
    lat, lng = district_center(district_id)
    n = layer_def['count']

    df = pd.DataFrame({
        'id': range(n),
        'lat': lat + (rng.random(n) - 0.5) * layer_def['spread'],
        'lng': lng + (rng.random(n) - 0.5) * layer_def['spread'],
        'type': layer,
    })

    if layer == 'crime':
        df['severity'] = rng.integers(1, 6, size=n)
        df['color'] = df['severity'].map(_crime_color)
        df['size'] = 8 + df['severity'] * 2
        df['label'] = "Severity " + df['severity'].astype(str)
    elif layer == 'patrol':
        df['status'] = np.where(rng.random(n) > 0.5, 'active', 'idle')
        df['color'] = np.where(df['status'] == 'active', MARKER_COLORS['blue'], MARKER_COLORS['gray'])
        df['size'] = 10
        df['label'] = [f"Route {i + 1} ({s})" for i, s in zip(df['id'], df['status'])]
    elif layer == 'cctv':
        df['status'] = np.where(rng.random(n) > 0.2, 'online', 'offline')
        df['coverage'] = rng.integers(50, 150, size=n)
        df['color'] = np.where(df['status'] == 'online', MARKER_COLORS['green'], MARKER_COLORS['red'])
        df['size'] = 10
        df['label'] = [f"Camera {i + 1} ({s}, {c}m)" for i, s, c in zip(df['id'], df['status'], df['coverage'])]
    else:
        df['risk'] = rng.random(n)
        df['confidence'] = rng.random(n) * 0.4 + 0.6
        df['color'] = df['risk'].map(_risk_color)
        df['size'] = 8 + df['confidence'] * 8
        df['label'] = [f"Risk {r:.0%} · confidence {c:.0%}" for r, c in zip(df['risk'], df['confidence'])]

    return df
