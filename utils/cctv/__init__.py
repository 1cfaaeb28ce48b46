# utils/cctv/__init__.py
"""
CCTV Module

Simulated camera registry and the status grid for the monitoring page.
"""

from .cameras import (
    Camera,
    CAMERAS,
    CAMERA_STATUSES,
    GRID_LAYOUTS,
    filter_cameras,
    camera_status_counts,
    grid_rows,
)
from .fragments import render_status_summary, camera_grid_fragment

__all__ = [
    'Camera',
    'CAMERAS',
    'CAMERA_STATUSES',
    'GRID_LAYOUTS',
    'filter_cameras',
    'camera_status_counts',
    'grid_rows',
    'render_status_summary',
    'camera_grid_fragment',
]
