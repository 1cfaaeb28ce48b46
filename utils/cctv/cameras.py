# utils/cctv/cameras.py
"""
Simulated CCTV camera registry.

Cameras carry status and location only; there is no video stream.

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)

ALL = 'all'

CAMERA_STATUSES = ('online', 'offline', 'maintenance')

STATUS_COLORS = {
    'online': 'green',
    'offline': 'red',
    'maintenance': 'orange',
}

STATUS_ICONS = {
    'online': '🟢',
    'offline': '🔴',
    'maintenance': '🟡',
}

# layout id -> (columns, rows)
GRID_LAYOUTS = {
    '2x2': (2, 2),
    '3x2': (3, 2),
    '2x3': (2, 3),
}


@dataclass(frozen=True)
class Camera:
    id: str
    name: str
    district: str
    status: str
    location: str
    last_activity: str

    @property
    def is_online(self) -> bool:
        return self.status == 'online'

    @property
    def status_icon(self) -> str:
        return STATUS_ICONS.get(self.status, '⚪')

    @property
    def status_color(self) -> str:
        return STATUS_COLORS.get(self.status, 'gray')


CAMERAS = (
    Camera('cam-001', 'Camera 1: Central Alajuelita', 'Alajuelita', 'online',
           'Main Street & Central Avenue', '2 minutes ago'),
    Camera('cam-002', 'Camera 2: San Josecito', 'San Josecito', 'online',
           'Commercial District', '5 minutes ago'),
    Camera('cam-003', 'Camera 3: Concepción', 'Concepción', 'online',
           'Residential Area', '1 minute ago'),
    Camera('cam-004', 'Camera 4: San Felipe', 'San Felipe', 'maintenance',
           'School Zone', '1 hour ago'),
    Camera('cam-005', 'Camera 5: Tejarcillos', 'Tejarcillos', 'offline',
           'Park Area', '3 hours ago'),
    Camera('cam-006', 'Camera 6: San Antonio', 'San Antonio', 'online',
           'Industrial Zone', '30 seconds ago'),
)


def filter_cameras(cameras: Sequence[Camera], district: str = ALL, status: str = ALL) -> List[Camera]:
    """Cameras matching a district name and status; ALL matches everything."""
    if status != ALL and status not in CAMERA_STATUSES:
        raise ValueError(f"Unknown camera status: {status}")
    return [
        c for c in cameras
        if (district == ALL or c.district == district) and (status == ALL or c.status == status)
    ]


def camera_status_counts(cameras: Sequence[Camera]) -> Dict[str, int]:
    """Count per status, every status present."""
    counts = {s: 0 for s in CAMERA_STATUSES}
    for c in cameras:
        counts[c.status] = counts.get(c.status, 0) + 1
    return counts


def grid_rows(cameras: Sequence[Camera], layout: str = '2x2') -> List[List[Camera]]:
    """
    Arrange cameras into rows for a grid layout.

    Only the first columns*rows cameras are placed; the last row may be
    short when there are fewer cameras than cells.
    """
    if layout not in GRID_LAYOUTS:
        raise ValueError(f"Unknown grid layout: {layout}")

    columns, rows = GRID_LAYOUTS[layout]
    visible = list(cameras)[:columns * rows]
    return [visible[i:i + columns] for i in range(0, len(visible), columns)]
