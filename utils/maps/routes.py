# utils/maps/routes.py
"""
Tracked suspect-vehicle routes with predicted next locations.

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

ALL = 'all'


@dataclass(frozen=True)
class RoutePoint:
    lat: float
    lng: float
    timestamp: str


@dataclass(frozen=True)
class PredictedLocation:
    lat: float
    lng: float
    probability: float
    time_window: str


@dataclass(frozen=True)
class VehicleRoute:
    id: str
    plate: str
    model: str
    color: str
    risk_score: float
    district_id: str
    route: Tuple[RoutePoint, ...]
    predicted: Tuple[PredictedLocation, ...]

    @property
    def label(self) -> str:
        return f"{self.plate} · {self.color} {self.model}"

    @property
    def last_seen(self) -> RoutePoint:
        return self.route[-1]


def _route(*points) -> Tuple[RoutePoint, ...]:
    return tuple(RoutePoint(lat, lng, f"2024-01-15T{hhmm}:00Z") for lat, lng, hhmm in points)


def _predicted(*points) -> Tuple[PredictedLocation, ...]:
    return tuple(PredictedLocation(*p) for p in points)


VEHICLE_ROUTES = (
    VehicleRoute(
        id='1', plate='XYZ123', model='Toyota Corolla', color='White',
        risk_score=0.85, district_id='barrio-mexico',
        route=_route(
            (9.9234, -84.0923, '08:00'),
            (9.9245, -84.0935, '08:15'),
            (9.9256, -84.0947, '08:30'),
            (9.9267, -84.0959, '08:45'),
            (9.9278, -84.0971, '09:00'),
        ),
        predicted=_predicted(
            (9.9289, -84.0983, 0.78, '09:15-09:30'),
            (9.9300, -84.0995, 0.65, '09:30-09:45'),
            (9.9311, -84.1007, 0.52, '09:45-10:00'),
        ),
    ),
    VehicleRoute(
        id='2', plate='ABC789', model='Honda Civic', color='Black',
        risk_score=0.72, district_id='concepcion',
        route=_route(
            (9.9067, -84.1089, '14:00'),
            (9.9078, -84.1101, '14:20'),
            (9.9089, -84.1113, '14:40'),
            (9.9100, -84.1125, '15:00'),
        ),
        predicted=_predicted(
            (9.9111, -84.1137, 0.82, '15:20-15:40'),
            (9.9122, -84.1149, 0.69, '15:40-16:00'),
        ),
    ),
    VehicleRoute(
        id='3', plate='DEF456', model='Nissan Sentra', color='Blue',
        risk_score=0.91, district_id='san-felipe',
        route=_route(
            (9.9198, -84.0923, '19:00'),
            (9.9209, -84.0935, '19:10'),
            (9.9220, -84.0947, '19:20'),
            (9.9231, -84.0959, '19:30'),
            (9.9242, -84.0971, '19:40'),
        ),
        predicted=_predicted(
            (9.9253, -84.0983, 0.88, '19:50-20:00'),
            (9.9264, -84.0995, 0.75, '20:00-20:10'),
            (9.9275, -84.1007, 0.63, '20:10-20:20'),
        ),
    ),
)


def get_vehicle_routes(district_id: str = ALL, min_risk: float = 0.0) -> List[VehicleRoute]:
    """Routes for a district (or all), riskiest first."""
    routes = [
        r for r in VEHICLE_ROUTES
        if (district_id == ALL or r.district_id == district_id) and r.risk_score >= min_risk
    ]
    return sorted(routes, key=lambda r: r.risk_score, reverse=True)


def routes_to_frame(routes: List[VehicleRoute]) -> pd.DataFrame:
    """
    One row per point: observed route points (kind='observed', ordered by
    time) followed by predicted points (kind='predicted').
    """
    rows = []
    for r in routes:
        for i, p in enumerate(r.route):
            rows.append({
                'vehicle_id': r.id, 'plate': r.plate, 'risk_score': r.risk_score,
                'kind': 'observed', 'seq': i, 'lat': p.lat, 'lng': p.lng,
                'timestamp': pd.Timestamp(p.timestamp), 'probability': None, 'time_window': None,
            })
        for i, p in enumerate(r.predicted, start=len(r.route)):
            rows.append({
                'vehicle_id': r.id, 'plate': r.plate, 'risk_score': r.risk_score,
                'kind': 'predicted', 'seq': i, 'lat': p.lat, 'lng': p.lng,
                'timestamp': pd.NaT, 'probability': p.probability, 'time_window': p.time_window,
            })
    return pd.DataFrame(rows, columns=[
        'vehicle_id', 'plate', 'risk_score', 'kind', 'seq', 'lat', 'lng',
        'timestamp', 'probability', 'time_window',
    ])
