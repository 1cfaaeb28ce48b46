# utils/kpi_analytics/models.py
"""
Record types for the KPI catalog.

Field names follow Python conventions; `to_dict`/`from_dict` use the
camelCase names of the export and storage formats.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Union

Number = Union[int, float]


@dataclass(frozen=True)
class KPI:
    """Key Performance Indicator with narrative and numeric fields."""
    id: str
    name: str
    problem: str
    solution: str
    application: str
    stakeholder_benefits: str
    current_value: Number
    target_value: Number
    trend: str
    district_id: str
    category: str
    priority: str
    last_updated: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KPI":
        return cls(
            id=data['id'],
            name=data['name'],
            problem=data.get('problem', ''),
            solution=data.get('solution', ''),
            application=data.get('application', ''),
            stakeholder_benefits=data.get('stakeholderBenefits', ''),
            current_value=data['currentValue'],
            target_value=data['targetValue'],
            trend=data['trend'],
            district_id=data['districtId'],
            category=data['category'],
            priority=data.get('priority', 'medium'),
            last_updated=data.get('lastUpdated', ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'problem': self.problem,
            'solution': self.solution,
            'application': self.application,
            'stakeholderBenefits': self.stakeholder_benefits,
            'currentValue': self.current_value,
            'targetValue': self.target_value,
            'trend': self.trend,
            'districtId': self.district_id,
            'category': self.category,
            'priority': self.priority,
            'lastUpdated': self.last_updated,
        }


@dataclass(frozen=True)
class District:
    """Administrative district with crime-level classification."""
    id: str
    name: str
    population: int
    area: float
    crime_level: str
    lat: float
    lng: float
    stats: Dict[str, int] = field(default_factory=dict, hash=False)

    @property
    def density(self) -> float:
        """Residents per km²."""
        return self.population / self.area if self.area else 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "District":
        coords = data.get('coordinates', {})
        return cls(
            id=data['id'],
            name=data['name'],
            population=data['population'],
            area=data['area'],
            crime_level=data['crimeLevel'],
            lat=coords.get('lat', 0.0),
            lng=coords.get('lng', 0.0),
            stats=dict(data.get('stats', {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'population': self.population,
            'area': self.area,
            'crimeLevel': self.crime_level,
            'coordinates': {'lat': self.lat, 'lng': self.lng},
            'stats': dict(self.stats),
        }
