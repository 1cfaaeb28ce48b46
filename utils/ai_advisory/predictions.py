# utils/ai_advisory/predictions.py
"""
Canned advisory predictions.

No model runs here: predictions are fixed records, and "generating" one
waits a configured delay and returns the top hotspot.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

RISK_LEVELS = ('low', 'medium', 'high', 'critical')

RISK_COLORS = {
    'low': 'green',
    'medium': 'orange',
    'high': 'orange',
    'critical': 'red',
}

TYPE_ICONS = {
    'hotspot': '📍',
    'route': '🛣️',
    'incident': '⚠️',
}


@dataclass(frozen=True)
class Prediction:
    id: str
    type: str
    location: str
    confidence: float
    timeframe: str
    risk_level: str
    description: str
    recommendations: Tuple[str, ...] = field(default_factory=tuple)
    lat: float = 0.0
    lng: float = 0.0

    @property
    def icon(self) -> str:
        return TYPE_ICONS.get(self.type, '🧠')

    @property
    def risk_color(self) -> str:
        return RISK_COLORS.get(self.risk_level, 'gray')

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'type': self.type,
            'location': self.location,
            'confidence': self.confidence,
            'timeframe': self.timeframe,
            'riskLevel': self.risk_level,
            'description': self.description,
            'recommendations': list(self.recommendations),
            'coordinates': {'lat': self.lat, 'lng': self.lng},
        }


CANNED_PREDICTIONS = (
    Prediction(
        id='1',
        type='hotspot',
        location='Main Street & 5th Avenue',
        confidence=0.87,
        timeframe='Next 4 hours',
        risk_level='high',
        description='High probability of drug-related activity based on historical patterns and current conditions.',
        recommendations=(
            'Deploy additional patrol unit',
            'Increase CCTV monitoring',
            'Alert community leaders',
            'Coordinate with narcotics division',
        ),
        lat=9.9152, lng=-84.1007,
    ),
    Prediction(
        id='2',
        type='route',
        location='Route 27 - Commercial District',
        confidence=0.73,
        timeframe='Next 2 hours',
        risk_level='medium',
        description='Potential gang movement detected along this corridor during evening hours.',
        recommendations=(
            'Monitor vehicle checkpoints',
            'Increase patrol frequency',
            'Coordinate with traffic division',
        ),
        lat=9.9089, lng=-84.0945,
    ),
    Prediction(
        id='3',
        type='incident',
        location='Park Central Area',
        confidence=0.92,
        timeframe='Next 6 hours',
        risk_level='critical',
        description='Critical risk of violent confrontation based on social media intelligence and gang activity patterns.',
        recommendations=(
            'Deploy tactical response team',
            'Establish perimeter monitoring',
            'Activate emergency protocols',
            'Notify hospital emergency services',
        ),
        lat=9.9234, lng=-84.1156,
    ),
)


def get_predictions(min_confidence: float = 0.0) -> List[Prediction]:
    """Canned predictions at or above `min_confidence`, highest confidence first."""
    predictions = [p for p in CANNED_PREDICTIONS if p.confidence >= min_confidence]
    return sorted(predictions, key=lambda p: p.confidence, reverse=True)


def generate_prediction(delay_seconds: float = 3.0, sleep: Callable[[float], None] = time.sleep) -> Prediction:
    """
    Simulated prediction run: waits `delay_seconds`, then returns the
    hotspot prediction. Always succeeds.
    """
    logger.info(f"🧠 Generating prediction (simulated {delay_seconds}s)")
    if delay_seconds > 0:
        sleep(delay_seconds)
    prediction = CANNED_PREDICTIONS[0]
    return Prediction(
        id=prediction.id,
        type=prediction.type,
        location=prediction.location,
        confidence=prediction.confidence,
        timeframe=prediction.timeframe,
        risk_level=prediction.risk_level,
        description=prediction.description,
        recommendations=prediction.recommendations[:3],
        lat=prediction.lat,
        lng=prediction.lng,
    )
