# utils/ai_advisory/realtime.py
"""
Mock real-time feed.

A snapshot of alerts, incidents and predictions for one district. There is
no live channel: `build_snapshot` returns static records stamped with the
current time, and `add_alert` returns a new snapshot with the alert appended.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class RealTimeSnapshot:
    district_id: str
    alerts: Tuple[Dict, ...] = field(default_factory=tuple)
    incidents: Tuple[Dict, ...] = field(default_factory=tuple)
    predictions: Tuple[Dict, ...] = field(default_factory=tuple)
    last_updated: str = ""
    connected: bool = True


def build_snapshot(district_id: str, now: Optional[str] = None) -> RealTimeSnapshot:
    """Static feed contents for a district."""
    now = now or _now_iso()
    return RealTimeSnapshot(
        district_id=district_id,
        alerts=(
            {'id': '1', 'type': 'crime', 'message': 'High crime activity detected', 'timestamp': now},
            {'id': '2', 'type': 'patrol', 'message': 'Patrol unit deployed', 'timestamp': now},
        ),
        incidents=(
            {'id': '1', 'type': 'drug', 'location': 'Main Street', 'severity': 'high', 'timestamp': now},
            {'id': '2', 'type': 'gang', 'location': 'Park Area', 'severity': 'medium', 'timestamp': now},
        ),
        predictions=(
            {'id': '1', 'type': 'hotspot', 'confidence': 0.85, 'location': 'Commercial District', 'timestamp': now},
        ),
        last_updated=now,
    )


def add_alert(snapshot: RealTimeSnapshot, alert: Dict, now: Optional[datetime] = None) -> RealTimeSnapshot:
    """Return a new snapshot with `alert` appended, stamped and given an id."""
    now = now or datetime.now(timezone.utc)
    stamped = {
        **alert,
        'timestamp': now.isoformat(),
        'id': str(int(now.timestamp() * 1000)),
    }
    logger.info(f"🔔 Alert added for {snapshot.district_id}: {alert.get('message', alert.get('type'))}")
    return replace(
        snapshot,
        alerts=snapshot.alerts + (stamped,),
        last_updated=stamped['timestamp'],
    )
