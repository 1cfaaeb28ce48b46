# utils/kpi_analytics/catalog.py
"""
Static District and KPI catalog for Alajuelita.

The catalog is loaded once per process; records are immutable.

VERSION: 1.0.0
"""

import logging
from typing import Dict, Iterable, List, Optional

import streamlit as st

from ..config import config
from .constants import (
    KPI_CATEGORIES, KPI_TRENDS, KPI_PRIORITIES, CRIME_LEVELS, CACHE_TTL_SECONDS
)
from .models import KPI, District

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog records fail validation."""


# =============================================================================
# DISTRICTS
# =============================================================================

DISTRICT_DATA = [
    {
        "id": "alajuelita", "name": "Alajuelita",
        "population": 20000, "area": 8.5, "crimeLevel": "high",
        "coordinates": {"lat": 9.9152, "lng": -84.1007},
        "stats": {"drugIncidents": 45, "responseTime": 8, "gangActivity": 12, "communityTips": 23},
    },
    {
        "id": "barrio-mexico", "name": "Barrio México",
        "population": 18500, "area": 7.2, "crimeLevel": "critical",
        "coordinates": {"lat": 9.9234, "lng": -84.0923},
        "stats": {"drugIncidents": 45, "responseTime": 8, "gangActivity": 18, "communityTips": 31},
    },
    {
        "id": "concepcion", "name": "Concepción",
        "population": 12000, "area": 7.8, "crimeLevel": "high",
        "coordinates": {"lat": 9.9067, "lng": -84.1089},
        "stats": {"drugIncidents": 38, "responseTime": 9, "gangActivity": 15, "communityTips": 20},
    },
    {
        "id": "san-felipe", "name": "San Felipe",
        "population": 18000, "area": 9.1, "crimeLevel": "critical",
        "coordinates": {"lat": 9.9198, "lng": -84.0923},
        "stats": {"drugIncidents": 52, "responseTime": 7, "gangActivity": 18, "communityTips": 31},
    },
    {
        "id": "tejarcillos", "name": "Tejarcillos",
        "population": 14500, "area": 10.2, "crimeLevel": "moderate",
        "coordinates": {"lat": 9.9156, "lng": -84.1234},
        "stats": {"drugIncidents": 25, "responseTime": 10, "gangActivity": 9, "communityTips": 18},
    },
    {
        "id": "san-josecito", "name": "San Josecito",
        "population": 15000, "area": 6.2, "crimeLevel": "moderate",
        "coordinates": {"lat": 9.9089, "lng": -84.0945},
        "stats": {"drugIncidents": 28, "responseTime": 6, "gangActivity": 7, "communityTips": 18},
    },
    {
        "id": "san-antonio", "name": "San Antonio",
        "population": 10000, "area": 12.3, "crimeLevel": "moderate",
        "coordinates": {"lat": 9.9234, "lng": -84.1156},
        "stats": {"drugIncidents": 19, "responseTime": 12, "gangActivity": 8, "communityTips": 11},
    },
]

# =============================================================================
# KPIs
# =============================================================================

KPI_DATA = [
    {
        "id": "kpi-001", "name": "Reduce Drug-Related Incidents",
        "problem": "Street-level drug sales concentrated around bus stops and parks.",
        "solution": "Targeted patrols combined with CCTV coverage of known sale points.",
        "application": "Priority coverage of the central park and the Route 27 corridor.",
        "stakeholderBenefits": "Residents regain use of public spaces; police focus scarce units.",
        "currentValue": 45, "targetValue": 30, "trend": "down",
        "districtId": "alajuelita", "category": "safety", "priority": "critical",
        "lastUpdated": "2024-01-15T08:00:00Z",
    },
    {
        "id": "kpi-002", "name": "Improve Emergency Response Time",
        "problem": "Average response to priority calls exceeds 8 minutes.",
        "solution": "Dynamic unit positioning based on hourly incident patterns.",
        "application": "Pre-position units near San Felipe and Barrio México at night.",
        "stakeholderBenefits": "Faster help for victims; measurable accountability for dispatch.",
        "currentValue": 8, "targetValue": 5, "trend": "down",
        "districtId": "alajuelita", "category": "response", "priority": "high",
        "lastUpdated": "2024-01-15T08:00:00Z",
    },
    {
        "id": "kpi-003", "name": "Enhance Community Engagement",
        "problem": "Low trust limits the number of community tips received.",
        "solution": "Anonymous tip channel and monthly neighborhood safety meetings.",
        "application": "Meetings rotate through the community halls of each district.",
        "stakeholderBenefits": "Police receive earlier warnings; residents see follow-up on reports.",
        "currentValue": 23, "targetValue": 40, "trend": "up",
        "districtId": "alajuelita", "category": "community", "priority": "medium",
        "lastUpdated": "2024-01-14T17:30:00Z",
    },
    {
        "id": "kpi-004", "name": "Youth Program Participation",
        "problem": "Teenagers out of school are recruited by local gangs.",
        "solution": "After-school sports and vocational workshops.",
        "application": "Partner with schools in Concepción and Tejarcillos.",
        "stakeholderBenefits": "Fewer recruits for gangs; families gain safe options for youth.",
        "currentValue": 120, "targetValue": 200, "trend": "up",
        "districtId": "concepcion", "category": "youth", "priority": "high",
        "lastUpdated": "2024-01-12T10:00:00Z",
    },
    {
        "id": "kpi-005", "name": "Gang Activity Reduction",
        "problem": "Territorial disputes between two groups escalate on weekends.",
        "solution": "Focused deterrence with social-service offers to known members.",
        "application": "Weekend task force covering the San Felipe border streets.",
        "stakeholderBenefits": "Lower risk of violent confrontations near schools.",
        "currentValue": 18, "targetValue": 10, "trend": "up",
        "districtId": "san-felipe", "category": "safety", "priority": "critical",
        "lastUpdated": "2024-01-15T06:45:00Z",
    },
    {
        "id": "kpi-006", "name": "CCTV Network Uptime",
        "problem": "Camera outages leave hotspots unmonitored.",
        "solution": "Preventive maintenance schedule and remote health checks.",
        "application": "All cameras on San Felipe main avenue report status hourly.",
        "stakeholderBenefits": "Reliable evidence for investigations; visible deterrent.",
        "currentValue": 87.5, "targetValue": 98, "trend": "up",
        "districtId": "san-felipe", "category": "surveillance", "priority": "high",
        "lastUpdated": "2024-01-15T07:00:00Z",
    },
    {
        "id": "kpi-007", "name": "Crime Prevention Workshops",
        "problem": "Residents lack basic home and street safety practices.",
        "solution": "Monthly workshops run with neighborhood associations.",
        "application": "Workshops in San Felipe schools and churches.",
        "stakeholderBenefits": "Fewer opportunistic thefts; stronger neighborhood networks.",
        "currentValue": 6, "targetValue": 12, "trend": "stable",
        "districtId": "san-felipe", "category": "prevention", "priority": "medium",
        "lastUpdated": "2024-01-10T12:00:00Z",
    },
    {
        "id": "kpi-008", "name": "Suspicious Transaction Reports",
        "problem": "Money laundering through small businesses goes unreported.",
        "solution": "Training for merchants and a direct reporting line.",
        "application": "Pilot with commercial premises in Barrio México.",
        "stakeholderBenefits": "Disrupts drug financing; protects legitimate businesses.",
        "currentValue": 14, "targetValue": 25, "trend": "up",
        "districtId": "barrio-mexico", "category": "financial", "priority": "medium",
        "lastUpdated": "2024-01-11T09:15:00Z",
    },
    {
        "id": "kpi-009", "name": "Violent Incident Rate",
        "problem": "Night-time assaults concentrated near bars.",
        "solution": "Lighting upgrades and closing-time patrols.",
        "application": "Barrio México nightlife blocks, Friday and Saturday.",
        "stakeholderBenefits": "Safer nightlife; lower hospital emergency load.",
        "currentValue": 22, "targetValue": 12, "trend": "stable",
        "districtId": "barrio-mexico", "category": "safety", "priority": "high",
        "lastUpdated": "2024-01-13T22:00:00Z",
    },
    {
        "id": "kpi-010", "name": "Patrol Coverage Hours",
        "problem": "Outlying streets receive fewer than two patrols per day.",
        "solution": "Route optimization balancing hotspots and coverage gaps.",
        "application": "Extended rounds through rural Tejarcillos roads.",
        "stakeholderBenefits": "Equal protection for remote households.",
        "currentValue": 140, "targetValue": 180, "trend": "up",
        "districtId": "tejarcillos", "category": "response", "priority": "medium",
        "lastUpdated": "2024-01-14T05:00:00Z",
    },
    {
        "id": "kpi-011", "name": "Neighborhood Watch Groups",
        "problem": "Few organized groups report suspicious activity.",
        "solution": "Seed funding and radio equipment for watch groups.",
        "application": "Two new groups per quarter in San Josecito.",
        "stakeholderBenefits": "Community ownership of safety; faster reporting.",
        "currentValue": 9, "targetValue": 15, "trend": "down",
        "districtId": "san-josecito", "category": "community", "priority": "low",
        "lastUpdated": "2024-01-09T16:00:00Z",
    },
    {
        "id": "kpi-012", "name": "School Zone Safety Checks",
        "problem": "Drug sales reported near school entrances.",
        "solution": "Officer presence at school opening and closing hours.",
        "application": "Daily checks at San Antonio primary and secondary schools.",
        "stakeholderBenefits": "Students protected; parents informed through school boards.",
        "currentValue": 30, "targetValue": 40, "trend": "up",
        "districtId": "san-antonio", "category": "prevention", "priority": "high",
        "lastUpdated": "2024-01-15T13:00:00Z",
    },
]


# =============================================================================
# VALIDATION
# =============================================================================

def _validate_kpi(kpi: KPI):
    if kpi.category not in KPI_CATEGORIES:
        raise CatalogError(f"KPI {kpi.id}: unknown category '{kpi.category}'")
    if kpi.trend not in KPI_TRENDS:
        raise CatalogError(f"KPI {kpi.id}: unknown trend '{kpi.trend}'")
    if kpi.priority not in KPI_PRIORITIES:
        raise CatalogError(f"KPI {kpi.id}: unknown priority '{kpi.priority}'")
    if kpi.current_value < 0 or kpi.target_value < 0:
        raise CatalogError(f"KPI {kpi.id}: values must be non-negative")


def find_orphan_kpis(kpis: Iterable[KPI], districts: Iterable[District]) -> List[KPI]:
    """KPIs whose district_id matches no district."""
    district_ids = {d.id for d in districts}
    return [k for k in kpis if k.district_id not in district_ids]


def build_catalog(
    kpi_records: List[Dict],
    district_records: List[Dict],
    strict: bool = False
) -> "Catalog":
    """
    Build and validate a catalog from raw records.

    Args:
        kpi_records: KPI dicts in camelCase
        district_records: District dicts in camelCase
        strict: Reject KPIs referencing unknown districts instead of warning

    Raises:
        CatalogError: Invalid classification values, duplicate ids, or
                      (strict only) unknown district references
    """
    districts = [District.from_dict(d) for d in district_records]
    if not all(d.crime_level in CRIME_LEVELS for d in districts):
        raise CatalogError("District with unknown crime level")

    kpis = []
    seen = set()
    for record in kpi_records:
        kpi = KPI.from_dict(record)
        if kpi.id in seen:
            raise CatalogError(f"Duplicate KPI id '{kpi.id}'")
        seen.add(kpi.id)
        _validate_kpi(kpi)
        kpis.append(kpi)

    orphans = find_orphan_kpis(kpis, districts)
    if orphans:
        ids = ", ".join(f"{k.id}->{k.district_id}" for k in orphans)
        if strict:
            raise CatalogError(f"KPIs reference unknown districts: {ids}")
        logger.warning(f"⚠️ KPIs reference unknown districts: {ids}")

    return Catalog(kpis=kpis, districts=districts)


class Catalog:
    """Immutable view over KPIs and districts."""

    def __init__(self, kpis: List[KPI], districts: List[District]):
        self._kpis = tuple(kpis)
        self._districts = tuple(districts)
        self._district_index = {d.id: d for d in districts}

    @property
    def kpis(self) -> List[KPI]:
        return list(self._kpis)

    @property
    def districts(self) -> List[District]:
        return list(self._districts)

    def get_district(self, district_id: str) -> Optional[District]:
        return self._district_index.get(district_id)

    def district_name(self, district_id: str) -> str:
        district = self.get_district(district_id)
        return district.name if district else district_id

    def __len__(self) -> int:
        return len(self._kpis)


# =============================================================================
# LOADER
# =============================================================================

@st.cache_resource(ttl=CACHE_TTL_SECONDS)
def load_catalog() -> Catalog:
    """Load the static catalog (cached per process)."""
    strict = config.get_app_setting("STRICT_DISTRICT_REFERENCES", False)
    catalog = build_catalog(KPI_DATA, DISTRICT_DATA, strict=strict)
    logger.info(f"📚 Catalog loaded: {len(catalog)} KPIs, {len(catalog.districts)} districts")
    return catalog
