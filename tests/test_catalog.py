# tests/test_catalog.py
import logging

import pytest

from utils.kpi_analytics import CatalogError, District, build_catalog, find_orphan_kpis
from utils.kpi_analytics.catalog import DISTRICT_DATA, KPI_DATA
from utils.kpi_analytics.constants import KPI_CATEGORIES


def _kpi_record(**overrides):
    record = dict(KPI_DATA[0])
    record.update(overrides)
    return record


class TestStaticCatalog:
    def test_sizes(self, catalog):
        assert len(catalog.districts) == 7
        assert len(catalog) == len(KPI_DATA)

    def test_ids_unique(self, catalog):
        ids = [k.id for k in catalog.kpis]
        assert len(ids) == len(set(ids))

    def test_all_references_resolve(self, catalog):
        assert find_orphan_kpis(catalog.kpis, catalog.districts) == []

    def test_classifications_valid(self, catalog):
        assert all(k.category in KPI_CATEGORIES for k in catalog.kpis)
        assert all(k.current_value >= 0 and k.target_value >= 0 for k in catalog.kpis)

    def test_community_in_alajuelita(self, catalog):
        names = [k.name for k in catalog.kpis if k.district_id == "alajuelita" and k.category == "community"]
        assert names == ["Enhance Community Engagement"]

    def test_district_lookup(self, catalog):
        district = catalog.get_district("san-felipe")
        assert district.name == "San Felipe"
        assert district.crime_level == "critical"
        assert catalog.get_district("nowhere") is None
        assert catalog.district_name("nowhere") == "nowhere"

    def test_kpis_property_returns_copy(self, catalog):
        catalog.kpis.clear()
        assert len(catalog.kpis) == len(KPI_DATA)


class TestValidation:
    def test_duplicate_id(self):
        with pytest.raises(CatalogError, match="Duplicate"):
            build_catalog([KPI_DATA[0], KPI_DATA[0]], DISTRICT_DATA)

    @pytest.mark.parametrize("field, value", [
        ("category", "astrology"),
        ("trend", "sideways"),
        ("priority", "urgent"),
        ("currentValue", -1),
    ])
    def test_invalid_record(self, field, value):
        with pytest.raises(CatalogError):
            build_catalog([_kpi_record(**{field: value})], DISTRICT_DATA)

    def test_orphan_warns_by_default(self, caplog):
        with caplog.at_level(logging.WARNING):
            catalog = build_catalog([_kpi_record(districtId="atlantis")], DISTRICT_DATA)
        assert len(catalog) == 1
        assert "atlantis" in caplog.text

    def test_orphan_rejected_when_strict(self):
        with pytest.raises(CatalogError, match="atlantis"):
            build_catalog([_kpi_record(districtId="atlantis")], DISTRICT_DATA, strict=True)


class TestDistrict:
    def test_round_trip(self):
        district = District.from_dict(DISTRICT_DATA[0])
        assert District.from_dict(district.to_dict()) == district

    def test_density(self):
        district = District.from_dict(DISTRICT_DATA[0])
        assert district.density == pytest.approx(20000 / 8.5)
