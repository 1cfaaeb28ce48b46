# tests/test_filters.py
from utils.kpi_analytics import ALL, FilterSelection, filter_kpis, get_filter_summary


class TestFilterKpis:
    def test_all_all_is_identity(self, catalog):
        assert filter_kpis(catalog.kpis, ALL, ALL) == catalog.kpis

    def test_category_scenario(self, four_kpis):
        result = filter_kpis(four_kpis, ALL, "community")
        assert [k.name for k in result] == ["Enhance Community Engagement"]

    def test_district_scenario(self, four_kpis):
        result = filter_kpis(four_kpis, "san-felipe", ALL)
        assert [k.id for k in result] == ["k3", "k4"]

    def test_both_predicates(self, four_kpis):
        assert [k.id for k in filter_kpis(four_kpis, "san-felipe", "prevention")] == ["k4"]
        assert filter_kpis(four_kpis, "alajuelita", "prevention") == []

    def test_unknown_ids_yield_empty(self, catalog):
        assert filter_kpis(catalog.kpis, "nowhere", ALL) == []
        assert filter_kpis(catalog.kpis, ALL, "astrology") == []

    def test_result_is_ordered_subset(self, catalog):
        result = filter_kpis(catalog.kpis, "san-felipe", ALL)
        positions = [catalog.kpis.index(k) for k in result]
        assert positions == sorted(positions)
        assert all(k.district_id == "san-felipe" for k in result)

    def test_idempotent(self, catalog):
        once = filter_kpis(catalog.kpis, "alajuelita", "safety")
        assert filter_kpis(once, "alajuelita", "safety") == once

    def test_catalog_san_felipe(self, catalog):
        result = filter_kpis(catalog.kpis, "san-felipe", ALL)
        assert [k.id for k in result] == ["kpi-005", "kpi-006", "kpi-007"]

    def test_input_not_mutated(self, four_kpis):
        before = list(four_kpis)
        filter_kpis(four_kpis, "san-felipe", "community")
        assert four_kpis == before


class TestFilterSelection:
    def test_inactive_by_default(self):
        selection = FilterSelection()
        assert not selection.is_active
        assert repr(selection) == "FilterSelection(inactive)"

    def test_apply_matches_filter_kpis(self, four_kpis):
        selection = FilterSelection("san-felipe", "resources")
        assert selection.is_active
        assert selection.apply(four_kpis) == filter_kpis(four_kpis, "san-felipe", "resources")

    def test_summary(self):
        assert get_filter_summary(FilterSelection()) == "All districts • all categories"
        summary = get_filter_summary(FilterSelection("san-felipe", "safety"), "San Felipe")
        assert summary.startswith("San Felipe • ")
        assert "Safety" in summary
