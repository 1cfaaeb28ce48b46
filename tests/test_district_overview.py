# tests/test_district_overview.py
import pandas as pd
import pytest

from utils.district_overview import (
    DistrictCharts,
    build_stat_cards,
    combine_district_stats,
    crime_type_breakdown,
    hourly_activity,
    response_time_by_district,
)


class TestStatCards:
    def test_order_and_sentiment(self, catalog):
        cards = build_stat_cards(catalog.get_district("alajuelita").stats)
        assert [c.key for c in cards] == ["drugIncidents", "responseTime", "gangActivity", "communityTips"]
        sentiments = {c.key: c.indicator.sentiment for c in cards}
        assert sentiments == {
            "drugIncidents": "favorable",
            "responseTime": "favorable",
            "gangActivity": "neutral",
            "communityTips": "favorable",
        }

    def test_missing_counters_skipped(self):
        cards = build_stat_cards({'communityTips': 4})
        assert [c.key for c in cards] == ["communityTips"]
        assert cards[0].change == "+15%"


class TestCombine:
    def test_empty(self):
        assert combine_district_stats([]) == {}

    def test_totals(self, catalog):
        totals = combine_district_stats(catalog.districts)
        assert totals['drugIncidents'] == 252
        assert totals['gangActivity'] == 87
        assert totals['communityTips'] == 152
        assert totals['responseTime'] == pytest.approx(8.3)


class TestHourlyActivity:
    def test_seeded_is_repeatable(self, catalog):
        district = catalog.get_district("san-felipe")
        first = hourly_activity(district, 36, seed=7)
        second = hourly_activity(district, 36, seed=7)
        pd.testing.assert_frame_equal(first, second)

    def test_shape_and_non_negative(self, catalog):
        df = hourly_activity(None, 36, seed=1, jitter=0.5)
        assert list(df.columns) == ['time', 'incidents', 'patrols', 'tips']
        assert len(df) == 7
        assert (df[['incidents', 'patrols', 'tips']] >= 0).all().all()

    def test_no_jitter_scales_baseline(self, catalog):
        district = catalog.get_district("alajuelita")
        df = hourly_activity(district, 45, seed=0, jitter=0.0)
        assert df['incidents'].tolist() == [2, 1, 5, 8, 12, 15, 6]


class TestCharts:
    def test_frames(self, catalog):
        rt = response_time_by_district(catalog.districts)
        assert len(rt) == 7
        assert crime_type_breakdown()['share'].sum() == 100

    def test_chart_builders(self, catalog):
        df = hourly_activity(None, 36, seed=3)
        assert DistrictCharts.build_hourly_activity_chart(df) is not None
        assert DistrictCharts.build_crime_type_chart(crime_type_breakdown()) is not None
        assert DistrictCharts.build_response_time_chart(
            response_time_by_district(catalog.districts), highlight="San Felipe"
        ) is not None
