# tests/test_charts.py
from utils.kpi_analytics import KPIAnalyticsCharts, KPIMetrics


def test_series_dataframe_long_form(four_kpis):
    series = KPIMetrics(four_kpis).aggregate()['series']
    df = KPIAnalyticsCharts.series_dataframe(series)
    assert len(df) == 2 * len(four_kpis)
    assert set(df['measure']) == {'Current', 'Target'}
    assert df['label'].iloc[0] == "Increase Patrol"


def test_series_dataframe_empty():
    df = KPIAnalyticsCharts.series_dataframe([])
    assert df.empty
    assert 'measure' in df.columns


def test_chart_builders(catalog):
    data = KPIMetrics(catalog.kpis).aggregate()
    bars = KPIAnalyticsCharts.build_current_vs_target_chart(data['series'])
    line = KPIAnalyticsCharts.build_performance_line_chart(data['series'])
    donut = KPIAnalyticsCharts.build_category_donut(data['distribution'])
    assert bars.to_dict()['mark']
    assert line.to_dict()['mark']
    assert list(donut.data[0].values) == [d['count'] for d in data['distribution']]


def test_empty_inputs():
    assert KPIAnalyticsCharts.build_category_donut([]) is None
    empty = KPIAnalyticsCharts.build_current_vs_target_chart([])
    assert empty.to_dict()['mark']['type'] == 'text'
