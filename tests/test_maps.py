# tests/test_maps.py
from datetime import datetime, timezone

import pandas as pd
import pytest

from utils.local_storage import LocalStorage
from utils.maps import (
    DISTRICT_CENTERS,
    MAP_LAYERS,
    MapCharts,
    VEHICLE_ROUTES,
    base_map_style,
    district_center,
    filter_time_range,
    generate_heatmap_points,
    generate_layer_markers,
    get_vehicle_routes,
    load_map_zoom,
    routes_to_frame,
)
from utils.preferences import UserPreferences, save_preferences

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestDistrictCenter:
    def test_known_district(self):
        assert district_center("concepcion") == (9.9067, -84.1089)

    def test_unknown_falls_back_to_alajuelita(self):
        assert district_center("atlantis") == DISTRICT_CENTERS["alajuelita"] == (9.9152, -84.1007)


class TestHeatmapPoints:
    def test_shape_and_spread(self):
        points = generate_heatmap_points("alajuelita", "crime", seed=1, now=NOW)
        lat, lng = DISTRICT_CENTERS["alajuelita"]

        assert len(points) == 50
        assert (points['type'] == 'crime').all()
        assert (points['district_id'] == 'alajuelita').all()
        assert points['lat'].between(lat - 0.01, lat + 0.01).all()
        assert points['lng'].between(lng - 0.01, lng + 0.01).all()

    def test_intensity_ranges(self):
        crime = generate_heatmap_points("tejarcillos", "crime", seed=2, now=NOW)
        patrol = generate_heatmap_points("tejarcillos", "patrol", seed=2, now=NOW)
        hot = generate_heatmap_points("barrio-mexico", "crime", seed=2, now=NOW)

        assert crime['intensity'].between(1, 6).all()
        assert patrol['intensity'].between(1, 4).all()
        assert hot['intensity'].between(2, 9).all()
        assert hot['intensity'].mean() > crime['intensity'].mean()

    def test_severity_matches_intensity(self):
        points = generate_heatmap_points("san-felipe", "crime", seed=3, now=NOW)
        assert (points.loc[points['intensity'] >= 5, 'severity'] == 'high').all()
        assert (points.loc[points['intensity'] <= 1, 'severity'] == 'low').all()
        assert set(points['severity']) <= {'low', 'medium', 'high'}

    def test_timestamps_within_last_day(self):
        points = generate_heatmap_points("alajuelita", "prediction", seed=4, now=NOW)
        ts = points['timestamp']
        assert (ts <= pd.Timestamp(NOW)).all()
        assert (ts > pd.Timestamp(NOW) - pd.Timedelta(hours=24)).all()

    def test_seeded_output_repeats(self):
        a = generate_heatmap_points("alajuelita", "surveillance", seed=9, now=NOW)
        b = generate_heatmap_points("alajuelita", "surveillance", seed=9, now=NOW)
        pd.testing.assert_frame_equal(a, b)

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            generate_heatmap_points("alajuelita", "traffic")


class TestTimeRange:
    def test_window_subsets(self):
        points = generate_heatmap_points("alajuelita", "crime", n_points=200, seed=5, now=NOW)
        last_hour = filter_time_range(points, "1h", now=NOW)
        last_day = filter_time_range(points, "24h", now=NOW)

        assert len(last_day) == 200
        assert len(last_hour) < len(last_day)
        assert (last_hour['timestamp'] >= pd.Timestamp(NOW) - pd.Timedelta(hours=1)).all()

    def test_unknown_range(self):
        points = generate_heatmap_points("alajuelita", seed=5, now=NOW)
        with pytest.raises(ValueError):
            filter_time_range(points, "90d", now=NOW)


class TestLayerMarkers:
    @pytest.mark.parametrize("layer", [l['id'] for l in MAP_LAYERS])
    def test_counts_and_styling(self, layer):
        markers = generate_layer_markers("alajuelita", layer, seed=1)
        expected = next(l['count'] for l in MAP_LAYERS if l['id'] == layer)
        assert len(markers) == expected
        assert markers['color'].str.startswith('#').all()
        assert markers['label'].str.len().gt(0).all()

    def test_crime_colors_follow_severity(self):
        markers = generate_layer_markers("alajuelita", "crime", seed=2)
        assert markers['severity'].between(1, 5).all()
        assert (markers.loc[markers['severity'] > 3, 'color'] == '#EF4444').all()
        assert (markers.loc[markers['severity'] <= 2, 'color'] == '#10B981').all()
        assert (markers['size'] == 8 + markers['severity'] * 2).all()

    def test_cctv_coverage(self):
        markers = generate_layer_markers("alajuelita", "cctv", seed=3)
        assert markers['coverage'].between(50, 149).all()
        assert set(markers['status']) <= {'online', 'offline'}

    def test_prediction_confidence(self):
        markers = generate_layer_markers("alajuelita", "prediction", seed=4)
        assert markers['confidence'].between(0.6, 1.0).all()
        assert markers['size'].between(12.8, 16).all()

    def test_unknown_layer(self):
        with pytest.raises(ValueError):
            generate_layer_markers("alajuelita", "drones")


class TestVehicleRoutes:
    def test_sorted_by_risk(self):
        assert [r.plate for r in get_vehicle_routes()] == ['DEF456', 'XYZ123', 'ABC789']

    def test_district_and_risk_filters(self):
        assert [r.id for r in get_vehicle_routes("concepcion")] == ['2']
        assert [r.id for r in get_vehicle_routes(min_risk=0.8)] == ['3', '1']
        assert get_vehicle_routes("tejarcillos") == []

    def test_route_data(self):
        route = VEHICLE_ROUTES[0]
        assert route.label == "XYZ123 · White Toyota Corolla"
        assert route.route[0].timestamp == "2024-01-15T08:00:00Z"
        assert route.last_seen.timestamp == "2024-01-15T09:00:00Z"
        assert [p.probability for p in route.predicted] == [0.78, 0.65, 0.52]

    def test_frame(self):
        df = routes_to_frame(VEHICLE_ROUTES)
        assert len(df) == sum(len(r.route) + len(r.predicted) for r in VEHICLE_ROUTES)

        first = df[df['vehicle_id'] == '2']
        assert list(first['kind']) == ['observed'] * 4 + ['predicted'] * 2
        assert list(first['seq']) == list(range(6))
        assert first['timestamp'].iloc[:4].is_monotonic_increasing

    def test_empty_frame(self):
        assert routes_to_frame([]).empty


class TestMapCharts:
    def test_open_tiles_without_token(self):
        assert base_map_style(None) == {'style': 'open-street-map'}

    def test_mapbox_style_with_token(self):
        style = base_map_style("pk.test", "mapbox://styles/mapbox/dark-v11")
        assert style == {'style': "mapbox://styles/mapbox/dark-v11", 'accesstoken': "pk.test"}

    def test_heatmap_figure(self):
        points = generate_heatmap_points("alajuelita", seed=1, now=NOW)
        fig = MapCharts.build_heatmap(points, district_center("alajuelita"), zoom=14)

        assert fig.data[0].type == 'densitymapbox'
        assert fig.layout.mapbox.zoom == 14
        assert fig.layout.mapbox.style == 'open-street-map'
        assert fig.layout.mapbox.center.lat == pytest.approx(9.9152)

    def test_density_mode_drops_weights(self):
        points = generate_heatmap_points("alajuelita", seed=1, now=NOW)
        fig = MapCharts.build_heatmap(points, district_center("alajuelita"), mode='density')
        assert fig.data[0].z is None

    def test_marker_map_with_routes(self):
        markers = generate_layer_markers("alajuelita", "cctv", seed=1)
        fig = MapCharts.build_marker_map(markers, district_center("alajuelita"), token="pk.test",
                                         mapbox_style="streets")
        MapCharts.add_vehicle_routes(fig, VEHICLE_ROUTES)

        assert fig.data[0].type == 'scattermapbox'
        # one observed and one predicted trace per vehicle
        assert len(fig.data) == 1 + 2 * len(VEHICLE_ROUTES)
        assert fig.layout.mapbox.accesstoken == "pk.test"

    def test_routes_map(self):
        fig = MapCharts.build_routes_map(get_vehicle_routes("san-felipe"), district_center("san-felipe"))
        assert len(fig.data) == 2
        assert list(fig.data[0].lat) == [p.lat for p in VEHICLE_ROUTES[2].route]


class TestMapZoom:
    def test_saved_zoom(self, engine):
        storage = LocalStorage(engine)
        save_preferences(storage, UserPreferences(map_default_zoom=16))
        assert load_map_zoom(storage) == 16

    def test_default_zoom(self, engine):
        assert load_map_zoom(LocalStorage(engine)) == 12


class TestMapProvider:
    def test_map_provider_reads_config(self):
        from utils.config import config
        from utils.maps.fragments import _map_provider

        token, style = _map_provider()
        assert token == config.get_api_key("mapbox")
        assert style == config.get_map_config().style
