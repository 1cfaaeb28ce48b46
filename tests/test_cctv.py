# tests/test_cctv.py
import pytest

from utils.cctv import CAMERAS, CAMERA_STATUSES, GRID_LAYOUTS, camera_status_counts, filter_cameras, grid_rows


class TestCameras:
    def test_registry(self):
        assert [c.id for c in CAMERAS] == [f"cam-00{i}" for i in range(1, 7)]
        assert all(c.status in CAMERA_STATUSES for c in CAMERAS)

    def test_status_properties(self):
        central, _, _, school, park, _ = CAMERAS
        assert central.is_online and central.status_color == 'green'
        assert not school.is_online and school.status_icon == '🟡'
        assert park.status_color == 'red'

    def test_status_counts(self):
        assert camera_status_counts(CAMERAS) == {'online': 4, 'offline': 1, 'maintenance': 1}

    def test_status_counts_empty(self):
        assert camera_status_counts([]) == {'online': 0, 'offline': 0, 'maintenance': 0}


class TestFilterCameras:
    def test_all(self):
        assert len(filter_cameras(CAMERAS)) == 6

    def test_by_status(self):
        assert [c.id for c in filter_cameras(CAMERAS, status='offline')] == ['cam-005']
        assert len(filter_cameras(CAMERAS, status='online')) == 4

    def test_by_district(self):
        assert [c.id for c in filter_cameras(CAMERAS, district='Concepción')] == ['cam-003']
        assert filter_cameras(CAMERAS, district='Barrio México') == []

    def test_district_and_status(self):
        assert filter_cameras(CAMERAS, district='San Felipe', status='online') == []

    def test_unknown_status(self):
        with pytest.raises(ValueError):
            filter_cameras(CAMERAS, status='recording')


class TestGridRows:
    @pytest.mark.parametrize("layout, shape", [
        ('2x2', [2, 2]),
        ('3x2', [3, 3]),
        ('2x3', [2, 2, 2]),
    ])
    def test_layouts(self, layout, shape):
        rows = grid_rows(CAMERAS, layout)
        assert [len(r) for r in rows] == shape
        assert rows[0][0].id == 'cam-001'

    def test_short_last_row(self):
        rows = grid_rows(CAMERAS[:3], '2x2')
        assert [len(r) for r in rows] == [2, 1]

    def test_empty(self):
        assert grid_rows([], '3x2') == []

    def test_layouts_defined(self):
        assert set(GRID_LAYOUTS) == {'2x2', '3x2', '2x3'}

    def test_unknown_layout(self):
        with pytest.raises(ValueError):
            grid_rows(CAMERAS, '4x4')
