# tests/conftest.py
import pytest
from sqlalchemy import create_engine

from utils.kpi_analytics import KPI, build_catalog
from utils.kpi_analytics.catalog import KPI_DATA, DISTRICT_DATA


def make_kpi(**overrides) -> KPI:
    fields = dict(
        id="kpi-x",
        name="Sample KPI",
        problem="A problem",
        solution="A solution",
        application="An application",
        stakeholder_benefits="Benefits",
        current_value=10,
        target_value=20,
        trend="up",
        district_id="alajuelita",
        category="community",
        priority="medium",
    )
    fields.update(overrides)
    return KPI(**fields)


@pytest.fixture
def catalog():
    return build_catalog(KPI_DATA, DISTRICT_DATA)


@pytest.fixture
def four_kpis():
    return [
        make_kpi(id="k1", name="Increase Patrol Coverage", category="patrol"),
        make_kpi(id="k2", name="Enhance Community Engagement", category="community"),
        make_kpi(id="k3", name="Optimize Resource Allocation", category="resources", district_id="san-felipe"),
        make_kpi(id="k4", name="Expand Prevention Programs", category="prevention", district_id="san-felipe"),
    ]


@pytest.fixture
def engine(tmp_path):
    eng = create_engine(f"sqlite:///{tmp_path / 'storage.db'}")
    yield eng
    eng.dispose()


@pytest.fixture
def kpi_factory():
    return make_kpi
