# tests/test_export.py
import json
from datetime import date
from io import BytesIO

import pytest
from openpyxl import load_workbook

from utils.kpi_analytics import ExportError, build_filename, export_data, to_csv, to_json

HEADER = "Name,Problem,Solution,Application,Benefits,Current,Target,Trend,Category"


class TestCsv:
    def test_empty_is_header_only(self):
        assert to_csv([]) == HEADER

    def test_row_layout(self, kpi_factory):
        kpi = kpi_factory(
            name="Reduce Drug-Related Incidents",
            problem="P", solution="S", application="A", stakeholder_benefits="B",
            current_value=45, target_value=30.0, trend="down", category="safety",
        )
        assert to_csv([kpi]) == HEADER + '\n"Reduce Drug-Related Incidents","P","S","A","B",45,30,down,safety'

    def test_fractional_values(self, kpi_factory):
        row = to_csv([kpi_factory(current_value=87.5, target_value=98)]).split("\n")[1]
        assert ",87.5,98," in row

    def test_embedded_quotes_doubled(self, kpi_factory):
        row = to_csv([kpi_factory(name='The "Safe Streets" plan')]).split("\n")[1]
        assert row.startswith('"The ""Safe Streets"" plan",')

    def test_no_trailing_newline(self, catalog):
        content = to_csv(catalog.kpis)
        assert not content.endswith("\n")
        assert len(content.split("\n")) == len(catalog) + 1


class TestJson:
    def test_round_trip(self, catalog):
        decoded = json.loads(to_json(catalog.kpis))
        assert decoded == [k.to_dict() for k in catalog.kpis]
        assert decoded[0]['stakeholderBenefits']

    def test_pretty_printed(self, kpi_factory):
        assert to_json([kpi_factory()]).startswith('[\n  {\n    "id"')

    def test_non_ascii_kept(self, kpi_factory):
        assert "Concepción" in to_json([kpi_factory(name="Concepción youth")])

    def test_include_charts(self, four_kpis):
        decoded = json.loads(to_json(four_kpis, include_charts=True))
        assert set(decoded) == {'kpis', 'charts'}
        assert len(decoded['kpis']) == 4
        assert [d['category'] for d in decoded['charts']['distribution']] == [
            "patrol", "community", "resources", "prevention"
        ]


class TestExportData:
    def test_filename(self):
        assert build_filename("csv", today=date(2024, 1, 15)) == "alajuelita-kpis-2024-01-15.csv"

    def test_csv_payload(self, four_kpis):
        payload = export_data(four_kpis, "csv", today=date(2024, 3, 1))
        assert payload.filename == "alajuelita-kpis-2024-03-01.csv"
        assert payload.mime == "text/csv"
        assert payload.content == to_csv(four_kpis)

    def test_json_payload(self, four_kpis):
        payload = export_data(four_kpis, "json", today=date(2024, 3, 1))
        assert payload.filename.endswith(".json")
        assert payload.mime == "application/json"

    def test_unknown_format(self, four_kpis):
        with pytest.raises(ExportError):
            export_data(four_kpis, "pdf")

    def test_empty_list_exports(self):
        assert export_data([], "csv").content == HEADER
        assert json.loads(export_data([], "json").content) == []

    def test_xlsx(self, catalog):
        payload = export_data(catalog.kpis, "xlsx", filter_summary="All districts • all categories")
        assert isinstance(payload.content, bytes)
        assert payload.size == len(payload.content)

        wb = load_workbook(BytesIO(payload.content))
        assert wb.sheetnames == ["Summary", "KPIs"]
        ws = wb["KPIs"]
        assert ws.cell(row=1, column=1).value == "Name"
        assert ws.max_row == len(catalog) + 1
        assert ws.cell(row=2, column=1).value == catalog.kpis[0].name

    def test_serialization_failure_wrapped(self, kpi_factory):
        kpi = kpi_factory(current_value=object())
        with pytest.raises(ExportError) as exc_info:
            export_data([kpi], "json")
        assert isinstance(exc_info.value.__cause__, TypeError)


class TestPreparedPayload:
    def test_matching_signature(self):
        from utils.kpi_analytics.fragments import _export_signature, _prepared_payload

        signature = _export_signature("All districts • all categories", "csv", False)
        store = {'kpi_export_payload': (signature, "payload")}
        assert _prepared_payload(store, 'kpi_export_payload', signature) == "payload"

    def test_format_change_hides_payload(self):
        from utils.kpi_analytics.fragments import _export_signature, _prepared_payload

        summary = "San Felipe • all categories"
        store = {'kpi_export_payload': (_export_signature(summary, "csv", False), "csv payload")}
        assert _prepared_payload(store, 'kpi_export_payload', _export_signature(summary, "json", False)) is None
        assert _prepared_payload(store, 'kpi_export_payload', _export_signature("All districts • all categories", "csv", False)) is None

    def test_include_charts_only_counts_for_json(self):
        from utils.kpi_analytics.fragments import _export_signature

        assert _export_signature("s", "csv", True) == _export_signature("s", "csv", False)
        assert _export_signature("s", "json", True) != _export_signature("s", "json", False)

    def test_missing_payload(self):
        from utils.kpi_analytics.fragments import _export_signature, _prepared_payload

        assert _prepared_payload({}, 'kpi_export_payload', _export_signature("s", "csv", False)) is None
