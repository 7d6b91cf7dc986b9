from __future__ import annotations

import csv
import io
from typing import Optional, Sequence

import pandas as pd

from ..access.policy import AccessPolicy, Caller
from ..common.datetime_utils import clock_time
from ..core.constants import EXPORT_COLUMNS, EXPORT_SHEET_NAME
from .model import EnrichedAttendance
from .queries import AttendanceQueryService

CSV_MIMETYPE = "text/csv"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def to_export_rows(items: Sequence[EnrichedAttendance]) -> list[dict]:
    return [
        {
            "Employee ID": item.record.employee_id,
            "Name": item.name,
            "Date": item.record.date,
            "Login Time": clock_time(item.record.login_time),
            "Logout Time": clock_time(item.record.logout_time),
        }
        for item in items
    ]


class AttendanceExporter:
    """Admin export of enriched attendance rows as CSV or Excel.

    An empty selection still yields a file with the header row.
    """

    def __init__(self, queries: AttendanceQueryService, policy: Optional[AccessPolicy] = None):
        self._queries = queries
        self._policy = policy or AccessPolicy()

    def _rows(self, caller: Caller, month: Optional[str]) -> list[dict]:
        self._policy.require_admin(caller)
        records = self._queries.get_by_month(month) if month else self._queries.get_all()
        return to_export_rows(self._queries.enrich_with_names(records))

    def export_csv(self, caller: Caller, *, month: Optional[str] = None) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_COLUMNS)
        writer.writeheader()
        for row in self._rows(caller, month):
            writer.writerow(row)
        return out.getvalue().encode("utf-8-sig")

    def export_excel(self, caller: Caller, *, month: Optional[str] = None) -> bytes:
        df = pd.DataFrame(self._rows(caller, month), columns=EXPORT_COLUMNS)

        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=EXPORT_SHEET_NAME)
        return out.getvalue()
