from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.common.datetime_utils import today_local
from src.attendance_tracker.attendance_tracker.container import build_container


def main() -> None:
    parser = argparse.ArgumentParser(description="Write the attendance summary report to disk.")
    parser.add_argument("--format", choices=["csv", "xlsx"], default="xlsx")
    parser.add_argument("--columns", help="comma-separated column ids (default: all)")
    parser.add_argument("--out-dir", default=".")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    columns = args.columns.split(",") if args.columns else None
    data = container.report_service.build_report(columns)
    exporter = container.report_exporter
    payload = exporter.to_csv(data.rows, data.labels) if args.format == "csv" else exporter.to_xlsx(data.rows, data.labels)

    out_path = Path(args.out_dir) / exporter.filename(args.format, today=today_local())
    out_path.write_bytes(payload)
    container.insight_service.shutdown()

    print(f"OK: wrote {len(data.rows)} rows -> {out_path}")


if __name__ == "__main__":
    main()
