"""JSON report helpers."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from .runner import RunReport


def report_to_dict(report: RunReport) -> Dict[str, object]:
    return {
        "first_pdf": str(report.first_pdf),
        "second_pdf": str(report.second_pdf),
        "config": report.config.to_dict(),
        "pairs": [result.to_dict() for result in report.results],
        "unmatched_first": list(report.unmatched_first),
        "unmatched_second": list(report.unmatched_second),
        "failures": [failure.to_dict() for failure in report.failures],
        "render_errors": dict(report.render_errors),
        "cleanup_errors": list(report.cleanup_errors),
        "summary": {
            "pairs": len(report.results),
            "differing_pairs": len(report.differing_pairs),
            "total_differing_pixels": report.total_differing_pixels,
        },
    }


def write_json_report(report: RunReport, path: str | Path) -> None:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as handle:
        json.dump(report_to_dict(report), handle, ensure_ascii=False, indent=2)


def report_to_json(report: RunReport) -> str:
    return json.dumps(report_to_dict(report), ensure_ascii=False, indent=2)
