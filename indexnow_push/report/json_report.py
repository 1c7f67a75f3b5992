# indexnow_push/report/json_report.py

"""
JSON report of a push run.

Serialises a PushReport to a file.
"""
import json
from pathlib import Path

from indexnow_push.engine import PushReport


def render_json(report: PushReport, output_path: Path | str) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: PushReport of a finished run
    :param output_path: path of the JSON file
    :return: Path of the written file

    Example:
    ```python
    from indexnow_push.report.json_report import render_json
    report_path = render_json(report, 'reports/push.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)

    return output
