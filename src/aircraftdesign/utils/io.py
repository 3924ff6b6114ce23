# src/aircraftdesign/utils/io.py
import json
import logging
from collections import OrderedDict
from pathlib import Path
from typing import Iterable, Optional, Union

from aircraftdesign.config import DEFAULT_REPORT_EXCLUDE, ExportOptions

logger = logging.getLogger(__name__)


def save_report(
    report: OrderedDict,
    filepath: Union[str, Path],
    exclude: Optional[Iterable[str]] = DEFAULT_REPORT_EXCLUDE,
) -> Path:
    """
    Saves a report (see aircraftdesign.report.get_report) to a CSV file.

    Args:
        report: Ordered mapping RowKey -> ReportRow
        filepath: Destination path (e.g., 'results/bom.csv')
        exclude: Columns left out of the file

    Returns:
        Path of the written file
    """
    from aircraftdesign.report import report_to_dataframe

    if not report:
        raise ValueError("Report is empty. Nothing to save.")

    path = Path(filepath)
    # Ensure the directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    df = report_to_dataframe(report, exclude)
    df.to_csv(path, index=False)
    logger.info("Report saved to %s", path.absolute())
    return path


def load_export_options(filepath: Union[str, Path]) -> ExportOptions:
    """
    Load export settings from a JSON object.

    The object may name a ``preset`` ('default', 'coarse', 'fine') and any
    ExportOptions field as an override:

        {"preset": "coarse", "file_type": "ply", "output_dir": "vtk"}
    """
    path = Path(filepath)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}")

    preset = data.pop("preset", "default")
    unknown = set(data) - ExportOptions.field_names()
    if unknown:
        raise ValueError(
            f"Unknown export options in {path}: {sorted(unknown)}. "
            f"Valid options: {sorted(ExportOptions.field_names())}"
        )
    return ExportOptions.from_preset(preset, **data)
