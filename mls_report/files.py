import logging
from pathlib import Path

from mls_report.config import REPORT_CONFIG

logger = logging.getLogger(__name__)


def find_input_file(filename: str, reports_dir: str | Path | None = None) -> Path:
    """Resolve filename as given, falling back to the reports directory."""
    if not filename or not filename.strip():
        raise ValueError("Filename can't be empty")

    path = Path(filename)
    if not path.is_file():
        base = Path(reports_dir if reports_dir is not None else REPORT_CONFIG["reports_dir"])
        path = base / filename
    if not path.is_file():
        raise FileNotFoundError(f"Report not found: {filename}")

    path = path.resolve()
    logger.info(f"Input file: {path}")
    return path


def create_output_file(input_file: Path) -> Path:
    """Create and return the first free output_<name>_<n>.csv next to input_file."""
    stem = input_file.name.replace(".html", "")
    prefix = REPORT_CONFIG["output_prefix"]

    i = 0
    while True:
        i += 1
        output_file = input_file.parent / f"{prefix}{stem}_{i}.csv"
        try:
            output_file.open("x").close()
        except FileExistsError:
            continue
        break

    logger.info(f"Output file: {output_file}")
    return output_file


def read_report(path: Path) -> str:
    return path.read_text(encoding=REPORT_CONFIG["input_encoding"])


def write_output(path: Path, text: str) -> None:
    # newline="" keeps "\n" line endings on every platform
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
