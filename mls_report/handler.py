import argparse
import logging
import sys
from pathlib import Path

from mls_report.batch import BatchProcessor
from mls_report.config import REPORT_CONFIG
from mls_report.csv_writer import serialize
from mls_report.errors import ReportError
from mls_report.files import create_output_file, find_input_file, read_report, write_output

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def analyze(filename: str, reports_dir: str | None = None) -> Path:
    logger.info(f"Analyzer initializing for input filename: {filename}")
    input_file = find_input_file(filename, reports_dir)

    logger.info("Parsing HTML document...")
    listings = BatchProcessor().process_html(read_report(input_file))
    csv_text = serialize(listings)

    # output file is only created once the whole report converted cleanly
    output_file = create_output_file(input_file)
    write_output(output_file, csv_text)
    logger.info(f"Wrote {len(listings)} listings to {output_file}")
    return output_file


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mls-report",
        description="Convert an archived MLS listing report (HTML) to CSV.",
    )
    parser.add_argument("report", help="Report HTML file, absolute or relative to --reports-dir.")
    parser.add_argument(
        "--reports-dir",
        default=REPORT_CONFIG["reports_dir"],
        help="Directory searched when the report is not found as given.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=REPORT_CONFIG["log_level"].upper(),
        help="Logging level.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        output_file = analyze(args.report, args.reports_dir)
    except (ReportError, FileNotFoundError, ValueError) as e:
        logger.error(f"Report conversion failed: {e}")
        return 1

    print(output_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
