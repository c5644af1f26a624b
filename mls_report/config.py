import os

REPORT_CONFIG = {
    "reports_dir": os.environ.get("MLS_REPORTS_DIR", "."),
    "input_encoding": os.environ.get("MLS_INPUT_ENCODING", "utf-8"),
    "output_prefix": os.environ.get("MLS_OUTPUT_PREFIX", "output_"),
    "log_level": os.environ.get("MLS_LOG_LEVEL", "INFO"),
}
