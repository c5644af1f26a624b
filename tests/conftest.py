import os

import pytest

os.environ.setdefault("MLS_REPORTS_DIR", ".")
os.environ.setdefault("MLS_INPUT_ENCODING", "utf-8")
os.environ.setdefault("MLS_OUTPUT_PREFIX", "output_")
os.environ.setdefault("MLS_LOG_LEVEL", "INFO")


def _field(label: str, value: str) -> str:
    return (
        '<span class="formfield">'
        f"<label>{label}</label>"
        f'<span class="value">{value}</span>'
        "</span>"
    )


def _room_row(values: list[str]) -> str:
    spans = "".join(
        f'<span class="formitem"><span class="value">{v}</span></span>' for v in values
    )
    return f'<div class="formitem formgroup vertical">{spans}</div>'


def build_listing(
    fields: list[tuple[str, str]] | None = None,
    title: tuple[str, ...] = ("100 Harbour St", "2105"),
    rooms: list[list[str]] | None = None,
) -> str:
    title_html = "".join(
        '<span class="formitem">'
        f'<span class="value" style="font-weight:bold">{t}</span>'
        "</span>"
        for t in title
    )
    fields_html = "".join(_field(label, value) for label, value in (fields or []))
    rooms_html = ""
    if rooms is not None:
        rooms_html = (
            '<div class="formitem formgroup vertical">'
            + "".join(_room_row(r) for r in rooms)
            + "</div>"
        )
    return (
        '<div class="link-item">'
        '<div class="report-container"><div class="viewform"><div class="legacyBorder">'
        f'<div class="formitem formgroup tabular">{title_html}</div>'
        f'<div class="formitem formgroup horizontal">{fields_html}</div>'
        f"{rooms_html}"
        "</div></div></div>"
        "</div>"
    )


def build_report(*listings: str) -> str:
    return (
        "<html><body>"
        f'<div class="reports">{"".join(listings)}</div>'
        "</body></html>"
    )


def room(length: str, width: str, *remarks: str) -> list[str]:
    return ["1", "Living", "Main", length, width, *remarks]


@pytest.fixture
def listing_html():
    return build_listing


@pytest.fixture
def report_html():
    return build_report


@pytest.fixture
def room_row():
    return room
