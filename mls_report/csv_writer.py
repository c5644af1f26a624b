from datetime import date

from mls_report.errors import MalformedValueError
from mls_report.models import ListingRecord

CSV_HEADERS = [
    "MLS#",
    "Address",
    "Unit#",
    "Exposure",
    "Corner",
    "Size (sqft.)",
    "List price",
    "Sold price",
    "Price diff.",
    "Days up",
    "List date",
    "Sold date",
    "Repeat",
]

DELIMITER = ","
QUOTE = '"'


def quote(value: object) -> str:
    if value is None:
        return QUOTE * 2

    text = str(value)
    opened = text.startswith(QUOTE)
    closed = text.endswith(QUOTE)
    if opened and closed:
        return text
    if not opened and not closed:
        return f"{QUOTE}{text}{QUOTE}"
    raise MalformedValueError(text)


def bool_to_str(value: bool | None) -> str:
    if value is None:
        return quote(None)
    return quote("Y" if value else "N")


def date_to_str(value: date | None) -> str:
    return quote(value.isoformat() if value else None)


def csv_line(record: ListingRecord) -> str:
    values = [
        quote(record.mls_number),
        quote(record.building_address),
        quote(record.unit_number),
        quote(record.exposure),
        bool_to_str(record.corner_unit),
        quote(record.size_sqft),
        quote(record.list_price),
        quote(record.sold_price),
        quote(record.price_difference),
        quote(record.days_on_market),
        date_to_str(record.list_date),
        date_to_str(record.sold_date),
        # only ever flagged, never cleared
        bool_to_str(True if record.repeated else None),
    ]
    return DELIMITER.join(values)


def serialize(records: list[ListingRecord]) -> str:
    lines = [DELIMITER.join(CSV_HEADERS)]
    for record in records:
        try:
            lines.append(csv_line(record))
        except MalformedValueError as e:
            e.listing_index = record.index or None
            raise
    return "".join(f"{line}\n" for line in lines)
