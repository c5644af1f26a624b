import logging

from bs4 import Tag

from mls_report.errors import FieldFormatError, UnitSizeConversionError
from mls_report.formatting import node_text, parse_meters
from mls_report.models import RoomDimension

logger = logging.getLogger(__name__)

ROOMS_SECTION_SELECTOR = ":scope > div.formitem.formgroup.vertical"
ROOM_ROW_SELECTOR = ":scope > div.formitem.formgroup.vertical"
ROOM_VALUE_SELECTOR = "span.formitem > span.value"

LENGTH_POS = 3
WIDTH_POS = 4

SQFT_PER_SQM = 10.7639
# rooms table leaves out bathrooms, corridors, foyer, etc.
UNMEASURED_AREA_FACTOR = 1.33

BUCKET_WIDTH = 100
BUCKET_LOWER_BOUNDS = range(100, 1600, BUCKET_WIDTH)


def read_rooms(rooms_section: Tag) -> list[RoomDimension]:
    rooms: list[RoomDimension] = []
    for row in rooms_section.select(ROOM_ROW_SELECTOR):
        values = [node_text(v) for v in row.select(ROOM_VALUE_SELECTOR)]
        if not values:
            continue
        if len(values) <= WIDTH_POS:
            raise FieldFormatError("room row", " | ".join(values))

        room = RoomDimension(
            length=parse_meters("room length", values[LENGTH_POS]),
            width=parse_meters("room width", values[WIDTH_POS]),
        )
        combined = any("combined" in v.lower() for v in values[WIDTH_POS + 1:])

        # a combined room shares floor space with a room that's already counted
        if combined and room in rooms:
            logger.debug(f"Skipping combined room {room.length} x {room.width}")
            continue
        rooms.append(room)
    return rooms


def floor_area_sqft(rooms: list[RoomDimension]) -> float:
    sqm = sum(room.width * room.length for room in rooms)
    return sqm * SQFT_PER_SQM * UNMEASURED_AREA_FACTOR


def size_bucket(size: float) -> str:
    for lower in BUCKET_LOWER_BOUNDS:
        upper = lower + BUCKET_WIDTH
        if lower <= size < upper:
            return f"{lower}-{upper}"
    raise UnitSizeConversionError(size)


def extract_size_bucket(main_section: Tag) -> str | None:
    """Estimate the unit size from the rooms table and return its bucket label.

    Returns None when there is no rooms table or the measured area is zero.
    """
    rooms_section = main_section.select_one(ROOMS_SECTION_SELECTOR)
    if rooms_section is None:
        logger.debug("No rooms table, leaving unit size empty")
        return None

    rooms = read_rooms(rooms_section)
    if not rooms:
        return None

    size = floor_area_sqft(rooms)
    if size <= 0:
        return None
    return size_bucket(size)
