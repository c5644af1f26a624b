import logging

from bs4 import Tag

from mls_report.errors import MissingRequiredFieldError
from mls_report.extractors.rooms import extract_size_bucket
from mls_report.formatting import money_to_int, money_to_str, node_text, parse_date, parse_int
from mls_report.models import ListingRecord

logger = logging.getLogger(__name__)

MAIN_SECTION_SELECTOR = "div.report-container > div.viewform > div.legacyBorder"
FIELD_SELECTOR = "span.formfield"
TITLE_SECTION_SELECTOR = ":scope > div.formitem.formgroup.tabular"
TITLE_VALUE_SELECTOR = 'span.value[style*="font-weight:bold"]'


def _clean_label(text: str) -> str:
    label = text.strip()
    if label.endswith(":"):
        label = label[:-1].rstrip()
    return label


class ListingExtractor:
    def extract(self, listing_root: Tag, index: int = 1) -> ListingRecord:
        logger.info(f"Extracting listing No. {index}")
        record = ListingRecord(index=index)

        main_section = listing_root.select_one(MAIN_SECTION_SELECTOR)
        if main_section is None:
            raise MissingRequiredFieldError("listing content")

        self._extract_fields(main_section, record)
        self._extract_title_fields(main_section, record)
        record.size_sqft = extract_size_bucket(main_section)
        self._finalize(record)
        return record

    def _extract_fields(self, main_section: Tag, record: ListingRecord) -> None:
        fields_read: set[str] = set()
        for field in main_section.select(FIELD_SELECTOR):
            label_tag = field.select_one("label")
            value_tag = field.select_one("span.value")
            if label_tag is None or value_tag is None:
                continue

            label = _clean_label(node_text(label_tag))
            value = node_text(value_tag)
            if not label or not value:
                continue
            if label in fields_read:
                # duplicate
                continue
            fields_read.add(label)
            self._apply_field(record, label, value)

        if not record.mls_number:
            raise MissingRequiredFieldError("MLS number")
        logger.info(f"MLS#: {record.mls_number}")

    def _apply_field(self, record: ListingRecord, label: str, value: str) -> None:
        if label == "MLS#":
            record.mls_number = value
        elif label == "Exposure":
            record.exposure = value
        elif label == "List":
            record.list_price = value
        elif label == "Sold":
            record.sold_price = value
        elif label == "DOM":
            record.days_on_market = parse_int("days on market", value)
        elif label == "Contract Date":
            record.list_date = parse_date("contract date", value)
        elif label == "Sold Date":
            record.sold_date = parse_date("sold date", value)
        elif label == "Client Remks":
            if "corner" in value.lower():
                record.corner_unit = True

    def _extract_title_fields(self, main_section: Tag, record: ListingRecord) -> None:
        title_section = main_section.select_one(TITLE_SECTION_SELECTOR)
        if title_section is None:
            raise MissingRequiredFieldError("title section")

        title_fields = title_section.select(TITLE_VALUE_SELECTOR)
        if len(title_fields) < 1:
            raise MissingRequiredFieldError("building address")
        if len(title_fields) < 2:
            raise MissingRequiredFieldError("unit number")

        record.building_address = node_text(title_fields[0])
        record.unit_number = node_text(title_fields[1])

    def _finalize(self, record: ListingRecord) -> None:
        if record.list_price is not None and record.sold_price is not None:
            list_dollars = money_to_int("list price", record.list_price)
            sold_dollars = money_to_int("sold price", record.sold_price)
            record.price_difference = money_to_str(list_dollars - sold_dollars)
