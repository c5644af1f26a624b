import logging
from typing import Callable

from bs4 import BeautifulSoup

from mls_report.errors import ReportError
from mls_report.extractors.listing import ListingExtractor
from mls_report.models import ListingRecord

logger = logging.getLogger(__name__)

LISTING_SELECTOR = "div.reports > div.link-item"


class BatchProcessor:
    def __init__(
        self,
        extractor: ListingExtractor | None = None,
        on_listing: Callable[[ListingRecord], None] | None = None,
    ):
        self.extractor = extractor or ListingExtractor()
        self.on_listing = on_listing

    def process_html(self, html: str) -> list[ListingRecord]:
        return self.process(BeautifulSoup(html, "html.parser"))

    def process(self, document: BeautifulSoup) -> list[ListingRecord]:
        logger.info("Extracting listing data...")
        root = document.body or document
        listing_nodes = root.select(LISTING_SELECTOR)
        logger.info(f"Found {len(listing_nodes)} listings")

        records: list[ListingRecord] = []
        positions_by_property: dict[str, list[int]] = {}

        for index, node in enumerate(listing_nodes, 1):
            try:
                record = self.extractor.extract(node, index=index)
                key = record.property_key
            except ReportError as e:
                e.listing_index = index
                raise

            records.append(record)
            positions = positions_by_property.get(key)
            if positions is None:
                positions_by_property[key] = [len(records) - 1]
            else:
                # every listing of this property is a repeat, including earlier ones
                positions.append(len(records) - 1)
                for pos in positions:
                    records[pos].repeated = True

            if self.on_listing:
                self.on_listing(record)

        repeated = sum(1 for r in records if r.repeated)
        logger.info(f"Extracted {len(records)} listings, {repeated} repeated")
        return records
