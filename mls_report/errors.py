class ReportError(Exception):
    """Base class for failures that abort processing of a report."""

    def __init__(self, message: str, listing_index: int | None = None):
        super().__init__(message)
        self.message = message
        self.listing_index = listing_index

    def __str__(self) -> str:
        if self.listing_index is None:
            return self.message
        return f"Listing No. {self.listing_index}: {self.message}"


class MissingRequiredFieldError(ReportError):
    def __init__(self, field: str, listing_index: int | None = None):
        super().__init__(f"Could not extract {field}", listing_index)
        self.field = field


class FieldFormatError(ReportError):
    def __init__(self, field: str, value: str, listing_index: int | None = None):
        super().__init__(f"Invalid {field} value: {value!r}", listing_index)
        self.field = field
        self.value = value


class UnitSizeConversionError(ReportError):
    def __init__(self, size: float, listing_index: int | None = None):
        super().__init__(
            f"Unable to convert room dimensions to unit size ({size:.1f} sqft.)",
            listing_index,
        )
        self.size = size


class MalformedValueError(ReportError):
    def __init__(self, value: str, listing_index: int | None = None):
        super().__init__(f"Unexpected quotation marks in value: {value}", listing_index)
        self.value = value
