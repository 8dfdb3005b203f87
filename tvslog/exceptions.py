"""Exception definitions for session log parsing.

Row-level errors are recoverable: the reader reports them and moves on
to the next row. RowSourceError is fatal and aborts the whole run.
"""


class TVSLogError(Exception):
    """Base exception for session log parsing."""

    pass


class RowSourceError(TVSLogError):
    """The underlying row source could not produce a row."""

    pass


class RowError(TVSLogError):
    """A single row could not be turned into an action.

    Attributes:
        row: The raw fields of the offending row.
        row_number: 1-based line number in the log, set by the reader.
    """

    def __init__(self, message: str, row: list[str] | None = None) -> None:
        super().__init__(message)
        self.row = list(row) if row is not None else []
        self.row_number: int | None = None

    @property
    def raw(self) -> str:
        """The row joined back into a comma separated line."""
        return ",".join(self.row)


class UnexpectedRecordShapeError(RowError):
    """Row did not have the expected number of fields.

    Attributes:
        field_count: Number of fields actually present.
    """

    def __init__(self, field_count: int, row: list[str] | None = None) -> None:
        super().__init__(f"unexpected record len {field_count}", row)
        self.field_count = field_count


class MalformedFieldError(RowError):
    """A field required by an action was empty or could not be converted.

    Attributes:
        field: Column name of the bad field.
        value: The raw text of the field.
    """

    def __init__(
        self,
        field: str,
        value: str,
        reason: str,
        row: list[str] | None = None,
    ) -> None:
        super().__init__(f"malformed {field} field {value!r}: {reason}", row)
        self.field = field
        self.value = value


class UnrecognizedActionError(RowError):
    """Description matched neither the ignore list nor any action pattern.

    Attributes:
        description: The unmatched description text.
    """

    def __init__(self, description: str, row: list[str] | None = None) -> None:
        super().__init__(f"unrecognized action {description!r}", row)
        self.description = description
