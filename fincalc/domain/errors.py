"""Domain error types."""


class MissingClientError(LookupError):
    """Raised when no client record is available to aggregate."""

    def __init__(self, client_id: str | None) -> None:
        self.client_id = client_id
        super().__init__(f"No client record available for id={client_id}")


class ReportPayloadError(ValueError):
    """Raised when a summary cannot be handed to the report generator."""

    def __init__(self, field_name: str, value) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Report payload field '{field_name}' is not a finite number: "
            f"{value!r}"
        )


__all__ = ["MissingClientError", "ReportPayloadError"]
