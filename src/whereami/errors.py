"""Error types for whereami."""


class QueryError(RuntimeError):
    """A system information query failed."""

    def __init__(self, query: str, cause: BaseException | None = None) -> None:
        self.query = query
        self.cause = cause
        message = f"Failed to query {query}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
