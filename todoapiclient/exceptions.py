class TodoApiError(Exception):
    """Base class for errors returned by the todo API client.

    Errors are compared by value: same class and same arguments.
    """

    def __eq__(self, other):
        if not isinstance(other, TodoApiError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class NetworkError(TodoApiError):
    """Raised when the server can't be reached or its response can't be parsed."""


class ItemNotFoundError(TodoApiError):
    """Raised when a single requested task does not exist."""


class UnknownApiError(TodoApiError):
    """Raised when the API answers with an unexpected status code."""

    def __init__(self, code: int):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Todo API error (HTTP {self.code})"
