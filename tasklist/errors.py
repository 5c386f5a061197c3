class TaskListError(Exception):
    """Base exception for task list errors."""

    pass


class StoreIOError(TaskListError):
    """Raised when the backing file cannot be opened, read, created or written."""

    pass


class ParseError(TaskListError):
    """Raised when a line of the backing file does not match the task format."""

    def __init__(self, message: str, lineno: int | None = None, line: str | None = None):
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class HomeNotFoundError(TaskListError):
    """Raised when the user's home directory cannot be determined."""

    pass
