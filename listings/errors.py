class ListingsError(Exception):
    """Base for failures that end a run with exit code 1."""

    message = "Error"

    def __init__(self, detail=None):
        super().__init__(detail or self.message)

    def user_message(self) -> str:
        return str(self)


class BadArguments(ListingsError):
    pass


class UsageError(ListingsError):
    message = "Please, specify input file"


class InputNotFound(ListingsError):
    message = "Cannot find input file"


class InvalidJSON(ListingsError):
    message = "Invalid JSON in input file"
