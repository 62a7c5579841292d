"""Exception types raised by the core engine."""


class PrintspecError(Exception):
    """Base class for all printspec errors."""


class MalformedInputError(PrintspecError, ValueError):
    """A source document could not be turned into a record.

    ``check_name`` is the label the batch uses for the synthetic failing check
    (``"XML Format"``, ``"XML Structure"``, ``"File Error"``, ...).
    """

    def __init__(self, check_name: str, message: str) -> None:
        super().__init__(message)
        self.check_name = check_name
        self.message = message


class ConfigurationInvariantViolation(PrintspecError):
    """The rule catalog is internally inconsistent."""


class UnknownPaperError(ConfigurationInvariantViolation, KeyError):
    def __init__(self, paper: str) -> None:
        super().__init__(paper)
        self.paper = paper

    def __str__(self) -> str:
        return f"No compatibility rules configured for paper: {self.paper!r}"


class CatalogIntegrityError(ConfigurationInvariantViolation):
    pass


__all__ = [
    "CatalogIntegrityError",
    "ConfigurationInvariantViolation",
    "MalformedInputError",
    "PrintspecError",
    "UnknownPaperError",
]
