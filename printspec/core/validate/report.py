"""Validation result types for print-specification checks."""


from dataclasses import dataclass, field


@dataclass(frozen=True)
class CheckResult:
    name: str
    passed: bool
    message: str


@dataclass(frozen=True)
class RecordOutcome:
    """All check results for one source document.

    ``label`` identifies the document in reports (ISBN, falling back to the
    filename); ``isbn``, ``title`` and ``filename`` are kept for display.
    """

    label: str
    checks: tuple[CheckResult, ...] = field(default_factory=tuple)
    isbn: str = ""
    title: str = ""
    filename: str = ""

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def passed_count(self) -> int:
        return sum(1 for check in self.checks if check.passed)

    @property
    def failed_count(self) -> int:
        return len(self.checks) - self.passed_count

    @property
    def failed_checks(self) -> list[CheckResult]:
        return [check for check in self.checks if not check.passed]

    @property
    def status(self) -> str:
        return "PASSED" if self.passed else "FAILED"


@dataclass(frozen=True)
class BatchSummary:
    total: int
    passed: int
    failed: int


__all__ = ["BatchSummary", "CheckResult", "RecordOutcome"]
