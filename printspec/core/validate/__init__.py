from .report import BatchSummary, CheckResult, RecordOutcome
from .rules import RULES, validate_record

__all__ = ["BatchSummary", "CheckResult", "RULES", "RecordOutcome", "validate_record"]
