"""Case catalogue and audit runs for GuessPy."""

from guesspy.processing.audit import AuditResult, run_audit, write_audit_report
from guesspy.processing.cases import CaseFailure, CaseRunResult, run_cases

__all__ = [
    "AuditResult",
    "CaseFailure",
    "CaseRunResult",
    "run_audit",
    "run_cases",
    "write_audit_report",
]
