"""Collects validation issues so a form can show every problem at once."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """A single problem found in user input.

    Attributes:
        severity: The severity level of the issue
        field: Form field the issue belongs to (e.g. ``items[0].description``)
        message: Human-readable description shown to the user
        value: The offending value
        context: Optional extra information (e.g. booking id)
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any = None
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        context_str = ""
        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            context_str = f" ({', '.join(context_parts)})"
        return f"[{self.severity.name}] {self.field}: {self.message}{context_str}"


class ValidationReport:
    """Accumulates errors, warnings and info messages for one form.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error("comment", "Please write a comment.", "")
        >>> report.add_warning("total", "Invoice total is zero.", 0)
        >>> report.is_valid()
        False
        >>> report.first_error_message()
        'Please write a comment.'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    def _with_severity(self, severity: ValidationSeverity) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]

    @property
    def error_count(self) -> int:
        return len(self._with_severity(ValidationSeverity.ERROR))

    @property
    def warning_count(self) -> int:
        return len(self._with_severity(ValidationSeverity.WARNING))

    @property
    def info_count(self) -> int:
        return len(self._with_severity(ValidationSeverity.INFO))

    def is_valid(self) -> bool:
        """True when no errors are present; warnings do not count."""
        return self.error_count == 0

    def has_errors(self) -> bool:
        return self.error_count > 0

    def add_issue(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.issues.append(
            ValidationIssue(
                severity=severity,
                field=field,
                message=message,
                value=value,
                context=context,
            )
        )

    def add_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an error; the report becomes invalid."""
        self.add_issue(ValidationSeverity.ERROR, field, message, value, context)

    def add_warning(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add a warning; the report stays valid."""
        self.add_issue(ValidationSeverity.WARNING, field, message, value, context)

    def add_info(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.add_issue(ValidationSeverity.INFO, field, message, value, context)

    def get_errors(self) -> List[ValidationIssue]:
        return self._with_severity(ValidationSeverity.ERROR)

    def get_warnings(self) -> List[ValidationIssue]:
        return self._with_severity(ValidationSeverity.WARNING)

    def first_error_message(self) -> Optional[str]:
        """Message of the first error, as shown in a single toast."""
        errors = self.get_errors()
        return errors[0].message if errors else None

    def merge(self, other: "ValidationReport") -> None:
        """Append the issues of another report to this one."""
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Counts of errors, warnings and info messages.

        Returns:
            e.g. ``"2 error(s), 1 warning(s)"`` or ``"No issues found"``
        """
        parts = []
        if self.error_count:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count:
            parts.append(f"{self.warning_count} warning(s)")
        if self.info_count:
            parts.append(f"{self.info_count} info message(s)")
        return ", ".join(parts) if parts else "No issues found"

    def format(self) -> str:
        """Format all issues grouped by severity for terminal output."""
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]
        for severity, title in (
            (ValidationSeverity.ERROR, "ERRORS"),
            (ValidationSeverity.WARNING, "WARNINGS"),
            (ValidationSeverity.INFO, "INFO"),
        ):
            issues = self._with_severity(severity)
            if issues:
                lines.append(f"\n{title}:")
                lines.extend(f"  - {issue}" for issue in issues)
        return "\n".join(lines)
