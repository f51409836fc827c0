# File: report_api/core/errors.py

"""
Exceptions raised by the report layer.

There is only one failure kind: the store could not answer a report query.
Reports take no caller input, so there is nothing to validate.
"""


class ReportError(Exception):
    """Base class for report layer errors."""


class StoreQueryFailed(ReportError):
    """
    A report query failed inside the relational store.

    Covers lost connections, statement errors and type/constraint errors
    raised by the database driver. The underlying exception is kept on
    ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, report: str, cause: BaseException):
        self.report = report
        self.cause = cause
        super().__init__(f"{report} query failed: {cause}")

    @property
    def message(self) -> str:
        return str(self.cause)
