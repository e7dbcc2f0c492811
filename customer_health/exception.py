import sys


def error_message_detail(error, error_detail: sys):
    _, _, exc_tb = error_detail.exc_info()
    if exc_tb is None:
        return str(error)
    while exc_tb.tb_next is not None:
        exc_tb = exc_tb.tb_next
    file_name = exc_tb.tb_frame.f_code.co_filename
    return "Error occured in python script name [{0}] line number [{1}] error message [{2}]".format(
        file_name, exc_tb.tb_lineno, str(error)
    )


class CustomException(Exception):
    def __init__(self, error_message, error_detail: sys = None):
        super().__init__(str(error_message))
        if error_detail is None:
            self.error_message = str(error_message)
        else:
            self.error_message = error_message_detail(error_message, error_detail=error_detail)

    def __str__(self):
        return self.error_message


class HealthScoreError(CustomException):
    """Base class for every error raised by the health score engine."""


class InvalidInputError(HealthScoreError):
    """An input record broke its data contract.

    Always attributable to one field; ``field`` names it and ``reason`` states
    the violated constraint. The caller has to fix the input before retrying.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field} {reason}")


class CalculationError(HealthScoreError):
    """Unexpected failure while aggregating factor scores."""

    def __init__(self, error, error_detail: sys = None):
        self.cause = error
        super().__init__(f"Failed to calculate health score: {error}", error_detail)
