"""
Errors raised by the array runners.
"""


class ArrayRunnerError(Exception):
    """Base array runner error"""


class InvalidArgumentError(ArrayRunnerError, ValueError):
    """A behavior value or run argument has the wrong shape"""
