"""
devtools_har/utils/exceptions.py

Custom exceptions for devtools-har.

Contains:
- HarAnomalyError: Structural anomaly in HAR input (strict parsing only)
"""


class HarAnomalyError(AssertionError):
    """
    Raised in strict parsing mode when a HAR document deviates from the
    HAR 1.2 shape (missing required field, wrong JSON type, unparseable date).
    In lenient mode the same anomaly is logged and a default is substituted.
    """
