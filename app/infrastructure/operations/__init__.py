"""Operation result types and status enums.

Standardized result types returned by directory clients and the membership
mutator, plus classifiers that turn vendor exceptions into results.
"""

from infrastructure.operations.classifiers import (
    classify_http_error,
    classify_requests_error,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_http_error",
    "classify_requests_error",
]
