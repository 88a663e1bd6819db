"""HTTP middleware: request size limit and request ID / access log.

Applied in main app; order matters (last added = outermost).
"""

from app.middleware.request_id import RequestIDMiddleware
from app.middleware.request_size_limit import RequestSizeLimitMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
]
