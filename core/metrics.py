"""
Prometheus metrics for the brand directory service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Authorization metrics
authorization_decisions_total = Counter(
    "authorization_decisions_total",
    "Authorization kernel decisions",
    ["action", "outcome", "reason"],
)

# Account metrics
signups_total = Counter(
    "signups_total",
    "Completed sign-ups",
    ["kind"],
)

signup_compensations_total = Counter(
    "signup_compensations_total",
    "Orphan brands removed after a failed principal write",
)

signins_total = Counter(
    "signins_total",
    "Sign-in attempts",
    ["outcome"],
)

# Lifecycle metrics
brand_status_transitions_total = Counter(
    "brand_status_transitions_total",
    "Brand status transitions",
    ["from_status", "to_status", "outcome"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
