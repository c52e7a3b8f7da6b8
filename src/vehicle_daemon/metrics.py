"""
Defines Prometheus metrics for monitoring the options2api application.

This module centralizes the definition of all Counter, Gauge, and Histogram
metrics used to track option decoding, vehicle commands, API requests, and
the vehicle registry.
"""

from prometheus_client import Counter, Gauge, Histogram

OPTION_DECODES = Counter("options2api_option_decodes_total", "Total option strings decoded")
UNKNOWN_CODES = Counter(
    "options2api_unknown_codes_total", "Option codes not recognised by any query"
)
MALFORMED_TOKENS = Counter(
    "options2api_malformed_tokens_total", "Option tokens skipped as malformed"
)
VEHICLE_COUNT = Gauge("options2api_vehicle_count", "Number of registered vehicles")
COMMANDS_SENT = Counter(
    "options2api_commands_sent_total", "Vehicle commands sent", ["command", "result"]
)
COMMANDS_REJECTED = Counter(
    "options2api_commands_rejected_total",
    "Vehicle commands rejected locally before sending",
    ["command"],
)
COMMAND_LATENCY = Histogram(
    "options2api_command_latency_seconds", "Time spent sending a vehicle command"
)
HTTP_REQUESTS = Counter(
    "options2api_http_requests_total", "Total HTTP requests", ["method", "endpoint", "status_code"]
)
HTTP_LATENCY = Histogram(
    "options2api_http_request_latency_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
)
