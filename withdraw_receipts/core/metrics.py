"""
Prometheus metrics
"""

from prometheus_client import Counter, Gauge, Histogram

REQUEST_COUNT = Counter('http_requests_total', 'Total HTTP requests', ['method', 'endpoint', 'status'])
REQUEST_DURATION = Histogram('http_request_duration_seconds', 'HTTP request duration', ['method', 'endpoint'])
ACTIVE_CONNECTIONS = Gauge('http_active_connections', 'Number of active HTTP connections')
WITHDRAW_REQUEST_COUNT = Counter('withdraw_requests_total', 'Total withdrawal submissions', ['status'])
