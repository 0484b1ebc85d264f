from prometheus_client import Counter, Histogram

METRIC_PREFIX = "snowhook_"

webhook_requests_total = Counter(
    f"{METRIC_PREFIX}webhook_requests_total",
    "Total number of webhook requests by response status code",
    labelnames=["status_code"],
)
alerts_received_total = Counter(
    f"{METRIC_PREFIX}alerts_received_total",
    "Total number of alerts received in webhook batches",
)
incidents_created_total = Counter(
    f"{METRIC_PREFIX}incidents_created_total",
    "Total number of incidents created in ServiceNow",
)
incident_errors_total = Counter(
    f"{METRIC_PREFIX}incident_errors_total",
    "Total number of failed incident creation calls",
)
batch_processing_seconds = Histogram(
    f"{METRIC_PREFIX}batch_processing_seconds",
    "Time spent turning a webhook batch into incidents",
)
