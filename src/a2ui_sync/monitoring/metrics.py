"""
Metrics Collection
Prometheus metrics for the synchronization engine
"""

from prometheus_client import Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for message processing,
    data model writes, template compilation and action dispatch.
    """

    def __init__(self) -> None:
        # Inbound protocol messages
        self.messages_total = Counter(
            "a2ui_messages_total",
            "Total number of protocol messages processed",
            ["type", "status"],
        )
        self.message_duration = Histogram(
            "a2ui_message_duration_seconds",
            "Protocol message processing duration in seconds",
            ["type"],
            buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
        )

        # Data model
        self.data_writes_total = Counter(
            "a2ui_data_writes_total",
            "Total number of data model writes",
            ["source"],
        )

        # Templates
        self.template_cache_total = Counter(
            "a2ui_template_cache_total",
            "Compiled template cache lookups",
            ["result"],
        )

        # Actions
        self.actions_total = Counter(
            "a2ui_actions_total",
            "Total number of dispatched actions",
            ["status"],
        )
        self.action_duration = Histogram(
            "a2ui_action_duration_seconds",
            "Action context resolution and delivery duration in seconds",
            buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
        )

        # Surfaces
        self.surfaces_active = Gauge(
            "a2ui_surfaces_active",
            "Number of live surfaces",
        )

        # Errors
        self.errors_total = Counter(
            "a2ui_errors_total",
            "Total number of errors",
            ["error_type", "component"],
        )

    def record_message(self, msg_type: str, status: str, duration: float) -> None:
        """Record a processed protocol message."""
        self.messages_total.labels(type=msg_type, status=status).inc()
        self.message_duration.labels(type=msg_type).observe(duration)

    def record_data_write(self, source: str, count: int = 1) -> None:
        """Record data model writes ("set" or "update")."""
        self.data_writes_total.labels(source=source).inc(count)

    def record_template_cache(self, result: str) -> None:
        """Record a template cache hit or miss."""
        self.template_cache_total.labels(result=result).inc()

    def record_action(self, status: str, duration: float) -> None:
        """Record an action dispatch."""
        self.actions_total.labels(status=status).inc()
        self.action_duration.observe(duration)

    def surface_created(self) -> None:
        self.surfaces_active.inc()

    def surface_deleted(self) -> None:
        self.surfaces_active.dec()

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type, component=component).inc()

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
