"""Metric-name registry: maps alert columns to backend metric ids."""
import logging
import yaml
from pathlib import Path

from alerts.errors import ConfigurationError, MetricLookupError

logger = logging.getLogger("mwalerts.alerts.registry")

DEFAULT_LIVE_METRICS = Path(__file__).parent.parent / "config" / "live_metrics.yaml"


class MetricsRegistry:
    def __init__(self, metrics_by_column=None):
        self._metrics = dict(metrics_by_column or {})

    @classmethod
    def load(cls, path=None, section="middleware_server"):
        """Read `<section>.supported_metrics_by_column` from a live-metrics YAML file."""
        path = Path(path) if path else DEFAULT_LIVE_METRICS
        if not path.exists():
            raise ConfigurationError(f"Live metrics file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        metrics = (data.get(section) or {}).get("supported_metrics_by_column")
        if not metrics:
            raise ConfigurationError(f"No supported_metrics_by_column for '{section}' in {path}")
        logger.info(f"Loaded {len(metrics)} metric mappings from {path}")
        return cls(metrics)

    def data_id(self, name):
        name = getattr(name, "value", name)
        data_id = self._metrics.get(name)
        if data_id is None:
            raise MetricLookupError(name)
        return data_id

    def names(self):
        return sorted(self._metrics)

    def items(self):
        return sorted(self._metrics.items())

    def __contains__(self, name):
        return self._metrics.get(getattr(name, "value", name)) is not None

    def __len__(self):
        return len(self._metrics)
