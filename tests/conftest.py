"""Shared test fixtures."""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from alerts.registry import MetricsRegistry


class FakeAlertsClient:
    """Records every call made against the alerting backend."""
    def __init__(self, existing=None):
        self.existing = set(existing or [])
        self.calls = []

    def create_group_trigger(self, trigger):
        self.calls.append(("create_group_trigger", trigger))
        self.existing.add(trigger.id)

    def update_group_trigger(self, trigger):
        self.calls.append(("update_group_trigger", trigger))

    def delete_group_trigger(self, trigger_id):
        self.calls.append(("delete_group_trigger", trigger_id))
        self.existing.discard(trigger_id)

    def set_group_conditions(self, trigger_id, trigger_mode, conditions):
        self.calls.append(("set_group_conditions", trigger_id, trigger_mode, conditions))

    def list_triggers(self, ids):
        self.calls.append(("list_triggers", list(ids)))
        return [i for i in ids if i in self.existing]

    def call_names(self):
        return [c[0] for c in self.calls]


class FakeManager:
    """Owning manager with a fixed id namespace."""
    def __init__(self, alerts_client, prefix="MiQ-region-r1-ems-e1"):
        self.alerts_client = alerts_client
        self.prefix = prefix

    def miq_id_prefix(self, id_to_prefix=None):
        return self.prefix if id_to_prefix is None else f"{self.prefix}-{id_to_prefix}"


@pytest.fixture
def registry():
    """Registry loaded from the shipped live metrics file."""
    return MetricsRegistry.load()


@pytest.fixture
def alerts_client():
    return FakeAlertsClient()


@pytest.fixture
def ems(alerts_client):
    return FakeManager(alerts_client)


@pytest.fixture
def make_alert():
    return _make_alert


def _make_alert(alert_id=42, eval_method="mw_ds_timed_out", options=None, description="DS timed out",
               enabled=True, based_on="MiddlewareServer"):
    """Alert record shaped like the store hands it over."""
    return {
        "id": alert_id,
        "description": description,
        "enabled": enabled,
        "based_on": based_on,
        "conditions": {
            "eval_method": eval_method,
            "options": options if options is not None else {"mw_operator": ">", "value_mw_threshold": "5"},
        },
    }
