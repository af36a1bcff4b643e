"""Hawkular Alerts REST client for group triggers and their conditions."""
import logging
from urllib.parse import quote

from utils.http_client import HTTPClient

logger = logging.getLogger("mwalerts.backend.client")

TENANT_HEADER = "Hawkular-Tenant"


def _payload(obj):
    return obj.to_dict() if hasattr(obj, "to_dict") else obj


def _segment(value):
    return quote(str(getattr(value, "value", value)), safe="")


class AlertsClient:
    def __init__(self, base_url, tenant="hawkular", username=None, password=None,
                 timeout=30, max_retries=3):
        auth = (username, password) if username else None
        self.client = HTTPClient(
            base_url=base_url,
            headers={TENANT_HEADER: tenant},
            auth=auth,
            timeout=timeout,
            max_retries=max_retries,
            source="hawkular-alerts",
        )

    def create_group_trigger(self, trigger):
        return self.client.post("/triggers/groups", json=_payload(trigger))

    def update_group_trigger(self, trigger):
        body = _payload(trigger)
        return self.client.put(f"/triggers/groups/{_segment(body['id'])}", json=body)

    def delete_group_trigger(self, trigger_id):
        return self.client.delete(f"/triggers/groups/{_segment(trigger_id)}")

    def set_group_conditions(self, trigger_id, trigger_mode, conditions_info):
        return self.client.put(
            f"/triggers/groups/{_segment(trigger_id)}/conditions/{_segment(trigger_mode)}",
            json=_payload(conditions_info),
        )

    def list_triggers(self, ids=None):
        """Return the ids of the requested triggers that exist on the backend."""
        params = {}
        if ids:
            params["triggerIds"] = ",".join(ids)
        data = self.client.get("/triggers", params=params or None) or []
        found = [t["id"] for t in data if isinstance(t, dict) and "id" in t]
        logger.debug(f"list_triggers({ids}) → {found}")
        return found

    def close(self):
        self.client.close()
