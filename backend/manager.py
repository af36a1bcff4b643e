"""Owning middleware manager: id namespacing and access to the alerts client."""
from backend.client import AlertsClient

ID_PREFIX = "MiQ"


class MiddlewareManager:
    def __init__(self, guid, region_guid, alerts_client):
        self.guid = guid
        self.region_guid = region_guid
        self.alerts_client = alerts_client

    @classmethod
    def from_config(cls, config):
        backend = config["backend"]
        manager = config["manager"]
        client = AlertsClient(
            base_url=backend["base_url"],
            tenant=backend.get("tenant", "hawkular"),
            username=backend.get("username"),
            password=backend.get("password"),
            timeout=backend.get("timeout", 30),
            max_retries=backend.get("max_retries", 3),
        )
        return cls(manager["guid"], manager["region_guid"], client)

    def miq_id_prefix(self, id_to_prefix=None):
        prefix = f"{ID_PREFIX}-region-{self.region_guid}-ems-{self.guid}"
        if id_to_prefix is None:
            return prefix
        return f"{prefix}-{id_to_prefix}"
