"""Alerting backend client and owning resource manager."""
from backend.client import AlertsClient
from backend.manager import MiddlewareManager
