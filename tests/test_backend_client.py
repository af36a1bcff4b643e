"""Tests for the alerts REST client and the owning manager."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from unittest.mock import MagicMock

from backend.client import AlertsClient
from backend.manager import MiddlewareManager
from models.enums import Operator, TriggerMode
from models.triggers import GroupConditionsInfo, ThresholdCondition, TriggerDescriptor


def _client():
    client = AlertsClient("http://backend/hawkular/alerts", tenant="t1", username="jdoe", password="pw")
    client.client = MagicMock()
    return client


def test_tenant_header_and_auth():
    client = AlertsClient("http://backend/hawkular/alerts", tenant="t1", username="jdoe", password="pw")
    assert client.client.session.headers["Hawkular-Tenant"] == "t1"
    assert client.client.session.auth == ("jdoe", "pw")


def test_create_group_trigger():
    client = _client()
    client.create_group_trigger(TriggerDescriptor(id="MiQ-1", name="n"))
    path = client.client.post.call_args[0][0]
    body = client.client.post.call_args[1]["json"]
    assert path == "/triggers/groups"
    assert body["id"] == "MiQ-1"
    assert body["type"] == "GROUP"


def test_update_group_trigger_quotes_id():
    client = _client()
    client.update_group_trigger(TriggerDescriptor(id="MiQ-region-a/b"))
    assert client.client.put.call_args[0][0] == "/triggers/groups/MiQ-region-a%2Fb"


def test_delete_group_trigger():
    client = _client()
    client.delete_group_trigger("MiQ-42")
    client.client.delete.assert_called_once_with("/triggers/groups/MiQ-42")


def test_set_group_conditions():
    client = _client()
    info = GroupConditionsInfo([ThresholdCondition(data_id="ds", operator=Operator.GT, threshold=5)])
    client.set_group_conditions("MiQ-42", TriggerMode.FIRING, info)
    path = client.client.put.call_args[0][0]
    body = client.client.put.call_args[1]["json"]
    assert path == "/triggers/groups/MiQ-42/conditions/FIRING"
    assert body["conditions"][0]["threshold"] == 5
    assert body["dataIdMemberMap"] == {}


def test_list_triggers_returns_found_ids():
    client = _client()
    client.client.get.return_value = [{"id": "a", "name": "A"}]
    assert client.list_triggers(["a", "b"]) == ["a"]
    client.client.get.assert_called_once_with("/triggers", params={"triggerIds": "a,b"})


def test_list_triggers_empty_response():
    client = _client()
    client.client.get.return_value = None
    assert client.list_triggers(["a"]) == []


def test_manager_id_prefix():
    ems = MiddlewareManager("e1", "r1", alerts_client=None)
    assert ems.miq_id_prefix() == "MiQ-region-r1-ems-e1"
    assert ems.miq_id_prefix("alert-42") == "MiQ-region-r1-ems-e1-alert-42"


def test_manager_from_config():
    config = {
        "backend": {"base_url": "http://backend/hawkular/alerts", "tenant": "t1"},
        "manager": {"guid": "e1", "region_guid": "r1"},
    }
    ems = MiddlewareManager.from_config(config)
    assert isinstance(ems.alerts_client, AlertsClient)
    assert ems.alerts_client.client.base_url == "http://backend/hawkular/alerts"
    assert ems.miq_id_prefix("x") == "MiQ-region-r1-ems-e1-x"
