"""
Tests for RecordStoreClient.

The client is driven by a fake session that records each call and
replies with real ``requests.Response`` objects, so status handling and
JSON decoding go through ``requests`` itself.
"""

import json

import pytest
import requests

from record_store_client import RecordStoreClient


def make_response(status_code, body=None, url="http://api.test"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.reason = "Reason"
    if body is None:
        response._content = b""
    elif isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = body.encode("utf-8")
    return response


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        reply = self.responses.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def products():
    return [{"id": "abc123", "name": "Kettle", "category": "Home", "description": "1.7l", "price": 20, "stock": 2}]


class TestRecordStoreClient:
    def test_list_records(self, products):
        session = FakeSession(make_response(200, products))
        client = RecordStoreClient(base_url="http://api.test/", session=session)
        records, error = client.list_records()
        assert error is None
        assert records == products
        assert session.calls[0]["method"] == "GET"
        assert session.calls[0]["url"] == "http://api.test/api/products"
        assert session.calls[0]["timeout"] == 15

    def test_create_record_sends_json(self, products):
        session = FakeSession(make_response(201, products[0]))
        client = RecordStoreClient(base_url="http://api.test", session=session)
        fields = {k: v for k, v in products[0].items() if k != "id"}
        record, error = client.create_record(fields)
        assert error is None
        assert record["id"] == "abc123"
        assert session.calls[0]["method"] == "POST"
        assert session.calls[0]["json"] == fields

    def test_update_record_uses_patch(self, products):
        session = FakeSession(make_response(200, products[0]))
        client = RecordStoreClient(base_url="http://api.test", collection="users", session=session)
        client.update_record("id/1", {"age": 31})
        assert session.calls[0]["method"] == "PATCH"
        assert session.calls[0]["url"] == "http://api.test/api/users/id%2F1"

    def test_error_message_comes_from_error_field(self):
        session = FakeSession(make_response(404, {"error": "product not found"}))
        client = RecordStoreClient(base_url="http://api.test", session=session)
        record, error = client.get_record("missing")
        assert record is None
        assert error == {"status_code": 404, "message": "product not found"}

    def test_error_without_json_body(self):
        session = FakeSession(make_response(500, "oops"))
        client = RecordStoreClient(base_url="http://api.test", session=session)
        _, error = client.get_stats()
        assert error == {"status_code": 500, "message": "oops"}

    def test_error_body_that_is_not_an_object(self):
        session = FakeSession(make_response(400, ["bad"]), make_response(502, "42"))
        client = RecordStoreClient(base_url="http://api.test", session=session)
        _, error = client.create_record({})
        assert error == {"status_code": 400, "message": "['bad']"}
        _, error = client.get_stats()
        assert error == {"status_code": 502, "message": "42"}

    def test_delete_record(self):
        session = FakeSession(make_response(204), make_response(404, {"error": "product not found"}))
        client = RecordStoreClient(base_url="http://api.test", session=session)
        assert client.delete_record("abc123") == (True, None)
        deleted, error = client.delete_record("abc123")
        assert deleted is False
        assert error["status_code"] == 404

    def test_search_quotes_query(self, products):
        session = FakeSession(make_response(200, products))
        client = RecordStoreClient(base_url="http://api.test", session=session)
        records, error = client.search_records("coffee maker")
        assert error is None
        assert records == products
        assert session.calls[0]["url"] == "http://api.test/api/products/search/coffee%20maker"

    def test_connection_error(self):
        session = FakeSession(requests.ConnectionError("refused"))
        client = RecordStoreClient(base_url="http://api.test", session=session)
        records, error = client.list_records()
        assert records == []
        assert error == {"status_code": None, "message": "refused"}

    def test_against_running_app(self, product_client, phone):
        client = RecordStoreClient(base_url=str(product_client.base_url), session=product_client)
        record, error = client.create_record(phone)
        assert error is None
        assert record["name"] == "Smartphone X"
        stats, _ = client.get_stats()
        assert stats["totalProducts"] == 1
        found, _ = client.search_records("smart")
        assert [item["id"] for item in found] == [record["id"]]
        assert client.delete_record(record["id"]) == (True, None)
