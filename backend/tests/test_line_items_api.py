"""API tests for subscription line items and subscription events."""

from uuid import uuid4

import pytest
from starlette.testclient import TestClient

from subline.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _payload(subscribable, **overrides):
    payload = {
        "subscribable_id": str(subscribable.id),
        "quantity": 2,
        "interval_length": 1,
        "interval_units": "month",
    }
    payload.update(overrides)
    return payload


def test_health_endpoint(client: TestClient):
    """GET / returns 200 with app info."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["app"] == "subline"
    assert data["status"] == "running"


class TestCreateLineItem:
    def test_create_includes_preview(self, client, subscribable):
        response = client.post("/v1/line_items/", json=_payload(subscribable))
        assert response.status_code == 201
        data = response.json()
        assert data["quantity"] == 2
        assert data["subscribable_id"] == str(subscribable.id)
        assert data["dummy_line_item"]["amount_cents"] == 3000
        assert data["dummy_line_item"]["order"]["currency"] == "USD"

    def test_create_validation_error(self, client, subscribable):
        response = client.post("/v1/line_items/", json=_payload(subscribable, quantity=0))
        assert response.status_code == 422
        assert response.json()["detail"] == {"quantity": ["must be greater than 0"]}

    def test_create_missing_subscribable(self, client, subscribable):
        payload = _payload(subscribable)
        del payload["subscribable_id"]
        response = client.post("/v1/line_items/", json=payload)
        assert response.status_code == 422
        assert "subscribable_id" in response.json()["detail"]

    def test_create_unknown_subscription(self, client, subscribable):
        response = client.post(
            "/v1/line_items/", json=_payload(subscribable, subscription_id=str(uuid4()))
        )
        assert response.status_code == 404

    def test_create_invalid_interval_units(self, client, subscribable):
        response = client.post(
            "/v1/line_items/", json=_payload(subscribable, interval_units="decade")
        )
        assert response.status_code == 422

    def test_create_from_order_line_item(self, client, source_order_line, subscription):
        response = client.post(
            "/v1/line_items/from_order_line_item",
            json={
                "order_line_item_id": str(source_order_line.id),
                "subscription_id": str(subscription.id),
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["source_line_item_id"] == str(source_order_line.id)
        assert data["quantity"] == 3

    def test_create_from_unknown_order_line_item(self, client):
        response = client.post(
            "/v1/line_items/from_order_line_item",
            json={"order_line_item_id": str(uuid4()), "interval_length": 1},
        )
        assert response.status_code == 404


class TestReadLineItems:
    def test_list_with_total_count(self, client, subscribable, subscription):
        client.post("/v1/line_items/", json=_payload(subscribable))
        client.post(
            "/v1/line_items/", json=_payload(subscribable, subscription_id=str(subscription.id))
        )

        response = client.get("/v1/line_items/")
        assert response.status_code == 200
        assert response.headers["X-Total-Count"] == "2"
        assert len(response.json()) == 2

        response = client.get("/v1/line_items/", params={"subscription_id": str(subscription.id)})
        assert response.headers["X-Total-Count"] == "1"
        assert response.json()[0]["subscription_id"] == str(subscription.id)

    def test_list_with_non_column_order_by(self, client, subscribable):
        client.post("/v1/line_items/", json=_payload(subscribable))
        response = client.get("/v1/line_items/", params={"order_by": "interval:asc"})
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_get(self, client, subscribable):
        created = client.post("/v1/line_items/", json=_payload(subscribable)).json()
        response = client.get(f"/v1/line_items/{created['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_get_not_found(self, client):
        assert client.get(f"/v1/line_items/{uuid4()}").status_code == 404

    def test_preview(self, client, subscribable):
        created = client.post("/v1/line_items/", json=_payload(subscribable)).json()
        response = client.get(f"/v1/line_items/{created['id']}/preview")
        assert response.status_code == 200
        assert response.json()["quantity"] == 2
        assert response.json()["interval_length"] == 1
        assert response.json()["interval_units"] == "month"

    def test_preview_unpurchasable_is_null(self, client, db_session, subscribable):
        created = client.post("/v1/line_items/", json=_payload(subscribable)).json()
        subscribable.stock_on_hand = 0
        db_session.commit()

        response = client.get(f"/v1/line_items/{created['id']}/preview")
        assert response.status_code == 200
        assert response.json() is None
        assert client.get(f"/v1/line_items/{created['id']}").json()["dummy_line_item"] is None


class TestUpdateDeleteLineItem:
    def test_update(self, client, subscribable):
        created = client.post("/v1/line_items/", json=_payload(subscribable)).json()
        response = client.put(f"/v1/line_items/{created['id']}", json={"installments": 4})
        assert response.status_code == 200
        assert response.json()["installments"] == 4

    def test_update_validation_error(self, client, subscribable):
        created = client.post("/v1/line_items/", json=_payload(subscribable)).json()
        response = client.put(f"/v1/line_items/{created['id']}", json={"interval_length": 0})
        assert response.status_code == 422
        assert response.json()["detail"] == {"interval_length": ["must be greater than 0"]}

    def test_update_not_found(self, client):
        response = client.put(f"/v1/line_items/{uuid4()}", json={"quantity": 1})
        assert response.status_code == 404

    def test_delete(self, client, subscribable):
        created = client.post("/v1/line_items/", json=_payload(subscribable)).json()
        assert client.delete(f"/v1/line_items/{created['id']}").status_code == 204
        assert client.get(f"/v1/line_items/{created['id']}").status_code == 404

    def test_delete_not_found(self, client):
        assert client.delete(f"/v1/line_items/{uuid4()}").status_code == 404


class TestSubscriptionEvents:
    def test_event_trail(self, client, subscribable, subscription):
        created = client.post(
            "/v1/line_items/", json=_payload(subscribable, subscription_id=str(subscription.id))
        ).json()
        client.put(f"/v1/line_items/{created['id']}", json={"quantity": 5})
        client.delete(f"/v1/line_items/{created['id']}")

        response = client.get(f"/v1/subscriptions/{subscription.id}/events")
        assert response.status_code == 200
        events = response.json()
        assert [e["event_type"] for e in events] == [
            "line_item_created",
            "line_item_updated",
            "line_item_destroyed",
        ]
        for event in events:
            assert "dummy_line_item" not in event["details"]
            assert "interval_length" not in event["details"]

    def test_filter_by_event_type(self, client, subscribable, subscription):
        created = client.post(
            "/v1/line_items/", json=_payload(subscribable, subscription_id=str(subscription.id))
        ).json()
        client.put(f"/v1/line_items/{created['id']}", json={"quantity": 5})

        response = client.get(
            f"/v1/subscriptions/{subscription.id}/events",
            params={"event_type": "line_item_updated"},
        )
        assert [e["event_type"] for e in response.json()] == ["line_item_updated"]

    def test_unknown_subscription(self, client):
        assert client.get(f"/v1/subscriptions/{uuid4()}/events").status_code == 404
