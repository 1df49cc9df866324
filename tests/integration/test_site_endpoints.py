"""
Integration tests for the withdraw page, static files, event log and metrics
"""

import logging
import uuid

from withdraw_receipts.core.metrics import REQUEST_COUNT, REQUEST_DURATION


def test_index_serves_withdraw_form(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "withdraw-form" in response.text


def test_static_assets(client):
    response = client.get("/static/withdraw.css")
    assert response.status_code == 200


def test_log_event(client, caplog):
    caplog.set_level(logging.INFO)
    response = client.post("/api/log", json={"event": "page_view", "data": {"page": "withdraw"}})
    assert response.status_code == 200
    assert response.json() == {"status": "logged"}
    assert "[LOG] page_view" in caplog.text


def test_log_event_defaults(client, caplog):
    caplog.set_level(logging.INFO)
    response = client.post("/api/log")
    assert response.json() == {"status": "logged"}
    assert "[LOG] unknown" in caplog.text


def test_metrics_endpoint(client, valid_payload):
    client.post("/api/withdraw-request", json=valid_payload)
    client.post("/api/withdraw-request", json={})
    response = client.get("/metrics")
    assert response.status_code == 200
    assert 'withdraw_requests_total{status="accepted"}' in response.text
    assert 'withdraw_requests_total{status="rejected"}' in response.text
    assert "http_requests_total" in response.text


def _label_sets(metric):
    return {
        tuple(sorted(sample.labels.items()))
        for family in metric.collect()
        for sample in family.samples
    }


def test_request_metrics_labelled_by_route_template(client, valid_payload):
    receipt_id = client.post("/api/withdraw-request", json=valid_payload).json()["receiptId"]

    def hit_paths():
        client.get(f"/api/receipt/{uuid.uuid4()}")
        client.get(f"/receipt/{uuid.uuid4()}")
        client.get(f"/no-such-page/{uuid.uuid4()}")

    hit_paths()
    client.get(f"/api/receipt/{receipt_id}")
    counts_before = len(_label_sets(REQUEST_COUNT)), len(_label_sets(REQUEST_DURATION))

    for _ in range(25):
        hit_paths()

    assert (len(_label_sets(REQUEST_COUNT)), len(_label_sets(REQUEST_DURATION))) == counts_before

    endpoints = {dict(labels)["endpoint"] for labels in _label_sets(REQUEST_COUNT)}
    assert "/api/receipt/{receipt_id}" in endpoints
    assert "/receipt/{receipt_id}" in endpoints
    assert "unmatched" in endpoints
    assert not any(receipt_id in endpoint for endpoint in endpoints)
