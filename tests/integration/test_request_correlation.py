def test_response_carries_generated_correlation_id(client):
    response = client.get("/health")

    assert response.headers["x-correlation-id"]


def test_supplied_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "corr-42"})

    assert response.headers["x-correlation-id"] == "corr-42"


def test_request_log_carries_redacted_cart_token(client, capsys):
    client.get("/health", headers={"Cart-Token": "tok-abcdef9f2c"})
    out = capsys.readouterr().out

    assert "Request processed" in out
    assert "[REDACTED]...9f2c" in out
    assert "tok-abcdef9f2c" not in out
