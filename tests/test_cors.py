def test_preflight_allowed_origin(client):
    response = client.options(
        "/sensor",
        headers={
            "Origin": "http://localhost:4321",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "authorization,content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:4321"
    allowed = response.headers["access-control-allow-methods"]
    for method in ("POST", "GET", "DELETE", "OPTIONS"):
        assert method in allowed


def test_preflight_disallowed_origin(client):
    response = client.options(
        "/sensor",
        headers={
            "Origin": "https://evil.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_preflight_disallowed_method(client):
    response = client.options(
        "/measures",
        headers={
            "Origin": "https://sjm00010.github.io",
            "Access-Control-Request-Method": "PUT",
        },
    )

    assert response.status_code == 400


def test_simple_request_gets_cors_header(client):
    response = client.get("/read/1/hours", headers={"Origin": "https://sjm00010.github.io"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://sjm00010.github.io"
