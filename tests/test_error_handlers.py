def test_unknown_route_returns_json_404(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.get_json() == {"status": "error", "code": 404, "message": "Not Found"}


def test_wrong_method_returns_json_405(client):
    response = client.get("/api/otp/verify/123456")

    assert response.status_code == 405
    assert response.get_json()["code"] == 405


def test_unauthorized_payload(client):
    response = client.post("/api/otp/verify/123456")

    assert response.status_code == 401
    assert response.get_json() == {
        "status": "unauthorized",
        "code": 401,
        "message": "Authentication required.",
    }
