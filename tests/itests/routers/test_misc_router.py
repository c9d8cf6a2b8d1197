def test_health_production(app):
    actual_response = app.get("/health")

    assert actual_response.status_code == 200
    assert actual_response.json() == {
        "healthy": True,
        "mode": "production",
        "hot_base_url": None,
    }


def test_health_hot(app, write_hot_file):
    write_hot_file("http://localhost:5173\n")

    actual_response = app.get("/health")

    assert actual_response.json() == {
        "healthy": True,
        "mode": "hot",
        "hot_base_url": "http://localhost:5173",
    }
