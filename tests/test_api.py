import pytest

from passcraft.web.api import app

@pytest.fixture
def client():
    app.config["TESTING"] = True
    return app.test_client()

def test_generate(client):
    resp = client.post("/generate", json={"length": 16, "symbols": True})
    assert resp.status_code == 200
    data = resp.get_json()
    assert len(data["password"]) == 16
    assert 0.0 <= data["score"] <= 100.0
    assert data["label"]
    assert data["crack_times"]

def test_generate_bad_spec(client):
    resp = client.post("/generate", json={"length": 2, "symbols": True})
    assert resp.status_code == 400
    assert "error" in resp.get_json()

def test_pin(client):
    pin = client.post("/pin", json={"length": 4}).get_json()["pin"]
    assert len(pin) == 4 and pin.isdigit()

def test_words(client):
    phrase = client.post("/words", json={"length": 3, "separator": " "}).get_json()["password"]
    assert len(phrase.split(" ")) == 3

def test_analyze(client):
    data = client.post("/analyze", json={"password": "aaaa"}).get_json()
    assert data["consecutive_count"] == 3
    assert data["lowercase_letters_count"] == 4
    assert "crack_times" in data

def test_score_and_common(client):
    assert client.post("/score", json={"password": "password"}).get_json()["score"] == 0.0
    assert client.post("/common", json={"password": "password"}).get_json()["is_common"] is True

def test_crack_times(client):
    data = client.post("/crack-times", json={"password": "password"}).get_json()
    assert data["crack_times"] == "less than a second"

def test_length_upper_bounds(client):
    assert client.post("/generate", json={"length": 2_000_000}).status_code == 400
    assert client.post("/generate", json={"length": 129}).status_code == 400
    assert client.post("/generate", json={"length": 128}).status_code == 200
    assert client.post("/pin", json={"length": 13}).status_code == 400
    assert client.post("/words", json={"length": 21}).status_code == 400

def test_wrong_types_are_bad_requests(client):
    for body in ({"length": None}, {"length": "6"}, {"length": 6.5}, {"length": True}):
        resp = client.post("/pin", json=body)
        assert resp.status_code == 400
        assert "error" in resp.get_json()
    assert client.post("/analyze", json={"password": 123}).status_code == 400
    assert client.post("/words", json={"separator": None}).status_code == 400

def test_string_booleans_rejected(client):
    resp = client.post("/generate", json={"symbols": "false"})
    assert resp.status_code == 400
    resp = client.post("/words", json={"uppercase": "true"})
    assert resp.status_code == 400

def test_false_flag_is_honoured(client):
    pw = client.post("/generate", json={"length": 40, "uppercase": False}).get_json()["password"]
    assert not any(c.isupper() for c in pw)
