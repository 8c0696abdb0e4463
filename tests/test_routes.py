from app.utils.error_handling import NetworkFailure, NonSuccessStatus

from tests.fakes import AFGHAN_URL, POODLE_URL


def test_health(test_client):
    response = test_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_home_links_to_gallery(test_client):
    response = test_client.get("/")

    assert response.status_code == 200
    assert "Open the Dog Gallery" in response.text
    assert 'href="http://testserver/gallery"' in response.text


def test_static_stylesheet_is_served(test_client):
    response = test_client.get("/static/style.css")
    assert response.status_code == 200


def test_first_gallery_visit_fetches(test_client, fake_client):
    fake_client.outcomes = [AFGHAN_URL]

    response = test_client.get("/gallery")

    assert response.status_code == 200
    assert "Breed: Hound Afghan" in response.text
    assert f'src="{AFGHAN_URL}"' in response.text
    assert "New Dog" in response.text
    assert fake_client.calls == 1


def test_revisiting_gallery_does_not_refetch(test_client, fake_client):
    fake_client.outcomes = [AFGHAN_URL]

    test_client.get("/gallery")
    response = test_client.get("/gallery")

    assert "Breed: Hound Afghan" in response.text
    assert fake_client.calls == 1


def test_fetch_another_redirects_to_gallery(test_client, fake_client):
    fake_client.outcomes = [AFGHAN_URL, POODLE_URL]
    test_client.get("/gallery")

    response = test_client.post("/gallery/fetch")

    assert response.status_code == 200
    assert response.history[0].status_code == 303
    assert "Breed: Poodle Standard" in response.text
    assert fake_client.calls == 2


def test_gallery_shows_failure_message(test_client, fake_client):
    fake_client.outcomes = [NonSuccessStatus("error")]

    response = test_client.get("/gallery")

    assert response.status_code == 200
    assert "Failed to load image." in response.text
    assert "Breed: Unknown" in response.text
    assert "<img" not in response.text


def test_api_gallery_state_and_fetch(test_client, fake_client):
    fake_client.outcomes = [AFGHAN_URL, NetworkFailure("down")]

    initial = test_client.get("/api/v1/gallery").json()
    assert initial == {"breed_name": None, "image_url": None, "loading": True}

    loaded = test_client.post("/api/v1/gallery/fetch")
    assert loaded.status_code == 200
    assert loaded.json() == {"breed_name": "Hound Afghan", "image_url": AFGHAN_URL, "loading": False}

    failed = test_client.post("/api/v1/gallery/fetch")
    assert failed.status_code == 200
    assert failed.json() == {"breed_name": None, "image_url": None, "loading": False}


def test_random_dog(test_client, fake_client):
    fake_client.outcomes = [POODLE_URL]

    response = test_client.get("/api/v1/dogs/random")

    assert response.status_code == 200
    assert response.json() == {"image_url": POODLE_URL, "breed_name": "Poodle Standard"}
    # The stateless endpoint leaves the gallery alone
    assert test_client.get("/api/v1/gallery").json()["loading"] is True


def test_random_dog_upstream_failure_is_bad_gateway(test_client, fake_client):
    fake_client.outcomes = [NonSuccessStatus("error")]

    response = test_client.get("/api/v1/dogs/random")

    assert response.status_code == 502
    assert "Dog API" in response.json()["message"]


def test_random_dog_malformed_url_is_bad_gateway(test_client, fake_client):
    fake_client.outcomes = ["not-a-url"]

    assert test_client.get("/api/v1/dogs/random").status_code == 502


def test_breed_label(test_client):
    url = "https://images.dog.ceo/breeds/english-cocker-spaniel/n789.jpg"

    response = test_client.get("/api/v1/breeds/label", params={"url": url})

    assert response.status_code == 200
    assert response.json() == {"url": url, "breed_name": "English Cocker-spaniel"}


def test_breed_label_unknown(test_client):
    response = test_client.get("/api/v1/breeds/label", params={"url": "garbage"})
    assert response.json()["breed_name"] == "unknown"


def test_missing_query_parameter_is_bad_request(test_client):
    response = test_client.get("/api/v1/breeds/label")
    assert response.status_code == 400


def test_openapi_has_no_422_responses(test_client):
    schema = test_client.get("/openapi.json").json()
    responses = schema["paths"]["/api/v1/breeds/label"]["get"]["responses"]
    assert "422" not in responses
    assert "400" in responses


def test_openapi_has_no_vendor_markers(test_client):
    operation = test_client.get("/openapi.json").json()["paths"]["/api/v1/breeds/label"]["get"]
    assert not any(key.startswith("x-") for key in operation)
