import pytest
from sqlalchemy.exc import IntegrityError

from hostprompt.extensions import db
from hostprompt.models import Property, PropertyPhoto

NEW_PROPERTY = {
    "name": "Pine Hut",
    "location": "Leavenworth, Washington",
    "bedrooms": 1,
    "bathrooms": 1,
    "description": "One-room cabin with a wood stove.",
    "amenities": ["Wood stove", "WiFi"],
    "savedHashtags": ["#cabinlife", "pnw", "cabinlife", "  "],
}


def test_create_property(client):
    r = client.post("/api/properties", json=NEW_PROPERTY, headers={"X-User-Id": "5"})
    assert r.status_code == 201
    data = r.get_json()
    assert data["userId"] == 5
    assert data["status"] == "active"
    assert data["savedHashtags"] == ["cabinlife", "pnw"]
    assert data["amenities"] == ["Wood stove", "WiFi"]
    assert data["useBrandVoiceDefault"] is False
    assert data["photos"] == []


@pytest.mark.parametrize(
    "patch",
    [
        {"name": ""},
        {"bedrooms": "two"},
        {"bathrooms": -1},
        {"amenities": "WiFi"},
        {"useBrandVoiceDefault": "yes"},
    ],
)
def test_create_property_rejects_bad_fields(client, patch):
    body = dict(NEW_PROPERTY, **patch)
    r = client.post("/api/properties", json=body)
    assert r.status_code == 400
    assert "message" in r.get_json()


def test_create_property_requires_fields(client):
    body = dict(NEW_PROPERTY)
    del body["location"]
    r = client.post("/api/properties", json=body)
    assert r.status_code == 400
    assert r.get_json() == {"message": "location is required"}


def test_list_is_scoped_to_user(client, make_property):
    make_property(user_id=1, name="Mine")
    make_property(user_id=2, name="Theirs")

    r = client.get("/api/properties", headers={"X-User-Id": "1"})
    assert [p["name"] for p in r.get_json()] == ["Mine"]

    r = client.get("/api/properties?userId=2")
    assert [p["name"] for p in r.get_json()] == ["Theirs"]


def test_get_property_and_404(client, make_property):
    prop = make_property()
    assert client.get(f"/api/properties/{prop.id}").get_json()["name"] == "Driftwood Cottage"

    r = client.get("/api/properties/9999")
    assert r.status_code == 404
    assert r.get_json() == {"message": "Property not found"}


def test_patch_updates_only_given_fields(client, make_property):
    prop = make_property()
    r = client.patch(
        f"/api/properties/{prop.id}",
        json={"savedHashtags": ["#beachhouse"], "hostSignature": "Cheers, Sam"},
    )
    assert r.status_code == 200
    data = r.get_json()
    assert data["savedHashtags"] == ["beachhouse"]
    assert data["hostSignature"] == "Cheers, Sam"
    assert data["name"] == "Driftwood Cottage"


def test_put_requires_full_body(client, make_property):
    prop = make_property()
    r = client.put(f"/api/properties/{prop.id}", json={"name": "Renamed"})
    assert r.status_code == 400

    r = client.put(f"/api/properties/{prop.id}", json=dict(NEW_PROPERTY, name="Renamed"))
    assert r.status_code == 200
    assert r.get_json()["name"] == "Renamed"


def test_other_users_cannot_modify(client, make_property):
    prop = make_property(user_id=1)
    headers = {"X-User-Id": "2"}

    r = client.patch(f"/api/properties/{prop.id}", json={"name": "Mine now"}, headers=headers)
    assert r.status_code == 403
    assert r.get_json() == {"message": "Not authorized to modify this property"}

    assert client.delete(f"/api/properties/{prop.id}", headers=headers).status_code == 403
    assert client.post(f"/api/properties/{prop.id}/photos", json={"url": "u"}, headers=headers).status_code == 403


def test_delete_property(client, make_property):
    prop = make_property(photos=[{"url": "https://cdn.example.com/a.jpg"}])
    pid = prop.id

    r = client.delete(f"/api/properties/{pid}")
    assert r.status_code == 204
    assert client.get(f"/api/properties/{pid}").status_code == 404
    assert PropertyPhoto.query.filter_by(property_id=pid).count() == 0


def test_first_photo_becomes_primary_and_hero(client, make_property):
    prop = make_property()
    r = client.post(f"/api/properties/{prop.id}/photos", json={"url": "https://cdn.example.com/a.jpg", "name": "Deck"})
    assert r.status_code == 201
    assert r.get_json()["isPrimary"] is True

    r = client.post(f"/api/properties/{prop.id}/photos", json={"url": "https://cdn.example.com/b.jpg"})
    assert r.get_json()["isPrimary"] is False

    data = client.get(f"/api/properties/{prop.id}").get_json()
    assert data["image"] == "https://cdn.example.com/a.jpg"
    assert [p["isPrimary"] for p in data["photos"]] == [True, False]


def test_switching_primary_keeps_exactly_one(client, make_property):
    prop = make_property(
        photos=[
            {"url": "https://cdn.example.com/a.jpg"},
            {"url": "https://cdn.example.com/b.jpg", "isPrimary": True},
        ]
    )
    photos = client.get(f"/api/properties/{prop.id}/photos").get_json()
    assert [p["isPrimary"] for p in photos] == [False, True]

    r = client.post(f"/api/properties/{prop.id}/photos/{photos[0]['id']}/primary")
    assert r.status_code == 200
    data = r.get_json()
    assert [p["isPrimary"] for p in data["photos"]] == [True, False]
    assert data["image"] == "https://cdn.example.com/a.jpg"


def test_deleting_primary_promotes_next(client, make_property):
    prop = make_property(
        photos=[{"url": "https://cdn.example.com/a.jpg"}, {"url": "https://cdn.example.com/b.jpg"}]
    )
    first, second = client.get(f"/api/properties/{prop.id}/photos").get_json()

    assert client.delete(f"/api/properties/{prop.id}/photos/{first['id']}").status_code == 204
    data = client.get(f"/api/properties/{prop.id}").get_json()
    assert [p["id"] for p in data["photos"]] == [second["id"]]
    assert data["photos"][0]["isPrimary"] is True
    assert data["image"] == "https://cdn.example.com/b.jpg"

    assert client.delete(f"/api/properties/{prop.id}/photos/{second['id']}").status_code == 204
    assert client.get(f"/api/properties/{prop.id}").get_json()["image"] == ""


def test_unknown_photo_is_404(client, make_property):
    prop = make_property()
    r = client.delete(f"/api/properties/{prop.id}/photos/123")
    assert r.status_code == 404
    assert r.get_json() == {"message": "Photo not found"}


def test_database_rejects_two_primary_photos(app, make_property):
    prop = make_property()
    db.session.add_all(
        [
            PropertyPhoto(property_id=prop.id, url="a", is_primary=True, primary_slot=True),
            PropertyPhoto(property_id=prop.id, url="b", is_primary=True, primary_slot=True),
        ]
    )
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()
    assert db.session.get(Property, prop.id) is not None


@pytest.mark.parametrize(
    "field, message",
    [("bedrooms", "bedrooms must be a whole number"), ("bathrooms", "bathrooms must be a number")],
)
def test_non_finite_numbers_are_400(client, field, message):
    body = (
        '{"name": "Pine Hut", "location": "Leavenworth", "description": "Cabin.", '
        '"bedrooms": 1, "bathrooms": 1, "%s": 1e999}' % field
    )
    r = client.post("/api/properties", data=body, content_type="application/json")
    assert r.status_code == 400
    assert r.get_json() == {"message": message}
    assert Property.query.count() == 0


def test_image_follows_primary_photo_only(client, make_property):
    prop = make_property(photos=[{"url": "https://cdn.example.com/a.jpg"}])

    r = client.patch(f"/api/properties/{prop.id}", json={"image": "https://elsewhere.example.com/x.jpg"})
    assert r.status_code == 200
    assert r.get_json()["image"] == "https://cdn.example.com/a.jpg"

    r = client.put(f"/api/properties/{prop.id}", json=dict(NEW_PROPERTY, image="https://elsewhere.example.com/x.jpg"))
    assert r.get_json()["image"] == "https://cdn.example.com/a.jpg"


def test_each_request_resolves_its_own_user(client, make_property):
    make_property(user_id=1, name="Mine")
    make_property(user_id=2, name="Theirs")

    for user_id, expected in (("1", "Mine"), ("2", "Theirs"), ("1", "Mine")):
        r = client.get("/api/properties", headers={"X-User-Id": user_id})
        assert [p["name"] for p in r.get_json()] == [expected]
