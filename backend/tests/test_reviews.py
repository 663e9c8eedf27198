from datetime import date, timedelta

import pytest

from gigs.crud import crud_performer
from gigs.crud.crud_performer import Found, NotFound
from gigs.models import ArtistReview, Booking, Performer


def add_booking(database, host_user_id, performer_id, event_date=None):
    with database.session() as db:
        booking = Booking(
            artist_id=performer_id,
            host_id=host_user_id,
            event_date=event_date or date.today() - timedelta(days=3),
            event_time="20:00",
            event_location="Colombo",
            price=15000,
        )
        db.add(booking)
        db.commit()
        return booking.id


def get_performer(database, performer_id):
    with database.session() as db:
        return db.get(Performer, performer_id)


@pytest.fixture
def pair(make_host, make_performer):
    """A host created before the performer so user ids and performer ids differ."""
    host_user_id, _ = make_host()
    artist_user_id, performer_id = make_performer()
    return host_user_id, artist_user_id, performer_id


def host_review(host_user_id, rating=4, **extra):
    return {"reviewer_id": host_user_id, "reviewer_role": "host", "rating": rating, **extra}


def test_resolve_performer_by_either_key(database, pair):
    _, artist_user_id, performer_id = pair
    assert artist_user_id != performer_id
    with database.session() as db:
        assert crud_performer.resolve_performer(db, performer_id) == Found(performer_id)
        assert crud_performer.resolve_performer(db, str(artist_user_id)) == Found(performer_id)
        assert crud_performer.resolve_performer(db, "999") == NotFound()
        assert crud_performer.resolve_performer(db, "abc") == NotFound()
        assert crud_performer.resolve_performer(db, "-1") == NotFound()


def test_add_review_unknown_artist(client, pair):
    host_user_id, _, _ = pair
    for artist in ("999", "not-a-number"):
        res = client.post(f"/api/artists/{artist}/reviews", json=host_review(host_user_id))
        assert res.status_code == 404
        assert res.json()["message"] == "Artist not found."


def test_add_review_rejects_unknown_role(client, pair):
    host_user_id, _, performer_id = pair
    res = client.post(
        f"/api/artists/{performer_id}/reviews",
        json={"reviewer_id": host_user_id, "reviewer_role": "admin", "rating": 5},
    )
    assert res.status_code == 403
    assert res.json()["message"] == "Only hosts or artists can review artists."


def test_host_review_requires_booking(client, database, pair):
    host_user_id, artist_user_id, performer_id = pair

    res = client.post(f"/api/artists/{performer_id}/reviews", json=host_review(host_user_id))
    assert res.status_code == 403
    assert res.json()["message"] == "You must have a booking with this artist to review."

    booking_id = add_booking(database, host_user_id, performer_id)

    res = client.post(
        f"/api/artists/{performer_id}/reviews",
        json=host_review(host_user_id, booking_id=booking_id + 100),
    )
    assert res.status_code == 403
    assert res.json()["message"] == "Invalid booking reference for this review."

    # Addressed by the artist's user id this time
    res = client.post(
        f"/api/artists/{artist_user_id}/reviews",
        json=host_review(host_user_id, rating=4, review_text="Great set", booking_id=booking_id),
    )
    assert res.status_code == 201
    assert res.json()["message"] == "Review added and rating updated."

    performer = get_performer(database, performer_id)
    assert float(performer.average_rating) == 4.0
    assert performer.total_reviews == 1


def test_artist_can_review_without_booking(client, database, pair, make_performer):
    _, _, performer_id = pair
    peer_user_id, _ = make_performer(email="peer@test.com", stage_name="Peer")
    for rating in (5, 2):
        res = client.post(
            f"/api/artists/{performer_id}/reviews",
            json={"reviewer_id": peer_user_id, "reviewer_role": "artist", "rating": rating},
        )
        assert res.status_code == 201

    performer = get_performer(database, performer_id)
    assert float(performer.average_rating) == 3.5
    assert performer.total_reviews == 2


def test_add_review_rating_out_of_range(client, pair):
    host_user_id, _, performer_id = pair
    res = client.post(f"/api/artists/{performer_id}/reviews", json=host_review(host_user_id, rating=6))
    assert res.status_code == 400
    assert "rating" in res.json()["field_errors"]


def test_list_artist_reviews(client, database, pair):
    host_user_id, artist_user_id, performer_id = pair
    add_booking(database, host_user_id, performer_id)
    client.post(f"/api/artists/{performer_id}/reviews", json=host_review(host_user_id, review_text="Nice"))

    res = client.get(f"/api/artists/{artist_user_id}/reviews")
    assert res.status_code == 200
    reviews = res.json()["reviews"]
    assert len(reviews) == 1
    assert reviews[0]["reviewer_name"] == "Host User"
    assert reviews[0]["review_text"] == "Nice"
    assert reviews[0]["artist_id"] == performer_id

    assert client.get("/api/artists/999/reviews").json() == {"reviews": []}


def test_can_review(client, database, pair):
    host_user_id, _, performer_id = pair

    res = client.get(f"/api/artists/{performer_id}/can-review")
    assert res.status_code == 400
    assert res.json()["message"] == "Host ID is required."

    res = client.get("/api/artists/999/can-review", params={"host_id": host_user_id})
    assert res.status_code == 200
    assert res.json() == {"canReview": False, "completedBookings": 0, "message": "Artist not found."}

    add_booking(database, host_user_id, performer_id, event_date=date.today() + timedelta(days=5))
    body = client.get(f"/api/artists/{performer_id}/can-review", params={"host_id": host_user_id}).json()
    assert body["canReview"] is False
    assert body["message"] == "Host must complete a booking before reviewing this artist."

    add_booking(database, host_user_id, performer_id, event_date=date.today() - timedelta(days=1))
    body = client.get(f"/api/artists/{performer_id}/can-review", params={"host_id": host_user_id}).json()
    assert body == {"canReview": True, "completedBookings": 1, "message": "Host can review this artist."}


@pytest.fixture
def reviewed(client, database, pair):
    host_user_id, _, performer_id = pair
    add_booking(database, host_user_id, performer_id)
    res = client.post(f"/api/artists/{performer_id}/reviews", json=host_review(host_user_id, rating=2))
    assert res.status_code == 201
    with database.session() as db:
        review_id = db.query(ArtistReview.id).scalar()
    return host_user_id, performer_id, review_id


def test_host_lists_own_reviews(client, reviewed):
    host_user_id, performer_id, review_id = reviewed
    res = client.get(f"/api/hosts/{host_user_id}/reviews")
    assert res.status_code == 200
    [item] = res.json()["reviews"]
    assert item["id"] == review_id
    assert item["artist_name"] == "DJ Test"


def test_host_updates_review_and_aggregate(client, database, reviewed):
    host_user_id, performer_id, review_id = reviewed

    res = client.put(f"/api/hosts/{host_user_id + 50}/reviews/{review_id}", json={"rating": 5})
    assert res.status_code == 404
    assert res.json()["message"] == "Review not found or not owned by host."

    res = client.put(
        f"/api/hosts/{host_user_id}/reviews/{review_id}",
        json={"rating": 5, "comment": "Even better"},
    )
    assert res.status_code == 200
    assert res.json() == {"message": "Review updated."}

    performer = get_performer(database, performer_id)
    assert float(performer.average_rating) == 5.0
    with database.session() as db:
        assert db.get(ArtistReview, review_id).review_text == "Even better"


def test_host_deletes_review(client, database, reviewed):
    host_user_id, performer_id, review_id = reviewed
    res = client.delete(f"/api/hosts/{host_user_id}/reviews/{review_id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Review deleted."}

    performer = get_performer(database, performer_id)
    assert float(performer.average_rating) == 0
    assert performer.total_reviews == 0

    res = client.delete(f"/api/hosts/{host_user_id}/reviews/{review_id}")
    assert res.status_code == 404


def test_admin_lists_and_deletes_reviews(client, database, reviewed):
    host_user_id, performer_id, review_id = reviewed

    res = client.get("/api/admin/reviews")
    assert res.status_code == 200
    [item] = res.json()["reviews"]
    assert item["id"] == review_id
    assert item["target_id"] == performer_id
    assert item["reviewer_name"] == "Host User"
    assert item["target_name"] == "DJ Test"

    res = client.delete("/api/admin/reviews/999")
    assert res.status_code == 404
    assert res.json() == {"message": "Review not found."}

    res = client.delete(f"/api/admin/reviews/{review_id}")
    assert res.status_code == 200
    assert get_performer(database, performer_id).total_reviews == 0


def test_zero_booking_id_means_any_booking(client, database, pair):
    host_user_id, _, performer_id = pair
    add_booking(database, host_user_id, performer_id)
    res = client.post(
        f"/api/artists/{performer_id}/reviews",
        json=host_review(host_user_id, booking_id=0),
    )
    assert res.status_code == 201


def test_parse_id():
    assert crud_performer.parse_id(" 12 ") == 12
    assert crud_performer.parse_id("0") is None
    assert crud_performer.parse_id("x1") is None
    assert crud_performer.parse_id(None) is None
