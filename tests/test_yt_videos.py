import pytest

from storefront.models import db
from storefront.models.yt_video import YTVideo

ADMIN_URL = "/api/v1/admin/yt-videos"


@pytest.fixture
def admin_client(client, login, admin_user):
    login(admin_user)
    return client


def test_create_video_derives_id_and_thumbnail(admin_client):
    res = admin_client.post(ADMIN_URL, json={"videoUrl": "https://youtu.be/dQw4w9WgXcQ", "title": "Build guide"})

    assert res.status_code == 201
    video = res.get_json()["data"]
    assert video["videoId"] == "dQw4w9WgXcQ"
    assert video["thumbnailUrl"] == "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"
    assert video["isActive"] is True
    assert video["order"] == 0


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
])
def test_create_video_accepts_common_url_shapes(admin_client, url):
    res = admin_client.post(ADMIN_URL, json={"videoUrl": url})

    assert res.status_code == 201
    assert res.get_json()["data"]["videoId"] == "dQw4w9WgXcQ"


def test_create_video_rejects_bad_or_missing_url(admin_client):
    invalid = admin_client.post(ADMIN_URL, json={"videoUrl": "https://example.com/no-id"})
    missing = admin_client.post(ADMIN_URL, json={"title": "No URL"})

    assert invalid.status_code == 400
    assert invalid.get_json()["message"] == "Invalid YouTube URL"
    assert missing.status_code == 400
    assert missing.get_json()["message"] == "Video URL is required"
    assert YTVideo.query.count() == 0


def test_non_string_url_is_rejected(admin_client):
    created = admin_client.post(ADMIN_URL, json={"videoUrl": "https://youtu.be/dQw4w9WgXcQ"}).get_json()["data"]

    for bad in (12345, ["https://youtu.be/dQw4w9WgXcQ"], {"url": "x"}):
        res = admin_client.post(ADMIN_URL, json={"videoUrl": bad})
        assert res.status_code == 400
        assert res.get_json()["message"] == "Invalid YouTube URL"

    updated = admin_client.put(f"{ADMIN_URL}/{created['id']}", json={"videoUrl": 12345})
    assert updated.status_code == 400
    assert YTVideo.query.count() == 1


def test_update_rederives_only_when_url_changes(admin_client):
    created = admin_client.post(ADMIN_URL, json={"videoUrl": "https://youtu.be/dQw4w9WgXcQ"}).get_json()["data"]

    renamed = admin_client.put(f"{ADMIN_URL}/{created['id']}", json={"title": "Renamed", "videoUrl": created["videoUrl"]})
    assert renamed.get_json()["data"]["videoId"] == "dQw4w9WgXcQ"
    assert renamed.get_json()["data"]["title"] == "Renamed"

    moved = admin_client.put(f"{ADMIN_URL}/{created['id']}", json={"videoUrl": "https://youtu.be/9bZkp7q19f0"})
    data = moved.get_json()["data"]
    assert data["videoId"] == "9bZkp7q19f0"
    assert data["thumbnailUrl"].endswith("/9bZkp7q19f0/maxresdefault.jpg")
    assert data["title"] == "Renamed"


def test_update_with_invalid_url_is_rejected(admin_client):
    created = admin_client.post(ADMIN_URL, json={"videoUrl": "https://youtu.be/dQw4w9WgXcQ"}).get_json()["data"]

    res = admin_client.put(f"{ADMIN_URL}/{created['id']}", json={"videoUrl": "https://example.com/watch"})

    assert res.status_code == 400
    db.session.expire_all()
    assert db.session.get(YTVideo, created["id"]).video_id == "dQw4w9WgXcQ"


def test_public_listing_shows_active_videos_in_order(client, admin_client):
    admin_client.post(ADMIN_URL, json={"videoUrl": "https://youtu.be/aaaaaaaaaaa", "order": 2})
    admin_client.post(ADMIN_URL, json={"videoUrl": "https://youtu.be/bbbbbbbbbbb", "order": 1})
    admin_client.post(ADMIN_URL, json={"videoUrl": "https://youtu.be/ccccccccccc", "isActive": False})

    public = client.get("/api/v1/yt-videos").get_json()
    assert public["count"] == 2
    assert [v["videoId"] for v in public["data"]] == ["bbbbbbbbbbb", "aaaaaaaaaaa"]

    admin = admin_client.get(ADMIN_URL).get_json()
    assert admin["count"] == 3
    assert admin["data"][0]["videoId"] == "ccccccccccc"


def test_delete_video(admin_client):
    created = admin_client.post(ADMIN_URL, json={"videoUrl": "https://youtu.be/dQw4w9WgXcQ"}).get_json()["data"]

    res = admin_client.delete(f"{ADMIN_URL}/{created['id']}")

    assert res.status_code == 200
    assert res.get_json()["message"] == "YouTube video deleted successfully"
    assert admin_client.delete(f"{ADMIN_URL}/{created['id']}").status_code == 404


def test_missing_video_is_404(admin_client):
    res = admin_client.put(f"{ADMIN_URL}/9999", json={"title": "x"})

    assert res.status_code == 404
    assert res.get_json()["message"] == "Video not found"


def test_video_admin_requires_admin(client, login, customer_user):
    assert client.get(ADMIN_URL).status_code == 401
    login(customer_user)
    assert client.post(ADMIN_URL, json={"videoUrl": "https://youtu.be/dQw4w9WgXcQ"}).status_code == 403
