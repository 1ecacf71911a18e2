import io

import pytest

from app.errors import UploadError
from app.services.uploads import UploadGateway
from tests.helpers import FakeS3Client, register


def _files(n):
    return [(io.BytesIO(f"photo-{i}".encode()), f"photo-{i}.png", "image/png") for i in range(n)]


def test_store_returns_public_url_and_closes_file():
    fake = FakeS3Client()
    gateway = UploadGateway(fake, "photos-bucket")
    fileobj = io.BytesIO(b"data")
    url = gateway.store(fileobj, "beach.png", "image/png")

    assert fileobj.closed
    assert url.startswith("https://photos-bucket.s3.amazonaws.com/")
    key = url.rsplit("/", 1)[1]
    assert key.endswith(".png")
    assert fake.objects[key]["body"] == b"data"
    assert fake.objects[key]["bucket"] == "photos-bucket"
    assert fake.objects[key]["extra"] == {"ContentType": "image/png", "ACL": "public-read"}


def test_store_uses_configured_base_url_and_acl():
    fake = FakeS3Client()
    gateway = UploadGateway(fake, "photos-bucket", public_base_url="https://cdn.example.com/", acl="")
    url = gateway.store(io.BytesIO(b"data"), "notes", None)
    assert url.startswith("https://cdn.example.com/")
    key = url.rsplit("/", 1)[1]
    assert fake.objects[key]["extra"] == {"ContentType": "application/octet-stream"}


def test_names_do_not_collide():
    gateway = UploadGateway(FakeS3Client(), "photos-bucket")
    urls = gateway.store_many(_files(20))
    assert len(set(urls)) == 20


def test_failed_store_raises_and_closes_file():
    gateway = UploadGateway(FakeS3Client(fail_on={1}), "photos-bucket")
    fileobj = io.BytesIO(b"data")
    with pytest.raises(UploadError):
        gateway.store(fileobj, "beach.png", "image/png")
    assert fileobj.closed


def test_store_many_returns_one_url_per_file():
    fake = FakeS3Client()
    urls = UploadGateway(fake, "photos-bucket").store_many(_files(3))
    assert len(urls) == 3
    assert len(fake.objects) == 3


def test_store_many_keeps_earlier_urls_on_failure():
    fake = FakeS3Client(fail_on={3})
    files = _files(5)
    with pytest.raises(UploadError) as exc:
        UploadGateway(fake, "photos-bucket").store_many(files)

    assert len(exc.value.uploaded) == 2
    for url in exc.value.uploaded:
        assert url.rsplit("/", 1)[1] in fake.objects
    assert all(f.closed for f, _, _ in files)
    assert fake.calls == 3


def test_gateway_requires_bucket():
    with pytest.raises(ValueError):
        UploadGateway(FakeS3Client(), "")


def test_upload_endpoint(client, fake_s3):
    register(client, "alice", "a@x.com")
    res = client.post("/upload", files=[
        ("photos", ("one.png", b"first", "image/png")),
        ("photos", ("two.png", b"second", "image/png")),
    ])
    assert res.status_code == 200, res.text
    urls = res.json()
    assert len(urls) == 2
    assert all(u.startswith("https://test-bucket.s3.amazonaws.com/") for u in urls)
    assert sorted(o["body"] for o in fake_s3.objects.values()) == [b"first", b"second"]


def test_upload_endpoint_partial_failure(client, fake_s3):
    fake_s3.fail_on = {2}
    register(client, "alice", "a@x.com")
    res = client.post("/upload", files=[
        ("photos", ("one.png", b"first", "image/png")),
        ("photos", ("two.png", b"second", "image/png")),
    ])
    assert res.status_code == 500
    body = res.json()
    assert body["detail"] == "Error uploading files"
    assert len(body["uploaded"]) == 1


def test_upload_requires_session(client, fake_s3):
    res = client.post("/upload", files=[("photos", ("one.png", b"first", "image/png"))])
    assert res.status_code == 401
    assert fake_s3.calls == 0


def test_upload_rejects_more_than_max_files(client, fake_s3):
    register(client, "alice", "a@x.com")
    files = [("photos", (f"p{i}.png", b"x", "image/png")) for i in range(101)]
    res = client.post("/upload", files=files)
    assert res.status_code == 422
    assert fake_s3.calls == 0


def test_upload_without_storage_config_is_generic_500(client, monkeypatch):
    from app.config import Settings
    from app.services import uploads

    monkeypatch.setattr(uploads, "get_settings", lambda: Settings(s3_bucket_name=""))
    register(client, "alice", "a@x.com")
    res = client.post("/upload", files=[("photos", ("one.png", b"first", "image/png"))])
    assert res.status_code == 500
    assert res.json() == {"detail": "Storage error"}
