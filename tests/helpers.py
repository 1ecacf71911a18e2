from botocore.exceptions import ClientError
from fastapi.testclient import TestClient


class FakeS3Client:
    """Records upload_fileobj calls; fails on the call numbers listed in fail_on."""

    def __init__(self, fail_on=()):
        self.objects = {}
        self.calls = 0
        self.fail_on = set(fail_on)

    def upload_fileobj(self, Fileobj, Bucket, Key, ExtraArgs=None):
        self.calls += 1
        if self.calls in self.fail_on:
            raise ClientError({"Error": {"Code": "InternalError", "Message": "boom"}}, "PutObject")
        self.objects[Key] = {"bucket": Bucket, "body": Fileobj.read(), "extra": ExtraArgs or {}}


def register(client: TestClient, name: str, email: str, password: str = "pw1") -> dict:
    res = client.post("/register", json={"name": name, "email": email, "password": password})
    assert res.status_code == 200, res.text
    return res.json()["user"]


def create_place(client: TestClient, title: str = "Sea view flat", **fields) -> dict:
    body = {
        "title": title,
        "address": "1 Harbour Rd",
        "photos": ["https://test-bucket.s3.amazonaws.com/a.png"],
        "desc": "Two rooms",
        "checkin": "14:00",
        "checkout": "11:00",
        "maxguest": 4,
        "price": 120,
    }
    body.update(fields)
    res = client.post("/place", json=body)
    assert res.status_code == 201, res.text
    return res.json()
