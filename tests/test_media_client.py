import base64

from shop.services.media_client import MediaClient, UploadedFile


def test_file_is_sent_as_base64_data_uri(monkeypatch):
    calls = []

    def fake_upload(source, **options):
        calls.append((source, options))
        return {"url": "http://res.cloudinary.com/demo/x.png", "public_id": "x", "bytes": 3}

    monkeypatch.setattr("cloudinary.uploader.upload", fake_upload)
    client = MediaClient(cloud_name="demo", api_key="key", api_secret="secret")

    asset = client.upload(UploadedFile(content=b"abc", content_type="image/png", filename="x.png"))

    assert asset.url == "http://res.cloudinary.com/demo/x.png"
    assert asset.public_id == "x"
    source, options = calls[0]
    assert source == "data:image/png;base64," + base64.b64encode(b"abc").decode()
    assert options["resource_type"] == "auto"
    assert options["cloud_name"] == "demo"
    assert options["api_key"] == "key"
    assert options["api_secret"] == "secret"


def test_string_is_passed_through(monkeypatch):
    seen = []
    monkeypatch.setattr(
        "cloudinary.uploader.upload",
        lambda source, **options: seen.append(source) or {"url": "http://cdn/y.jpg"},
    )

    asset = MediaClient(cloud_name="demo", api_key="k", api_secret="s").upload("https://example.com/y.jpg")

    assert seen == ["https://example.com/y.jpg"]
    assert asset.url == "http://cdn/y.jpg"
