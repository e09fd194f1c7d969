import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
import pytest

from app.exceptions import MediaHostError
from app.services.media_host import CloudinaryClient
from app.settings import Settings

CREDENTIALS = {
    "CLOUDINARY_CLOUD_NAME": "demo",
    "CLOUDINARY_API_KEY": "key",
    "CLOUDINARY_API_SECRET": "secret",
}


@pytest.fixture
def destroy_calls(monkeypatch):
    calls = []
    responses = {"default": {"result": "ok"}}

    def fake_destroy(public_id, **options):
        calls.append(public_id)
        response = responses["default"]
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(cloudinary.uploader, "destroy", fake_destroy)
    return calls, responses


def make_client(**overrides):
    return CloudinaryClient(Settings(**{**CREDENTIALS, **overrides}))


def test_client_configures_sdk_from_settings():
    make_client()

    config = cloudinary.config()
    assert config.cloud_name == "demo"
    assert config.api_key == "key"
    assert config.api_secret == "secret"


def test_destroy_calls_uploader_with_public_id(destroy_calls):
    calls, _responses = destroy_calls

    assert make_client().destroy("gallery/pic") == "ok"
    assert calls == ["gallery/pic"]


def test_destroy_accepts_not_found_and_logs_warning(destroy_calls, caplog):
    _calls, responses = destroy_calls
    responses["default"] = {"result": "not found"}

    with caplog.at_level("WARNING"):
        assert make_client().destroy("gallery/gone") == "not found"

    assert any("already missing" in rec.message for rec in caplog.records)


def test_destroy_raises_on_unexpected_result(destroy_calls):
    _calls, responses = destroy_calls
    responses["default"] = {"result": "error"}

    with pytest.raises(MediaHostError) as exc:
        make_client().destroy("gallery/pic")
    assert exc.value.message == "Media host rejected the delete request"


def test_destroy_raises_on_sdk_error(destroy_calls):
    _calls, responses = destroy_calls
    responses["default"] = cloudinary.exceptions.AuthorizationRequired("bad key")

    with pytest.raises(MediaHostError) as exc:
        make_client().destroy("gallery/pic")
    assert exc.value.message == "Media host request failed"


def test_destroy_requires_credentials(destroy_calls):
    calls, _responses = destroy_calls

    with pytest.raises(MediaHostError):
        make_client(CLOUDINARY_API_SECRET="").destroy("gallery/pic")
    assert calls == []
