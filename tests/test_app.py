"""HTTP endpoints."""

import base64
import xml.etree.ElementTree as ET

import pytest

import app as app_module
from app import app

_SVG_NS = "http://www.w3.org/2000/svg"


@pytest.fixture
def client():
    app.config.update(TESTING=True)
    with app.test_client() as client:
        yield client


def test_svg_endpoint(client) -> None:
    response = client.get("/svg", query_string={"text": "hello", "version": "1", "border": "0", "scale": "3"})
    assert response.status_code == 200
    assert response.mimetype == "image/svg+xml"
    root = ET.fromstring(response.get_data(as_text=True))
    assert root.tag == f"{{{_SVG_NS}}}svg"
    assert root.attrib["width"] == "63"


def test_svg_endpoint_colors(client) -> None:
    response = client.get(
        "/svg",
        query_string={"text": "hello", "qrcode_color": "17,170,136", "background_opacity": "0.25"},
    )
    text = response.get_data(as_text=True)
    assert '<g fill="#11AA88">' in text
    assert 'fill-opacity="0.25"' in text


def test_invalid_border_falls_back_to_default(client) -> None:
    response = client.get("/svg", query_string={"text": "hello", "version": "1", "border": "99", "scale": "1"})
    assert ET.fromstring(response.get_data(as_text=True)).attrib["width"] == "29"


def test_base64_endpoint(client) -> None:
    params = {"text": "hello", "format": "indent"}
    svg_text = client.get("/svg", query_string=params).get_data(as_text=True)
    payload = client.get("/svg/base64", query_string=params).get_json()
    assert base64.b64decode(payload["base64"]).decode("utf-8") == svg_text
    assert payload["data_uri"] == "data:image/svg+xml;base64," + payload["base64"]


def test_export_svg_is_attachment(client) -> None:
    response = client.get("/export/svg", query_string={"text": "hello"})
    assert response.status_code == 200
    assert "attachment" in response.headers["Content-Disposition"]
    assert "qr.svg" in response.headers["Content-Disposition"]


@pytest.mark.parametrize("path", ["/svg", "/svg/base64", "/export/svg"])
def test_missing_text(client, path) -> None:
    assert client.get(path).status_code == 400


@pytest.mark.parametrize(
    "params",
    [
        {"text": "hello", "background_opacity": "1.1"},
        {"text": "hello", "qrcode_color": "0,0,256"},
        {"text": "hello", "scale": "0"},
        {"text": "x" * 100, "version": "1"},
        {"text": "hello", "ecc": "Z"},
    ],
)
def test_bad_parameters_are_client_errors(client, params) -> None:
    assert client.get("/svg", query_string=params).status_code == 400


def test_rgb_function_color_is_accepted(client) -> None:
    response = client.get("/svg", query_string={"text": "hello", "qrcode_color": "rgb(1,2,3)"})
    assert response.status_code == 200
    assert '<g fill="rgb(1,2,3)">' in response.get_data(as_text=True)


def test_invalid_version_is_client_error(client) -> None:
    assert client.get("/svg", query_string={"text": "hello", "version": "abc"}).status_code == 400


def test_internal_errors_are_not_reported_as_client_errors(client, monkeypatch) -> None:
    def broken_create(matrix, settings):
        raise ValueError("renderer bug")

    monkeypatch.setattr(app_module, "create", broken_create)
    with pytest.raises(ValueError) as info:
        client.get("/svg", query_string={"text": "hello"})
    assert type(info.value) is ValueError
