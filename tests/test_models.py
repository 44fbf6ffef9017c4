import pytest

from osrm.core.config import ClientConfig, ProxyConfig
from osrm.core.errors import ValidationError
from osrm.core.models import Bearing, Coordinate, Profile, format_degrees, profile_from_text


def test_coordinate_encodes_lon_first():
    c = Coordinate(13.388860, 52.517037)
    assert format_degrees(c.lat) == "13.388860"
    assert format_degrees(10.0) == "10.000000"
    assert format_degrees(0.00001) == "0.000010"
    assert c.encode() == "52.517037,13.388860"


def test_coordinate_snaps_to_micro_degrees():
    c = Coordinate(13.38886049, -0.0000001)
    assert (c.lat, c.lon) == (13.38886, 0.0)
    assert c.encode() == "0.000000,13.388860"
    lon, lat = c.encode().split(",")
    assert Coordinate(float(lat), float(lon)) == c


def test_coordinate_is_immutable():
    c = Coordinate(1.0, 2.0)
    with pytest.raises(Exception):
        c.lat = 5.0


@pytest.mark.parametrize("lat, lon", [(91, 0), (0, -181), (float("nan"), 0), ("x", 0)])
def test_coordinate_rejects_bad_values(lat, lon):
    with pytest.raises(ValidationError):
        Coordinate(lat, lon)


def test_coordinate_coerce_from_tuple():
    assert Coordinate.coerce((1.5, 2.5)) == Coordinate(1.5, 2.5)
    with pytest.raises(ValidationError):
        Coordinate.coerce((1.0,))


def test_bearing_bounds():
    assert Bearing(360, 180).encode() == "360,180"
    assert Bearing(0, 0).encode() == "0,0"
    for value, rng in [(361, 10), (-1, 10), (10, 181), (10.5, 10), (True, 10)]:
        with pytest.raises(ValidationError):
            Bearing(value, rng)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("car", Profile.CAR),
        (" Coche ", Profile.CAR),
        ("VEHICULO", Profile.CAR),
        ("bici", Profile.BIKE),
        ("bicycle", Profile.BIKE),
        ("pie", Profile.FOOT),
        ("trotando", Profile.FOOT),
        ("manejando", Profile.DRIVING),
        ("hybrid", Profile.DRIVING),
        (Profile.BIKE, Profile.BIKE),
    ],
)
def test_profile_synonyms(text, expected):
    assert profile_from_text(text) is expected


def test_unknown_profile():
    with pytest.raises(ValidationError):
        profile_from_text("skateboard")


def test_client_config_bounds():
    assert ClientConfig(timeout=0).timeout_s is None
    assert ClientConfig(timeout=255).timeout_s == 255.0
    for bad in (-1, 256, 9.5, "9"):
        with pytest.raises(ValidationError):
            ClientConfig(timeout=bad)
    with pytest.raises(ValidationError):
        ClientConfig(base_url="ftp://router.example.org")


def test_client_config_strips_trailing_slash():
    assert ClientConfig(base_url="http://localhost:5000/").base_url == "http://localhost:5000"


def test_client_config_from_env(monkeypatch):
    monkeypatch.setenv("OSRM_TIMEOUT", "12")
    monkeypatch.setenv("OSRM_BASE_URL", "http://localhost:5000")
    monkeypatch.setenv("OSRM_PROXY", "http://user:pw@proxy.local:3128")
    cfg = ClientConfig.from_env()
    assert cfg.timeout == 12
    assert cfg.base_url == "http://localhost:5000"
    assert cfg.proxy.url == "http://proxy.local:3128"
    assert cfg.proxy.auth == ("user", "pw")


def test_proxy_config():
    proxy = ProxyConfig("http://proxy.local:3128", username="u", password="p")
    assert proxy.requests_proxies() == {
        "http": "http://u:p@proxy.local:3128",
        "https": "http://u:p@proxy.local:3128",
    }
    assert ProxyConfig("http://proxy.local:3128").auth is None
    with pytest.raises(ValidationError):
        ProxyConfig("not a url")


def test_proxy_keeps_ipv6_brackets():
    proxy = ProxyConfig("http://u:p@[::1]:3128")
    assert proxy.url == "http://[::1]:3128"
    assert proxy.auth == ("u", "p")
    assert proxy.requests_proxies()["https"] == "http://u:p@[::1]:3128"


def test_proxy_string_is_coerced():
    cfg = ClientConfig(proxy="http://proxy.local:3128")
    assert isinstance(cfg.proxy, ProxyConfig)


def test_coordinate_coerce_duck_typed_point():
    class Stop:
        lat = 50.85
        lon = 4.35

    assert Coordinate.coerce(Stop()) == Coordinate(50.85, 4.35)
