"""
Tests for fetching MARC-XML over HTTP and the fetch configuration.
"""

import pytest
import requests

from marcdc import FetchError, convert
from marcdc.config import FetchConfig
from marcdc.fetch import fetch_record, fetch_xml

URL = "https://lccn.loc.gov/92005291/marcxml"

NO_WAIT = FetchConfig(timeout=5, max_retries=2, backoff_factor=0)


class FakeResponse:
    def __init__(self, status_code=200, content=b''):
        self.status_code = status_code
        self.content = content


class FakeSession:
    """Replays a scripted sequence of responses or exceptions."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({'url': url, 'headers': headers, 'timeout': timeout})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def sandburg_xml(sandburg_xml_path):
    return sandburg_xml_path.read_bytes()


class TestFetchRecord:
    """Test fetch_record end to end against a fake session."""

    def test_success(self, sandburg_xml):
        session = FakeSession(FakeResponse(200, sandburg_xml))
        record = fetch_record(URL, config=NO_WAIT, session=session)
        assert convert(record).titles == ("Arithmetic /",)
        assert session.calls[0]['timeout'] == 5
        assert session.calls[0]['url'] == URL

    def test_no_record(self):
        empty = b'<collection xmlns="http://www.loc.gov/MARC21/slim"/>'
        session = FakeSession(FakeResponse(200, empty))
        with pytest.raises(FetchError, match="No MARC record"):
            fetch_record(URL, config=NO_WAIT, session=session)


class TestRetries:
    """Test the retry policy."""

    def test_retry_on_server_error(self, sandburg_xml):
        session = FakeSession(FakeResponse(503), FakeResponse(200, sandburg_xml))
        assert fetch_xml(URL, config=NO_WAIT, session=session) == sandburg_xml
        assert len(session.calls) == 2

    def test_retry_on_timeout(self, sandburg_xml):
        session = FakeSession(
            requests.Timeout("slow"),
            requests.ConnectionError("reset"),
            FakeResponse(200, sandburg_xml),
        )
        assert fetch_xml(URL, config=NO_WAIT, session=session) == sandburg_xml
        assert len(session.calls) == 3

    def test_gives_up(self):
        session = FakeSession(FakeResponse(500), FakeResponse(502), FakeResponse(429))
        with pytest.raises(FetchError, match="after 3 attempt"):
            fetch_xml(URL, config=NO_WAIT, session=session)
        assert len(session.calls) == 3

    def test_not_found_is_not_retried(self):
        session = FakeSession(FakeResponse(404))
        with pytest.raises(FetchError) as excinfo:
            fetch_xml(URL, config=NO_WAIT, session=session)
        assert excinfo.value.status_code == 404
        assert excinfo.value.url == URL
        assert len(session.calls) == 1

    def test_backoff_sleeps(self, monkeypatch, sandburg_xml):
        delays = []
        monkeypatch.setattr("marcdc.fetch.time.sleep", delays.append)
        config = FetchConfig(max_retries=3, backoff_factor=1.0, max_backoff=3.0)
        session = FakeSession(FakeResponse(503), FakeResponse(503), FakeResponse(503),
                              FakeResponse(200, sandburg_xml))
        fetch_xml(URL, config=config, session=session)
        assert delays == [1.0, 2.0, 3.0]


class TestFetchConfig:
    """Test configuration defaults, validation and environment overrides."""

    def test_defaults(self):
        config = FetchConfig()
        assert config.timeout == 30.0
        assert config.max_retries == 3

    def test_from_env(self):
        config = FetchConfig.from_env({
            'MARCDC_HTTP_TIMEOUT': '10',
            'MARCDC_HTTP_MAX_RETRIES': '5',
            'MARCDC_HTTP_BACKOFF': '0.5',
        })
        assert config == FetchConfig(timeout=10.0, max_retries=5, backoff_factor=0.5)

    def test_from_env_empty(self):
        assert FetchConfig.from_env({}) == FetchConfig()

    def test_from_env_invalid(self):
        with pytest.raises(ValueError):
            FetchConfig.from_env({'MARCDC_HTTP_TIMEOUT': 'soon'})

    @pytest.mark.parametrize("kwargs", [{'timeout': 0}, {'max_retries': -1}, {'backoff_factor': -1}])
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            FetchConfig(**kwargs)
