import shutil
import tempfile
from pathlib import Path

import httpx
import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

CHANGES_TEXT = "old_one\nnew-one\nbtn_primary\nbtn-primary\nfoo\nfoo\nbad_pair\n"


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def css_project(temp_dir, monkeypatch):
    src = FIXTURES_DIR / "css_project"
    dst = temp_dir / "css_project"
    shutil.copytree(src, dst)
    monkeypatch.chdir(dst)
    return dst


@pytest.fixture
def isolated_config(temp_dir, monkeypatch):
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))
    monkeypatch.delenv("CHANGES_URL", raising=False)
    monkeypatch.delenv("FILES_INPUT", raising=False)

    return {"config": config_dir}


@pytest.fixture
def mock_client():
    def make(text: str = "", status_code: int = 200, requests: list | None = None) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(status_code, text=text)

        return httpx.Client(transport=httpx.MockTransport(handler))

    return make


@pytest.fixture
def serve_changes(monkeypatch):
    """Route every httpx.Client created by the code under test to a mock transport."""
    real_client = httpx.Client
    requests: list[httpx.Request] = []

    def serve(text: str = CHANGES_TEXT, status_code: int = 200) -> list[httpx.Request]:
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, text=text)

        def make_client(**kwargs):
            return real_client(transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr(httpx, "Client", make_client)
        return requests

    return serve
