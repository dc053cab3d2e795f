import asyncio
import pytest

## We DO NOT want to use pytest-asyncio.
## Instead, use event_loop.run_until_complete()!


@pytest.fixture(scope="function")
def event_loop():
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's .env / shell settings out of the tests."""
    for name in (
        "SMOOTH_OPERATOR_API_KEY",
        "SMOOTH_OPERATOR_BASE_URL",
        "SMOOTH_OPERATOR_INSTALL_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
