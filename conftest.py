import pytest

from kwextract.options import ENV_VAR, reload_options


@pytest.fixture(autouse=True)
def default_options(monkeypatch):
    # Tests must not depend on the options of the environment they run in.
    monkeypatch.delenv(ENV_VAR, raising=False)
    reload_options()
