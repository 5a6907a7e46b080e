import pytest


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    """Keep rich from detecting a terminal or changing width between environments."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("COLUMNS", "100")
