import io
import pytest


@pytest.fixture
def user_input(monkeypatch):
    """Returns a function that replaces stdin with the given lines."""
    def feed(*lines):
        monkeypatch.setattr('sys.stdin', io.StringIO(''.join(f'{line}\n' for line in lines)))
    return feed
