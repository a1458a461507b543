import pytest


# Tests read sample inputs relative to the test directory
@pytest.fixture(autouse=True)
def change_test_dir(request, monkeypatch):
    monkeypatch.chdir(request.path.parent)
