import pytest

import bot_config


@pytest.fixture(autouse=True)
def no_filters_file(tmp_path, monkeypatch):
    """Every test sees the built-in role/location criteria unless it writes its own file."""
    monkeypatch.setattr(bot_config, "FILTERS_PATH", str(tmp_path / "filters.json"))


class FakeWorksheet:
    """In-memory stand-in for a gspread Worksheet."""

    title = "Sheet1"

    def __init__(self, values=None):
        self.values = [list(r) for r in (values or [])]
        self.appends = []
        self.reads = 0

    def get_all_values(self):
        self.reads += 1
        return [list(r) for r in self.values]

    def append_rows(self, rows, value_input_option=None):
        self.appends.append((rows, value_input_option))
        self.values.extend(list(r) for r in rows)


@pytest.fixture
def worksheet():
    return FakeWorksheet()


@pytest.fixture
def make_worksheet():
    return FakeWorksheet


@pytest.fixture
def service_account_file(tmp_path):
    """A credential file that exists; its content is never parsed when connect() is faked."""
    path = tmp_path / "sa.json"
    path.write_text("{}")
    return str(path)
