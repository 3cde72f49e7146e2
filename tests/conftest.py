import copy
import dataclasses

import pytest

import looksee


@pytest.fixture(scope="function", autouse=True)
def restore_config(monkeypatch):
    """Tests are free to change the process-wide configuration; put it back after
    each one. `COLUMNS` is cleared so widths don't depend on the terminal."""
    monkeypatch.delenv("COLUMNS", raising=False)
    saved = {
        field.name: copy.copy(getattr(looksee.config, field.name))
        for field in dataclasses.fields(looksee.config)
    }
    yield
    for name, value in saved.items():
        setattr(looksee.config, name, value)
