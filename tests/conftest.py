import os

import pytest


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "devtest: calls the live trending stocks API"
    )


def pytest_collection_modifyitems(config, items):
    if bool(int(os.getenv("TRENDMINER_DEVTEST", 0))):
        return
    skip = pytest.mark.skip(reason="set TRENDMINER_DEVTEST=1 to run")
    for item in items:
        if "devtest" in item.keywords:
            item.add_marker(skip)
