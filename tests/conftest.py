import logging
import pytest

def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", help="run slow tests")
    parser.addoption("--klquiet", action="store_true", help="hide debug logging")

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: needs --runslow to run")
    if config.getoption("--klquiet"):
        logging.getLogger('kelvinline').setLevel(logging.WARNING)

def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="need --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
