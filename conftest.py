import pytest


def pytest_addoption(parser):
    group = parser.getgroup("spdxtestbed")
    group.addoption("--quick", action="store_true",
                    default=False, help="skip tests using the 'slow' fixture")
    group.addoption("--slow", action="store_true",
                    default=False, help="only run tests using the 'slow' fixture")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--slow"):
        return
    skip_quick = pytest.mark.skip(reason="only running slow tests")
    for item in items:
        if 'slow' not in getattr(item, 'fixturenames', ()):
            item.add_marker(skip_quick)
