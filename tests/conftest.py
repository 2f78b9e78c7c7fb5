import pytest

from litetask import ErrorReporter, Options, set_cli_options, set_reporter


@pytest.fixture(autouse=True)
def cli_options():
    """Process-wide options for the test, instead of pytest's own argv"""
    options = Options()
    set_cli_options(options)
    yield options
    set_cli_options(None)


@pytest.fixture()
def reported():
    """Fake reporter collecting errors instead of logging them"""
    errors = []
    reporter = ErrorReporter(sink=errors.append)
    previous = set_reporter(reporter)
    reporter.errors = errors
    yield reporter
    reporter.teardown()
    set_reporter(previous)
