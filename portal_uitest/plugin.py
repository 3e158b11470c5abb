"""
pytest plugin wiring the action layer into test runs.

Load it with ``-p portal_uitest.plugin`` or ``pytest_plugins`` in a conftest.

Options:
- ``--grep PATTERN``: keep only tests whose node id matches the regex.
- ``--track-failures``: start a fresh failure file and record the node id
  of every test that fails in setup or call.
"""
import logging
import re
from typing import List

import pytest
from selenium import webdriver

from portal_uitest.config.settings import Config, get_env_config, get_framework_config
from portal_uitest.core.browser_utils import BrowserUtils
from portal_uitest.core.reporting import ReportContext
from portal_uitest.services.failure_tracker import FailureTracker

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    group = parser.getgroup('portal-uitest', 'Portal UI test options')
    group.addoption(
        '--grep',
        action='store',
        dest='grep_pattern',
        default=None,
        help='Only run tests whose node id matches this regular expression',
    )
    group.addoption(
        '--track-failures',
        action='store_true',
        dest='track_failures',
        default=False,
        help=f'Record failed tests to the failure file (default: {Config.FAILED_TESTS_FILE})',
    )


def pytest_configure(config):
    if config.getoption('track_failures'):
        config._failure_tracker = FailureTracker()
        # xdist workers share the controller's file
        if not hasattr(config, 'workerinput'):
            config._failure_tracker.clear_failed_tests()


def select_items(items: List, pattern: str):
    regex = re.compile(pattern)
    selected, deselected = [], []
    for item in items:
        (selected if regex.search(item.nodeid) else deselected).append(item)
    return selected, deselected


def pytest_collection_modifyitems(config, items):
    pattern = config.getoption('grep_pattern')
    if not pattern:
        return
    selected, deselected = select_items(items, pattern)
    if deselected:
        config.hook.pytest_deselected(items=deselected)
        items[:] = selected
    logger.info(f"--grep selected {len(selected)} of {len(selected) + len(deselected)} tests")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    tracker = getattr(item.config, '_failure_tracker', None)
    if tracker is not None and report.failed and report.when in ('setup', 'call'):
        tracker.log_failed_test(item.nodeid)


@pytest.fixture(scope='session')
def framework_config():
    return get_framework_config()


@pytest.fixture(scope='session')
def env_config():
    return get_env_config()


def create_driver(browser: str = None, headless: bool = None):
    browser = browser or Config.BROWSER
    headless = Config.HEADLESS if headless is None else headless
    if browser == 'firefox':
        options = webdriver.FirefoxOptions()
        if headless:
            options.add_argument('--headless')
        return webdriver.Firefox(options=options)
    options = webdriver.ChromeOptions()
    if headless:
        options.add_argument('--headless=new')
    options.add_argument('--no-sandbox')
    options.add_argument('--disable-dev-shm-usage')
    options.add_argument('--window-size=1920,1080')
    return webdriver.Chrome(options=options)


@pytest.fixture
def driver():
    browser_driver = create_driver()
    yield browser_driver
    try:
        browser_driver.quit()
    except Exception as e:
        logger.error(f"Error closing driver: {e}")


@pytest.fixture
def report_context():
    return ReportContext(logger=logging.getLogger('portal_uitest'))


@pytest.fixture
def browser_utils(driver, framework_config, report_context):
    return BrowserUtils(driver, framework_config, report_context)
