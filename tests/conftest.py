import logging
from unittest.mock import MagicMock

import pytest

from portal_uitest.config.settings import FrameworkConfig
from portal_uitest.core import browser_utils as browser_utils_module
from portal_uitest.core.browser_utils import BrowserUtils
from portal_uitest.core.reporting import MemoryReporter, ReportContext

pytest_plugins = ['pytester']


@pytest.fixture
def element():
    el = MagicMock(name='element')
    el.is_displayed.return_value = True
    el.is_enabled.return_value = True
    el.is_selected.return_value = True
    el.text = 'Welcome back'
    el.tag_name = 'select'
    return el


@pytest.fixture
def fake_driver(element):
    driver = MagicMock(name='driver')
    driver.find_element.return_value = element
    driver.get_screenshot_as_png.return_value = b'\x89PNG'
    return driver


@pytest.fixture
def reporter():
    return MemoryReporter()


@pytest.fixture
def fw_config():
    # zero timeout: every wait polls exactly once
    return FrameworkConfig(default_timeout=0, retry_count=3, screenshot_strategy='onFailure')


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(browser_utils_module.time, 'sleep', lambda seconds: calls.append(seconds))
    return calls


@pytest.fixture
def utils(fake_driver, fw_config, reporter, tmp_path, sleeps):
    report = ReportContext(reporter, logging.getLogger('portal_uitest.tests'))
    return BrowserUtils(fake_driver, fw_config, report, upload_dir=tmp_path)