import logging

import pytest

from portal_uitest import main as main_module
from portal_uitest.utils.logger import setup_logging


class FakeService:
    calls = []

    def __init__(self, config):
        pass

    def run_tests(self):
        FakeService.calls.append('run')
        return 1

    def rerun_failed(self):
        FakeService.calls.append('rerun')
        return 0


@pytest.fixture
def fake_service(monkeypatch):
    FakeService.calls = []
    monkeypatch.setattr(main_module, 'TestService', FakeService)
    monkeypatch.setattr(main_module, 'setup_logging', lambda: None)
    return FakeService


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in [h for h in root.handlers if h not in handlers]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


def test_run_mode_is_default(fake_service, monkeypatch):
    monkeypatch.delenv('MODE', raising=False)

    assert main_module.main([]) == 1
    assert fake_service.calls == ['run']


def test_mode_from_argument(fake_service):
    assert main_module.main(['RERUN']) == 0
    assert fake_service.calls == ['rerun']


def test_mode_from_environment(fake_service, monkeypatch):
    monkeypatch.setenv('MODE', 'rerun')

    assert main_module.main([]) == 0
    assert fake_service.calls == ['rerun']


def test_unknown_mode(fake_service):
    assert main_module.main(['deploy']) == 2
    assert fake_service.calls == []


def test_interrupted_run(fake_service, monkeypatch):
    def interrupted(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(FakeService, 'run_tests', interrupted)

    assert main_module.run_cli('run') == 130


def test_setup_logging_writes_execution_log(tmp_path, restore_logging):
    log_file = setup_logging(tmp_path)
    logging.getLogger('portal_uitest').info('[ACTION] Click on element: #go')

    assert log_file.parent == tmp_path
    assert log_file.name.startswith('execution-')
    assert '[INFO] [ACTION] Click on element: #go' in log_file.read_text(encoding='utf-8')
