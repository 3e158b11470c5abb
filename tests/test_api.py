import subprocess

import pytest
from fastapi.testclient import TestClient

from portal_uitest.main import create_app
from portal_uitest.routes.api import get_test_service
from portal_uitest.services.failure_tracker import FailureTracker
from portal_uitest.services.test_service import TestService


@pytest.fixture
def tracker(tmp_path):
    return FailureTracker(tmp_path / 'failed-tests.txt')


@pytest.fixture
def client(tracker):
    def runner(command, check=False):
        returncode = 0 if command[0] == 'allure' or not tracker.get_failed_test_titles() else 1
        return subprocess.CompletedProcess(command, returncode)

    app = create_app()
    app.dependency_overrides[get_test_service] = lambda: TestService(tracker=tracker, runner=runner)
    return TestClient(app)


def test_status(client):
    assert client.get('/status').json() == {'status': 'ok'}


def test_run_tests(client):
    response = client.post('/run-tests')

    assert response.status_code == 200
    assert response.json() == {'status': 'passed', 'exit_code': 0, 'failed_tests': []}


def test_failed_tests_listing_and_clear(client, tracker):
    tracker.log_failed_test('tests/test_auth.py::test_logout')

    assert client.get('/failed-tests').json() == {'failed_tests': ['tests/test_auth.py::test_logout']}
    assert client.delete('/failed-tests').json() == {'failed_tests': []}
    assert tracker.get_failed_test_titles() == []


def test_rerun_failed(client, tracker):
    tracker.log_failed_test('tests/test_auth.py::test_logout')

    body = client.post('/rerun-failed').json()

    assert body['status'] == 'failed'
    assert body['exit_code'] == 1
    assert body['rerun'] == ['tests/test_auth.py::test_logout']


def test_rerun_with_nothing_failed(client):
    body = client.post('/rerun-failed').json()

    assert body == {'status': 'passed', 'exit_code': 0, 'rerun': [], 'failed_tests': []}
