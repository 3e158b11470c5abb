import re

import pytest

from portal_uitest.services import failure_tracker
from portal_uitest.services.failure_tracker import FailureTracker, build_grep_pattern


@pytest.fixture
def tracker(tmp_path):
    return FailureTracker(tmp_path / 'failed' / 'failed-tests.txt')


def test_missing_file_means_no_failures(tracker):
    assert tracker.get_failed_test_titles() == []


def test_log_creates_directory_and_appends(tracker):
    tracker.log_failed_test('tests/test_login.py::test_valid_login')
    tracker.log_failed_test('tests/test_cart.py::test_checkout[visa]')

    assert tracker.path.read_text(encoding='utf-8') == (
        'tests/test_login.py::test_valid_login\n'
        'tests/test_cart.py::test_checkout[visa]\n'
    )
    assert tracker.get_failed_test_titles() == [
        'tests/test_login.py::test_valid_login',
        'tests/test_cart.py::test_checkout[visa]',
    ]


def test_blank_lines_are_ignored(tracker):
    tracker.path.parent.mkdir(parents=True)
    tracker.path.write_text('\n  first  \n\n\r\nsecond\n', encoding='utf-8')

    assert tracker.get_failed_test_titles() == ['first', 'second']


def test_clear_removes_file(tracker):
    tracker.log_failed_test('a')

    tracker.clear_failed_tests()

    assert not tracker.path.exists()
    assert tracker.get_failed_test_titles() == []


def test_clear_without_file_is_noop(tracker):
    tracker.clear_failed_tests()

    assert not tracker.path.exists()


def test_titles_are_unicode_safe(tracker):
    tracker.log_failed_test('tests/test_i18n.py::test_greeting[héllo]')

    assert tracker.get_failed_test_titles() == ['tests/test_i18n.py::test_greeting[héllo]']


def test_grep_pattern_matches_only_recorded_titles():
    titles = ['tests/test_cart.py::test_checkout[visa]', 'tests/test_a.py::test_price(1.5)']
    pattern = build_grep_pattern(titles)

    assert pattern == r'^(?:(tests/test_cart\.py::test_checkout\[visa\])|(tests/test_a\.py::test_price\(1\.5\)))$'
    regex = re.compile(pattern)
    assert all(regex.search(title) for title in titles)
    assert not regex.search('tests/test_cart.py::test_checkout[v]')
    assert not regex.search('tests/test_aXpy::test_price(1.5)')
    assert not regex.search('tests/test_cart.py::test_checkout[visa]-extra')
    assert not regex.search('sub/tests/test_cart.py::test_checkout[visa]')


def test_module_functions_use_configured_file(tmp_path, monkeypatch):
    path = tmp_path / 'failed-tests.txt'
    monkeypatch.setattr(failure_tracker.Config, 'FAILED_TESTS_FILE', path)

    failure_tracker.log_failed_test('tests/test_login.py::test_logout')

    assert failure_tracker.get_failed_test_titles() == ['tests/test_login.py::test_logout']
    failure_tracker.clear_failed_tests()
    assert not path.exists()
