# services/failure_tracker.py
import logging
import os
import re
from pathlib import Path
from typing import Iterable, List, Optional

from portal_uitest.config.settings import Config


class FailureTracker:
    """Flat file of failed test titles, one per line, consumed by a re-run.

    Appends are not synchronized; one run writes the file before the
    re-run reads it.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or Config.FAILED_TESTS_FILE)
        self.logger = logging.getLogger(__name__)

    def log_failed_test(self, title: str) -> None:
        os.makedirs(self.path.parent, exist_ok=True)
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(f"{title}\n")
        self.logger.info(f"Recorded failed test: {title}")

    def clear_failed_tests(self) -> None:
        if self.path.exists():
            self.path.unlink()
            self.logger.info(f"Cleared failed tests file: {self.path}")

    def get_failed_test_titles(self) -> List[str]:
        if not self.path.exists():
            return []
        with open(self.path, 'r', encoding='utf-8') as f:
            return [line.strip() for line in f.read().splitlines() if line.strip()]


def build_grep_pattern(titles: Iterable[str]) -> str:
    """Anchored alternation matching exactly the given node ids."""
    alternatives = '|'.join(f"({re.escape(title)})" for title in titles)
    return f"^(?:{alternatives})$"


def log_failed_test(title: str) -> None:
    FailureTracker().log_failed_test(title)


def clear_failed_tests() -> None:
    FailureTracker().clear_failed_tests()


def get_failed_test_titles() -> List[str]:
    return FailureTracker().get_failed_test_titles()
