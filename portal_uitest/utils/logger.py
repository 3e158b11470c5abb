# utils/logger.py
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from portal_uitest.config.settings import Config

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(log_dir: Optional[Path] = None, level: int = logging.INFO) -> Path:
    log_dir = Path(log_dir or Config.LOG_DIR)
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime('%Y-%m-%dT%H-%M-%S-%f')
    log_file = log_dir / f"execution-{timestamp}.log"
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(), logging.FileHandler(log_file, encoding='utf-8')],
        force=True,
    )
    logging.getLogger(__name__).info(f"Logging to {log_file}")
    return log_file
