# utils/logging.py
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


def setup_logging(log_level: str = "INFO", log_dir: Optional[Union[str, Path]] = None):
    """Global logging setup, applied once per process"""
    level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{log_level}'")

    if logging.getLogger().handlers:
        return  # already configured

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    if log_dir:
        logs_path = Path(log_dir) / "logs"
        logs_path.mkdir(parents=True, exist_ok=True)
        date_str = datetime.now().strftime("%Y%m%d")
        user = os.getenv('USER', 'unknown')
        log_file = logs_path / f"{date_str}_{user}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)

        logging.getLogger().addHandler(file_handler)

    logging.getLogger().addHandler(console_handler)
    logging.getLogger().setLevel(level)
