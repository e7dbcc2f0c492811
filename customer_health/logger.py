import logging
import os
from dataclasses import dataclass, field
from datetime import datetime

LOG_FORMAT = "[ %(asctime)s ] %(lineno)d %(name)s - %(levelname)s - %(message)s"


def _env(name, default):
    value = os.getenv(name, "").strip()
    return value or default


@dataclass
class LoggerConfig:
    log_dir: str = field(
        default_factory=lambda: _env("CUSTOMER_HEALTH_LOG_DIR", os.path.join(os.getcwd(), "logs"))
    )
    level_name: str = field(default_factory=lambda: _env("CUSTOMER_HEALTH_LOG_LEVEL", "INFO").upper())
    log_file: str = field(default_factory=lambda: f"{datetime.now().strftime('%m_%d_%Y_%H_%M_%S')}.log")

    @property
    def level(self):
        level = logging.getLevelName(self.level_name)
        return level if isinstance(level, int) else logging.INFO

    @property
    def log_file_path(self):
        return os.path.join(self.log_dir, self.log_file)


def configure_logging(config):
    """Send log records to a timestamped file under ``config.log_dir``.

    When the directory cannot be created (read-only working directory, a file
    in the way) records go to stderr instead and ``None`` is returned.
    """
    try:
        os.makedirs(config.log_dir, exist_ok=True)
    except OSError:
        logging.basicConfig(format=LOG_FORMAT, level=config.level)
        return None

    logging.basicConfig(filename=config.log_file_path, format=LOG_FORMAT, level=config.level)
    return config.log_file_path


logger_config = LoggerConfig()
LOG_FILE_PATH = configure_logging(logger_config)
