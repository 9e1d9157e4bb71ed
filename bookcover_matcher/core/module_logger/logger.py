import logging

from bookcover_matcher.core.utils import Utils
from pathlib                      import Path

def find_logs_dir(start_path: Path | None = None) -> Path:
    """
    Resolves the log directory: bookcover_matcher/logs inside a source checkout,
    otherwise ~/.bookcover_matcher/logs for an installed package.

    Args:
        start_path : Path to start the project root search from (defaults to the utils module)

    Returns:
        Path to the log directory (not created here)
    """
    user_logs_dir = Path.home() / '.bookcover_matcher' / 'logs'
    project_root  = Utils.find_root('pyproject.toml', start_path = start_path, fallback = Path.home())

    if (project_root / 'bookcover_matcher' / '__init__.py').is_file():
        return project_root / 'bookcover_matcher' / 'logs'
    return user_logs_dir

class ModuleLogger:
    """
    Configures and manages logging for Book Cover Matcher modules.
    """
    LOGS_DIR = find_logs_dir()

    def __init__(self, module_name: str):
        """
        Initialize logger configuration for a specific module.

        Args:
            module_name : Name of the module requesting the logger
        """
        self.logger   = logging.getLogger(f'bookcover_matcher.{module_name}')
        self.log_file = self.LOGS_DIR / f'{module_name}.log'

        self.configure_logger()

    def configure_logger(self):
        """
        Sets up logger with file handler if not already configured.
        """
        if not self.logger.handlers:

            self.logger.setLevel(logging.INFO)
            self.LOGS_DIR.mkdir(parents = True, exist_ok = True)

            handler = logging.FileHandler(self.log_file, mode = 'a')
            handler.setFormatter(
                logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            )

            self.logger.addHandler(handler)
            self.logger.propagate = False

    def __call__(self) -> logging.Logger:
        """
        Returns the configured logger instance.
        """
        return self.logger
