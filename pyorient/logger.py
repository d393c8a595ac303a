# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for the orientation kernel.

Library modules log below the ``pyorient`` package logger through
``logging.getLogger(__name__)`` and never attach handlers themselves:

- ``pyorient.attitude.dcm`` warns when a matrix is repaired by Gram-Schmidt
  and logs gimbal lock and singular nutation at DEBUG
- ``pyorient.attitude.converters`` logs Krylov angles near gimbal lock at DEBUG

Applications route these records with :func:`setup_logger` or a
:class:`LoggerConfig`.
"""

import logging
import sys
from typing import Optional, Union

DEFAULT_LOGGER_NAME = "pyorient"
DCM_LOGGER_NAME = "pyorient.attitude.dcm"
CONVERTERS_LOGGER_NAME = "pyorient.attitude.converters"

# Loggers that report Euler angle singularities at DEBUG
SINGULARITY_LOGGERS = (DCM_LOGGER_NAME, CONVERTERS_LOGGER_NAME)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logging.getLogger(DEFAULT_LOGGER_NAME).addHandler(logging.NullHandler())


def _level_value(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def _check_name(name: str):
    if name != DEFAULT_LOGGER_NAME and not name.startswith(DEFAULT_LOGGER_NAME + "."):
        raise ValueError(f"Logger {name!r} is not part of the {DEFAULT_LOGGER_NAME!r} hierarchy")


class ColoredFormatter(logging.Formatter):
    """Console formatter coloring the level name"""

    COLORS = {
        'DEBUG': '\033[34m',     # Blue
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # file handlers may share the record
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str = DEFAULT_LOGGER_NAME,
                 level: Union[str, int] = "WARNING",
                 log_file: Optional[str] = None,
                 console: bool = True) -> logging.Logger:
    """
    Attach handlers to a logger of the package.

    Handlers accept every record; filtering is done by logger levels, so a
    module set to DEBUG below a WARNING package logger still reaches them.

    Parameters:
    -----------
    name : str
        ``"pyorient"`` (default) or one of its submodule loggers
    level : str or int
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file : Optional[str]
        Log file path (if None, no file logging)
    console : bool
        Enable colored output on stdout

    Returns:
    --------
    logging.Logger
        Configured logger

    Raises:
    -------
    ValueError
        If the level is unknown or ``name`` is outside the package
    """
    _check_name(name)
    level_value = _level_value(level)

    logger = logging.getLogger(name)
    logger.setLevel(level_value)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


class LoggerConfig:
    """Levels for the package logger and its modules.

    The default level is WARNING, which shows matrix repairs and hides the
    DEBUG singularity records until :meth:`show_singularities` is called.
    """

    def __init__(self):
        self.default_level = "WARNING"
        self.module_levels = {}
        self.log_file = None
        self.console = True

    def set_default_level(self, level: Union[str, int]):
        _level_value(level)
        self.default_level = level

    def set_module_level(self, module_name: str, level: Union[str, int]):
        """Set log level for one module, e.g. ``pyorient.attitude.dcm``"""
        _check_name(module_name)
        _level_value(level)
        self.module_levels[module_name] = level

    def show_singularities(self, enabled: bool = True):
        """Report gimbal lock and singular nutation handling"""
        for name in SINGULARITY_LOGGERS:
            if enabled:
                self.module_levels[name] = "DEBUG"
            else:
                self.module_levels.pop(name, None)

    def get_level_for_module(self, module_name: str):
        return self.module_levels.get(module_name, self.default_level)

    def configure_from_dict(self, config: dict):
        """Configure from dictionary, see :func:`setup_logger_from_config`"""
        if 'default_level' in config:
            self.set_default_level(config['default_level'])
        if 'log_file' in config:
            self.log_file = config['log_file']
        if 'console' in config:
            self.console = config['console']
        if 'show_singularities' in config:
            self.show_singularities(config['show_singularities'])
        for module, level in config.get('module_levels', {}).items():
            self.set_module_level(module, level)

    def apply(self) -> logging.Logger:
        """Attach handlers to the package logger and set module levels"""
        logger = setup_logger(DEFAULT_LOGGER_NAME, self.default_level, self.log_file, self.console)
        for name in SINGULARITY_LOGGERS:
            if name not in self.module_levels:
                logging.getLogger(name).setLevel(logging.NOTSET)
        for module, level in self.module_levels.items():
            logging.getLogger(module).setLevel(_level_value(level))
        return logger


def setup_logger_from_config(config: dict) -> LoggerConfig:
    """Setup loggers from configuration dictionary

    Example config:
    {
        'default_level': 'WARNING',
        'log_file': 'orientation.log',
        'console': True,
        'show_singularities': True,
        'module_levels': {
            'pyorient.attitude.converters': 'INFO',
        }
    }
    """
    logger_config = LoggerConfig()
    logger_config.configure_from_dict(config)
    logger_config.apply()
    return logger_config
