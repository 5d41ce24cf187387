"""Cross-cutting helpers: typed environment loading, parsers, validators, logging."""

from common_utils.environment import EnvironmentBuilder, EnvSnapshot, build_environment, load_env_file
from common_utils.errors import CommonError, ErrorHandler, MissingFileError, ParseError
from common_utils.files import FileHandler
from common_utils.logging import SUCCESS, get_logger, setup_logging, success
from common_utils.validators import GUID

__all__ = [
    "EnvironmentBuilder",
    "EnvSnapshot",
    "build_environment",
    "load_env_file",
    "CommonError",
    "ErrorHandler",
    "MissingFileError",
    "ParseError",
    "FileHandler",
    "SUCCESS",
    "get_logger",
    "setup_logging",
    "success",
    "GUID",
]
