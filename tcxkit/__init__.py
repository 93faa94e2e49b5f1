"""This is the init module for tcxkit"""

from .exceptions import ConfigError, MalformedValueError, MissingFieldError, TcxError
from .laps import combine_laps
from .moving_time import DEFAULT_MOVING_SPEED_THRESHOLD, moving_time
from .parser import parse, parse_activity, parse_bytes, parse_lap, parse_tree
from .sport import SportType, classify_sport

__version__ = "0.0.1"
__all__ = [
    "DEFAULT_MOVING_SPEED_THRESHOLD",
    "ConfigError",
    "MalformedValueError",
    "MissingFieldError",
    "SportType",
    "TcxError",
    "classify_sport",
    "combine_laps",
    "moving_time",
    "parse",
    "parse_activity",
    "parse_bytes",
    "parse_lap",
    "parse_tree",
]
