"""
name_rules.py - Rename Strategies

Each strategy maps the ordered file list to (old name, new name) pairs.
Pairs whose name does not change are still emitted; the plan builder drops them.
"""

from datetime import datetime
from typing import Callable, Dict, List, Type

from .errors import InvalidTimestamp
from .models_fs import (
    FileEntry, RenamePair, StrategyConfig,
    SequentialConfig, DatePrefixConfig, FindReplaceConfig, LowercaseConfig,
)
from .text_match import ascii_lower, replace_text


def format_counter(num: int, pad: int) -> str:
    """Zero-pad to a minimum width; wider numbers are never truncated"""
    if pad > 0:
        return str(num).zfill(pad)
    return str(num)


def format_date(timestamp: float) -> str:
    """YYYY-MM-DD in the host's local timezone"""
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d")


def sequential_names(entries: List[FileEntry], config: SequentialConfig) -> List[RenamePair]:
    # The counter advances for every file, including ones whose name is unchanged
    pairs = []
    for i, f in enumerate(entries):
        num_str = format_counter(config.start + i, config.pad)
        pairs.append(RenamePair(f.name, f"{num_str}-{f.name}"))
    return pairs


def date_prefix_names(entries: List[FileEntry], config: DatePrefixConfig) -> List[RenamePair]:
    pairs = []
    for f in entries:
        try:
            date_str = format_date(f.mtime)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidTimestamp(f.name, f.mtime, e) from e
        pairs.append(RenamePair(f.name, f"{date_str}-{f.name}"))
    return pairs


def find_replace_names(entries: List[FileEntry], config: FindReplaceConfig) -> List[RenamePair]:
    return [
        RenamePair(f.name, replace_text(f.name, config.find, config.replace))
        for f in entries
    ]


def lowercase_names(entries: List[FileEntry], config: LowercaseConfig) -> List[RenamePair]:
    return [RenamePair(f.name, ascii_lower(f.name)) for f in entries]


_STRATEGIES: Dict[Type, Callable[[List[FileEntry], StrategyConfig], List[RenamePair]]] = {
    SequentialConfig: sequential_names,
    DatePrefixConfig: date_prefix_names,
    FindReplaceConfig: find_replace_names,
    LowercaseConfig: lowercase_names,
}


def get_strategy(config: StrategyConfig) -> Callable[[List[FileEntry], StrategyConfig], List[RenamePair]]:
    """
    Get the strategy function for a config

    Args:
        config: Strategy config instance

    Returns:
        Strategy function

    Raises:
        TypeError: config is not one of the known strategy configs
    """
    try:
        return _STRATEGIES[type(config)]
    except KeyError:
        raise TypeError(f"Unknown strategy config: {type(config).__name__}") from None


def compute_names(entries: List[FileEntry], config: StrategyConfig) -> List[RenamePair]:
    """Run the strategy selected by config over the ordered entries"""
    return get_strategy(config)(entries, config)
