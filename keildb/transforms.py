"""
In-place argument transforms applied uniformly to every compile command.
"""
import enum
import logging
import os

from keildb.constants import INCLUDE_FLAG, STD_HEADER_MARKERS

logger = logging.getLogger(__name__)


class _State(enum.Enum):
    SCANNING = 0
    SKIP_NEXT = 1


def append_arguments(commands, extra):
    for command in commands:
        command.arguments.extend(extra)


def filter_args(args, prefixes):
    """
    Drop every token listed in ``prefixes`` together with the one token after
    it, when that token does not start with '-'.

    Only a single value is consumed per matched flag, and '-D=VALUE' style
    tokens are removed only when listed verbatim.
    """
    filtered = []
    state = _State.SCANNING
    for i, arg in enumerate(args):
        if state is _State.SKIP_NEXT:
            state = _State.SCANNING
            continue
        if arg in prefixes:
            if i + 1 < len(args) and not args[i + 1].startswith("-"):
                state = _State.SKIP_NEXT
            continue
        filtered.append(arg)
    return filtered


def remove_arguments(commands, prefixes):
    prefixes = set(prefixes)
    for command in commands:
        command.arguments = filter_args(command.arguments, prefixes)


def contains_std_headers(path):
    try:
        with os.scandir(path) as entries:
            return any(entry.name in STD_HEADER_MARKERS for entry in entries)
    except OSError:
        return False


def strip_sysroot_includes(commands, cache=None):
    """
    Keep an include path only if it directly holds a standard header.

    ``cache`` maps path -> probe result; a fresh one is used per call unless
    the caller passes its own.
    """
    if cache is None:
        cache = {}

    def keep(arg):
        if not arg.startswith(INCLUDE_FLAG):
            return True
        path = arg[len(INCLUDE_FLAG):]
        if path not in cache:
            cache[path] = contains_std_headers(path)
            logger.debug("probed include %s: %s", path, cache[path])
        return cache[path]

    for command in commands:
        command.arguments = [arg for arg in command.arguments if keep(arg)]
    return cache
