import logging
import os
import re

from keildb.constants import COMPILER_PREFIXES

logger = logging.getLogger(__name__)

# bytes pattern: build logs are not always valid UTF-8
TOOLCHAIN_RE = re.compile(rb"Toolchain Path:\s*(.*)")


def find_toolchain_path(build_log):
    try:
        with open(build_log, "rb") as f:
            content = f.read()
    except OSError as e:
        logger.debug("no build log at %s: %s", build_log, e)
        return None

    m = TOOLCHAIN_RE.search(content)
    if not m:
        logger.debug("no toolchain path recorded in %s", build_log)
        return None
    path = m.group(1).decode("utf-8", errors="replace").strip()
    return path.replace("\\", "/") or None


def find_compiler(build_log):
    toolchain_dir = find_toolchain_path(build_log)
    if toolchain_dir is None:
        return None

    try:
        names = sorted(os.listdir(toolchain_dir))
    except OSError as e:
        logger.debug("cannot list toolchain directory %s: %s", toolchain_dir, e)
        return None

    for name in names:
        if name.startswith(COMPILER_PREFIXES):
            cc = os.path.join(toolchain_dir, name).replace("\\", "/")
            logger.debug("located compiler %s", cc)
            return cc
    logger.debug("no compiler executable in %s", toolchain_dir)
    return None
