import logging
import os
import shutil
import subprocess

from keildb.constants import BUILD_TIMEOUT, UV4_PATH
from keildb.errors import BuildFailure

logger = logging.getLogger(__name__)


def find_uv4():
    uv4 = shutil.which("UV4")
    if uv4:
        return uv4
    if os.path.isfile(UV4_PATH):
        return UV4_PATH
    raise BuildFailure(f"no UV4 executable in PATH and {UV4_PATH} does not exist")


def try_compile(project):
    """Rebuild the project with uVision so it regenerates its .dep file."""
    command = [find_uv4(), "-j", "-r", os.fspath(project)]
    logger.debug("running %s", command)
    try:
        result = subprocess.run(command, stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
                                timeout=BUILD_TIMEOUT)
    except subprocess.TimeoutExpired as e:
        raise BuildFailure(f"build of {project} timed out after {BUILD_TIMEOUT} sec") from e
    except OSError as e:
        raise BuildFailure(f"cannot run {command[0]}: {e}") from e

    if result.returncode != 0:
        raise BuildFailure(f"compilation of {project} failed (exit {result.returncode}), "
                           "please check your project")
