import logging
import re
import shlex
from dataclasses import dataclass, field

from keildb.constants import INCLUDE_FLAG, TRACE_ENCODING
from keildb.errors import IOFailure, MalformedTrace

logger = logging.getLogger(__name__)

# F (<file>)(<hash>)(<shell-quoted arguments>)
RECORD_RE = re.compile(r"F \((.*?)\)\(.*?\)\((.*?)\)")


@dataclass
class CompileCommand:
    directory: str
    file: str
    arguments: list = field(default_factory=list)


def merge_include_flags(tokens):
    merged = []
    it = iter(tokens)
    for token in it:
        if token == INCLUDE_FLAG:
            value = next(it, None)
            if value is None:
                # dangling -I at the end of a record
                break
            token = INCLUDE_FLAG + value
        merged.append(token)
    return merged


def split_arguments(shell_str):
    try:
        tokens = shlex.split(shell_str)
    except ValueError as e:
        raise MalformedTrace(f"{e}: {shell_str!r}") from e
    return merge_include_flags(tokens)


def parse_dep_text(text, directory):
    text = text.replace("\\", "/").replace("\r", " ").replace("\n", " ")
    commands = []
    for m in RECORD_RE.finditer(text):
        file, shell_str = m.group(1), m.group(2)
        commands.append(CompileCommand(directory, file, split_arguments(shell_str)))
    return commands


def parse_dep_file(dep_path, directory, encoding=TRACE_ENCODING):
    try:
        with open(dep_path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise IOFailure(f"cannot read dependency trace {dep_path}: {e}") from e

    # uVision writes the trace in the ANSI code page of the machine that built it
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as e:
        raise MalformedTrace(f"{dep_path} is not valid {encoding} ({e.reason} at byte {e.start}), "
                             "set the trace encoding, e.g. KEILDB_ENCODING=gbk") from e
    except LookupError as e:
        raise MalformedTrace(f"unknown trace encoding {encoding!r}") from e

    commands = parse_dep_text(text, directory)
    logger.debug("parsed %d records from %s", len(commands), dep_path)
    return commands
