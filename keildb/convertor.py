import dataclasses
import json
import logging
import os

from keildb import builder, descriptor, disk, toolchain, transforms
from keildb.constants import TRACE_ENCODING
from keildb.depfile import CompileCommand, parse_dep_file
from keildb.errors import IOFailure, SerializationFailure

logger = logging.getLogger(__name__)


class Converter:
    """Ordered list of compile commands for one or more uVision targets."""

    def __init__(self, commands=None):
        self.commands = list(commands) if commands else []

    @classmethod
    def from_project(cls, project, target_name=None, build=False, encoding=TRACE_ENCODING):
        info = descriptor.resolve_target(project, target_name)
        dep_path, build_log_path = descriptor.trace_paths(project, info)
        directory = os.path.dirname(os.path.abspath(project)).replace("\\", "/")

        if build and not os.path.exists(dep_path):
            logger.info("%s does not exist, trying to compile...", dep_path)
            builder.try_compile(project)

        commands = parse_dep_file(dep_path, directory, encoding)
        cc = toolchain.find_compiler(build_log_path)
        if cc is not None:
            for command in commands:
                command.arguments.insert(0, cc)
        logger.debug("%s [%s]: %d commands", project, info.name, len(commands))
        return cls(commands)

    def __len__(self):
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def __add__(self, other):
        # copies, so transforming the sum leaves both operands untouched
        return Converter(dataclasses.replace(c, arguments=list(c.arguments))
                         for c in self.commands + other.commands)

    def extend(self, other):
        self.commands.extend(other.commands)

    def add_arguments(self, arguments):
        transforms.append_arguments(self.commands, arguments)

    def remove_arguments(self, prefixes):
        transforms.remove_arguments(self.commands, prefixes)

    def remove_sysroot(self):
        transforms.strip_sysroot_includes(self.commands)

    def replace_disk(self, template):
        disk.replace_disk(self.commands, template)

    def dumps(self):
        try:
            return json.dumps([dataclasses.asdict(c) for c in self.commands],
                              indent=2, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as e:
            raise SerializationFailure(str(e)) from e

    def dump(self, fp):
        text = self.dumps()
        try:
            fp.write(text)
        except OSError as e:
            raise IOFailure(f"cannot write compilation database: {e}") from e
