"""
Read target locations out of a uVision project descriptor (.uvprojx).

Only three values are needed from the descriptor: the target name, the
output directory and the output name. Everything else the converter uses is
derived from them and from the descriptor's own location.
"""
import logging
import os
import xml.etree.ElementTree as ET
from collections import namedtuple

from keildb.errors import IOFailure, MalformedDescriptor, TargetNotFound

logger = logging.getLogger(__name__)

TargetInfo = namedtuple("TargetInfo", ["name", "output_directory", "output_name"])


def load_project(project):
    try:
        with open(project, "rb") as f:
            data = f.read()
    except OSError as e:
        raise IOFailure(f"cannot read project {project}: {e}") from e

    # bytes, so the encoding in the XML declaration is honoured
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedDescriptor(f"{project}: {e}") from e

    if root.tag != "Project":
        raise MalformedDescriptor(f"{project}: root element is <{root.tag}>, expected <Project>")
    return root


def to_posix(text):
    # uVision writes Windows separators everywhere, including OutputDirectory
    return text.replace("\\", "/")


def find_child(node, tag):
    child = node.find(tag)
    if child is None:
        raise MalformedDescriptor(f"no element named \"{tag}\" under <{node.tag}>")
    return child


def child_text(node, tag):
    text = find_child(node, tag).text
    if text is None:
        raise MalformedDescriptor(f"element \"{tag}\" has no text")
    return to_posix(text)


def iter_targets(root):
    targets = find_child(root, "Targets")
    for target in targets.findall("Target"):
        name = target.find("TargetName")
        if name is not None:
            yield target, to_posix(name.text or "")


def list_targets(project):
    return [name for _, name in iter_targets(load_project(project))]


def resolve_target(project, target_name=None):
    root = load_project(project)

    found = None
    for target, name in iter_targets(root):
        if target_name is None or name == target_name:
            found = (target, name)
            break
    if found is None:
        if target_name is None:
            raise TargetNotFound(f"{project}: no named target")
        raise TargetNotFound(f"{project}: no target named \"{target_name}\"")

    target, name = found
    common = find_child(find_child(target, "TargetOption"), "TargetCommonOption")
    info = TargetInfo(name, child_text(common, "OutputDirectory"), child_text(common, "OutputName"))
    logger.debug("resolved target %s: %s", name, info)
    return info


def trace_paths(project, info):
    """Return (dep_path, build_log_path) for a resolved target."""
    project_dir = os.path.dirname(os.path.abspath(project))
    stem = os.path.splitext(os.path.basename(project))[0]
    outdir = os.path.join(project_dir, info.output_directory)

    dep_path = os.path.join(outdir, f"{stem}_{info.name}.dep")
    build_log_path = os.path.join(outdir, f"{info.output_name}.build_log.htm")
    return dep_path, build_log_path
