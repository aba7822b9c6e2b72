import logging
import sys

import click

from keildb import descriptor
from keildb.constants import OUTPUT_FILE, TRACE_ENCODING
from keildb.convertor import Converter
from keildb.errors import KeildbError


@click.group()
@click.option("--verbose", "-v", is_flag=True)
def commands(verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")


@commands.command()
@click.argument("projects", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--target", "-t", default=None, help="Target name (default: first target)")
@click.option("--append", "-a", "extra", multiple=True, help="Argument appended to every command")
@click.option("--remove", "-r", "removed", multiple=True, help="Flag removed with its value")
@click.option("--strip-sysroot", is_flag=True,
              help="Drop include paths that hold no standard headers")
@click.option("--disk", "-d", default=None, help="Template for drive letters, e.g. /mnt/$d")
@click.option("--encoding", "-e", default=TRACE_ENCODING, show_default=True,
              help="Encoding of the .dep files, e.g. gbk")
@click.option("--output", "-o", default=OUTPUT_FILE, show_default=True)
@click.option("--build/--no-build", default=sys.platform == "win32",
              help="Run UV4 when the .dep file is missing")
def convert(projects, target, extra, removed, strip_sysroot, disk, encoding, output, build):
    try:
        convertor = Converter()
        for project in projects:
            convertor.extend(Converter.from_project(project, target, build=build,
                                                      encoding=encoding))

        if removed:
            convertor.remove_arguments(removed)
        if extra:
            convertor.add_arguments(list(extra))
        # sysroot probing needs the rewritten include paths
        if disk is not None:
            convertor.replace_disk(disk)
        if strip_sysroot:
            convertor.remove_sysroot()

        text = convertor.dumps()
    except KeildbError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    if output == "-":
        click.echo(text, nl=False)
        return
    try:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        click.echo(f"ERROR: cannot write {output}: {e}", err=True)
        sys.exit(1)
    click.echo(f"Wrote {len(convertor)} commands to {output}")


@commands.command()
@click.argument("project", type=click.Path(exists=True, dir_okay=False))
def targets(project):
    try:
        names = descriptor.list_targets(project)
    except KeildbError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)
    for name in names:
        click.echo(name)


if __name__ == "__main__":
    commands()
