"""
Rewrite drive-letter paths (``C:/...``) through a user template.

The template may reference the drive letter with ``$DISK``/``$D`` (upper
case) or ``$disk``/``$d`` (lower case), optionally braced as ``${DISK}``.
``$$`` is a literal dollar sign. For example ``/mnt/$d`` turns
``-IC:/Keil/inc`` into ``-I/mnt/c/Keil/inc``.
"""
import enum
import re

MACRO_RE = re.compile(r"\$\$|\$\{(DISK|disk|D|d)\}|\$(DISK|disk|D|d)(?!\w)")

# optional --long-option / -I style prefix, then the drive letter
DRIVE_RE = re.compile(r"^((?:-{1,2}(?:[A-Za-z]+-)*[A-Za-z]+)?)([A-Za-z]):/")


class Half(enum.Enum):
    UPPER = 0
    LOWER = 1


class DiskTemplate:

    def __init__(self, parts):
        self.parts = parts

    def render(self, upper, lower):
        halves = {Half.UPPER: upper, Half.LOWER: lower}
        return "".join(halves[p] if isinstance(p, Half) else p for p in self.parts)

    def substitute(self, path):
        def repl(m):
            option, letter = m.group(1), m.group(2)
            return option + self.render(letter.upper(), letter.lower()) + "/"
        return DRIVE_RE.sub(repl, path, count=1)


def compile_template(template):
    parts = []
    literal = ""
    pos = 0
    for m in MACRO_RE.finditer(template):
        literal += template[pos:m.start()]
        pos = m.end()
        if m.group(0) == "$$":
            literal += "$"
            continue
        macro = m.group(1) or m.group(2)
        if literal:
            parts.append(literal)
            literal = ""
        parts.append(Half.UPPER if "D" in macro else Half.LOWER)
    literal += template[pos:]
    if literal:
        parts.append(literal)
    return DiskTemplate(parts)


def replace_disk(commands, template):
    if not isinstance(template, DiskTemplate):
        template = compile_template(template)
    for command in commands:
        command.file = template.substitute(command.file)
        command.arguments = [template.substitute(arg) for arg in command.arguments]
