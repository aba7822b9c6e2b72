from keildb import transforms
from keildb.depfile import CompileCommand
from keildb.transforms import (append_arguments, filter_args, remove_arguments,
                               strip_sysroot_includes)


def make_commands():
    return [
        CompileCommand("/w", "a.c", ["-c", "-D", "DEBUG", "--cpu", "Cortex-M3", "-o", "a.o"]),
        CompileCommand("/w", "b.c", ["-c", "-o", "b.o", "--cpu", "-g"]),
    ]


def test_append_is_suffix():
    commands = make_commands()
    append_arguments(commands, ["--target=arm-arm-none-eabi", "-w"])
    assert commands[0].arguments[-2:] == ["--target=arm-arm-none-eabi", "-w"]
    assert commands[1].arguments == ["-c", "-o", "b.o", "--cpu", "-g",
                                     "--target=arm-arm-none-eabi", "-w"]


def test_append_twice_appends_twice():
    commands = make_commands()
    append_arguments(commands, ["-w"])
    append_arguments(commands, ["-w"])
    assert commands[1].arguments[-2:] == ["-w", "-w"]


def test_remove_flag_and_value():
    commands = make_commands()
    remove_arguments(commands, ["--cpu", "-o"])
    assert commands[0].arguments == ["-c", "-D", "DEBUG"]
    # value starting with '-' is not consumed
    assert commands[1].arguments == ["-c", "-g"]


def test_remove_is_idempotent():
    commands = make_commands()
    remove_arguments(commands, ["-D", "--cpu"])
    once = [list(c.arguments) for c in commands]
    remove_arguments(commands, ["-D", "--cpu"])
    assert [c.arguments for c in commands] == once


def test_remove_consumes_single_value_only():
    assert filter_args(["-x", "c", "main.c"], {"-x"}) == ["main.c"]
    assert filter_args(["-x", "c", "d"], {"-x"}) == ["d"]


def test_remove_ignores_attached_value():
    assert filter_args(["--cpu=Cortex-M3", "-c"], {"--cpu"}) == ["--cpu=Cortex-M3", "-c"]


def test_remove_flag_at_end():
    assert filter_args(["-c", "-o"], {"-o"}) == ["-c"]


def test_strip_sysroot_keeps_paths_with_std_headers(tmp_path):
    sysroot = tmp_path / "sysroot"
    sysroot.mkdir()
    (sysroot / "stdio.h").write_text("")
    cxx = tmp_path / "cxx"
    cxx.mkdir()
    (cxx / "iostream").write_text("")
    project = tmp_path / "inc"
    project.mkdir()
    (project / "main.h").write_text("")

    commands = [CompileCommand("/w", "a.c", [
        "-c", f"-I{sysroot}", f"-I{project}", f"-I{tmp_path}/missing", f"-I{cxx}", "a.c",
    ])]
    strip_sysroot_includes(commands)
    assert commands[0].arguments == ["-c", f"-I{sysroot}", f"-I{cxx}", "a.c"]


def test_strip_sysroot_probes_each_path_once(monkeypatch):
    probed = []

    def fake_probe(path):
        probed.append(path)
        return path == "/keep"

    monkeypatch.setattr(transforms, "contains_std_headers", fake_probe)
    commands = [CompileCommand("/w", f"{i}.c", ["-I/keep", "-I/drop", "-c"]) for i in range(50)]
    cache = strip_sysroot_includes(commands)

    assert sorted(probed) == ["/drop", "/keep"]
    assert cache == {"/keep": True, "/drop": False}
    assert all(c.arguments == ["-I/keep", "-c"] for c in commands)


def test_strip_sysroot_cache_is_per_call(monkeypatch):
    probed = []
    monkeypatch.setattr(transforms, "contains_std_headers", lambda p: probed.append(p) or True)
    commands = [CompileCommand("/w", "a.c", ["-I/x"])]
    strip_sysroot_includes(commands)
    strip_sysroot_includes(commands)
    assert probed == ["/x", "/x"]


def test_strip_sysroot_unreadable_path_is_negative(tmp_path):
    not_a_dir = tmp_path / "file.h"
    not_a_dir.write_text("")
    assert transforms.contains_std_headers(str(not_a_dir)) is False
    assert transforms.contains_std_headers("") is False
