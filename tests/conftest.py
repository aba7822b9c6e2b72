import pytest

PROJECT_TEMPLATE = """<?xml version="1.0" encoding="UTF-8" standalone="no" ?>
<Project xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xsi:noNamespaceSchemaLocation="project_projx.xsd">
  <SchemaVersion>2.1</SchemaVersion>
  <Header>### uVision Project, (C) Keil Software</Header>
  <Targets>
{targets}
  </Targets>
</Project>
"""

TARGET_TEMPLATE = """    <Target>
      <TargetName>{name}</TargetName>
      <ToolsetNumber>0x4</ToolsetNumber>
      <TargetOption>
        <TargetCommonOption>
          <Device>STM32F103C8</Device>
          <OutputDirectory>{outdir}</OutputDirectory>
          <OutputName>{outname}</OutputName>
        </TargetCommonOption>
      </TargetOption>
    </Target>"""


def render_project(targets):
    body = "\n".join(TARGET_TEMPLATE.format(name=n, outdir=d, outname=o) for n, d, o in targets)
    return PROJECT_TEMPLATE.format(targets=body)


@pytest.fixture
def make_project(tmp_path):
    """Write a .uvprojx plus optional .dep / build log, return its path."""
    def make(targets=(("Debug", ".\\Objects\\", "app"),), dep=None, build_log=None,
             name="proj.uvprojx"):
        project = tmp_path / name
        project.write_text(render_project(targets), encoding="utf-8")
        target, outdir, outname = targets[0]
        objects = tmp_path / outdir.replace("\\", "/")
        objects.mkdir(parents=True, exist_ok=True)
        if dep is not None:
            stem = name.rsplit(".", 1)[0]
            dep_file = objects / f"{stem}_{target}.dep"
            if isinstance(dep, bytes):
                dep_file.write_bytes(dep)
            else:
                dep_file.write_text(dep, encoding="utf-8")
        if build_log is not None:
            (objects / f"{outname}.build_log.htm").write_bytes(build_log)
        return project
    return make
