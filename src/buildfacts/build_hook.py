"""setuptools integration: record build facts while the package is built.

Register the command in ``pyproject.toml``::

    [tool.setuptools.cmdclass]
    build_py = "buildfacts.build_hook.BuildPyWithFacts"

Every wheel built this way carries facts collected on the machine, and in
the environment, that produced it, instead of the ``built.py`` checked into
the source tree.
"""

import os
import sys
from pathlib import Path
from typing import Union

from setuptools.command.build_py import build_py


def write_build_facts(project_dir: Union[str, Path], build_lib: Union[str, Path, None] = None) -> Path:
    """Collect facts for a project and write its generated module.

    Args:
        project_dir: Directory containing pyproject.toml
        build_lib: Build directory of a wheel build. When omitted the module
            is written to its configured place in the source tree

    Returns:
        Path: The generated module
    """
    # Imported here: setuptools loads this module without its package
    from buildfacts.config import get_import_name, get_output_path, get_pyproject, get_settings
    from buildfacts.generator import collect_facts, write_built_file

    facts = collect_facts(project_dir)
    settings = get_settings(get_pyproject(project_dir))
    output_path = get_output_path(project_dir, facts["PKG_NAME"], settings)
    if build_lib is not None:
        output_path = Path(build_lib) / get_import_name(facts["PKG_NAME"]) / output_path.name

    write_built_file(output_path, facts)
    return output_path


class BuildPyWithFacts(build_py):
    """``build_py`` that regenerates the build facts module after copying sources."""

    def run(self):
        super().run()
        if self.dry_run:
            return

        project_dir = os.path.abspath(os.curdir)
        if getattr(self, "editable_mode", False):
            # Editable installs import straight from the source tree
            output_path = write_build_facts(project_dir)
        else:
            build_lib = os.path.abspath(self.build_lib)
            # The generator comes from the copy just built into build_lib
            sys.path.insert(0, build_lib)
            try:
                output_path = write_build_facts(project_dir, build_lib)
            finally:
                sys.path.remove(build_lib)
        self.announce(f"recorded build facts in {output_path}", level=2)
