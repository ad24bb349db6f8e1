"""Build step that collects build facts and writes the generated module."""

from .ci import detect_ci_platform
from .collect import collect_facts
from .render import render_built_module, write_built_file

__all__ = [
    'detect_ci_platform',
    'collect_facts',
    'render_built_module',
    'write_built_file',
]
