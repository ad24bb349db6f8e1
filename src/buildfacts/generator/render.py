"""Rendering and writing of the generated build facts module."""

from pathlib import Path
from typing import Any, Mapping, Union

from ..models import FACT_CATALOG
from ..registry import BuildInfo


MODULE_DOCSTRING = '''"""Build facts recorded for this package.

Generated by ``buildfacts generate``. Regenerate instead of editing.
"""'''

GENERATED_BEGIN = "EVERYTHING BELOW THIS POINT WAS AUTO-GENERATED DURING THE BUILD. DO NOT MODIFY."
GENERATED_END = "EVERYTHING ABOVE THIS POINT WAS AUTO-GENERATED DURING THE BUILD. DO NOT MODIFY."


def _marker(text: str) -> str:
    return f"#\n# {text}\n#"


def render_built_module(facts: Mapping[str, Any]) -> str:
    """Render facts as the source of a leaf Python module.

    Values are written with ``repr`` so the module imports nothing. No
    timestamps are emitted, so identical facts always render identical bytes.

    Args:
        facts: Mapping of fact name to value, covering the whole catalog

    Returns:
        str: Module source text
    """
    lines = [MODULE_DOCSTRING, _marker(GENERATED_BEGIN), ""]
    for spec in FACT_CATALOG:
        lines.append(f"#: {spec.doc}")
        lines.append(f"{spec.name} = {facts[spec.name]!r}")
    lines.append("")
    lines.append(_marker(GENERATED_END))
    return "\n".join(lines) + "\n"


def write_built_file(path: Union[str, Path], facts: Mapping[str, Any], check: bool = False) -> bool:
    """Validate facts and write the generated module if its content changed.

    Args:
        path: Destination of the generated module
        facts: Mapping of fact name to value
        check: Only report whether the file would change, never write

    Returns:
        bool: True if the file content differs (and was written unless checking)

    Raises:
        ValueError: If the facts are incomplete or inconsistent
    """
    # Validation failures surface here, at build time, never at import
    BuildInfo.from_mapping(facts)

    path = Path(path)
    content = render_built_module(facts)

    if path.exists() and path.read_text(encoding="utf-8") == content:
        return False
    if check:
        return True

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(content, encoding="utf-8")
    tmp_path.replace(path)
    return True
