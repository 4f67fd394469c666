"""
YAML export of the domain model.

A convenience dump for inspection and fixtures; it is not meant to be read
back into the model.
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from ruamel.yaml import YAML


def _yaml() -> YAML:
    yaml = YAML()
    yaml.indent(mapping=2, sequence=4, offset=2)
    yaml.default_flow_style = False
    yaml.allow_unicode = True
    yaml.width = 4096
    return yaml


def to_yaml(
    model: BaseModel,
    output_path: Optional[str | Path] = None,
    exclude_none: bool = True,
) -> str:
    """
    Dump ``model`` to YAML.

    Args:
        model: Any model of this package (Component, Collection, Release …)
        output_path: Optional file path to save the YAML
        exclude_none: Leave out unset optional fields

    Returns:
        The YAML document as a string
    """
    data = model.model_dump(mode="json", exclude_none=exclude_none)

    stream = StringIO()
    _yaml().dump(data, stream)
    yaml_content = stream.getvalue()

    if output_path:
        Path(output_path).write_text(yaml_content, encoding="utf-8")
    return yaml_content
