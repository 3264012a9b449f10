"""Package descriptor (DESCRIPTION) generation and reading"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Union

from .config import DeployerConfig
from ..api.exceptions import PackageNotFoundError
from ..templates import (
    DESCRIPTION_TEMPLATE,
    LICENSE_TEMPLATE,
    NAMESPACE_TEMPLATE,
    load_template,
)
from ..utils.template_utils import create_template_context, render_template

DESCRIPTOR_FILE = "DESCRIPTION"

_FIELD_RE = re.compile(r'^([A-Za-z][A-Za-z0-9_.@/-]+)\s*:')


def write_descriptor(destination: Path,
                     package_name: str,
                     config: Optional[DeployerConfig] = None,
                     template_root: Optional[Path] = None) -> List[str]:
    """
    Write DESCRIPTION, NAMESPACE and LICENSE for a new package

    Args:
        destination: Package root
        package_name: Resolved package name
        config: Metadata defaults
        template_root: Alternative template root

    Returns:
        Relative paths of the written files
    """
    config = config or DeployerConfig()
    context = create_template_context(
        package_name,
        title=config.title,
        version=config.version,
        description=config.description,
        author_given=config.author_given,
        author_family=config.author_family,
        author_email=config.author_email,
        license=config.license,
    )

    written = []
    for (category, name), filename in (
        (DESCRIPTION_TEMPLATE, DESCRIPTOR_FILE),
        (NAMESPACE_TEMPLATE, "NAMESPACE"),
        (LICENSE_TEMPLATE, "LICENSE"),
    ):
        if filename == "LICENSE" and "file LICENSE" not in config.license:
            continue
        content = render_template(load_template(category, name, template_root), context)
        (destination / filename).write_text(content, encoding='utf-8')
        written.append(filename)

    return written


def parse_description(path: Union[str, Path]) -> Dict[str, str]:
    """
    Parse a DESCRIPTION file into a dict of fields

    Continuation lines (leading whitespace) are joined to their field.

    Args:
        path: Package root or the DESCRIPTION file itself

    Returns:
        Field name to value mapping; empty if the file does not exist
    """
    desc_file = Path(path)
    if desc_file.is_dir():
        desc_file = desc_file / DESCRIPTOR_FILE
    if not desc_file.exists():
        return {}

    fields = {}
    current_key = None
    current_value = []
    for line in desc_file.read_text(encoding="utf-8", errors="replace").splitlines():
        m = _FIELD_RE.match(line)
        if m and not line.startswith((" ", "\t")):
            if current_key:
                fields[current_key] = " ".join(current_value).strip()
            current_key = m.group(1)
            current_value = [line[m.end():].strip()]
        elif current_key and line.startswith((" ", "\t")):
            current_value.append(line.strip())
    if current_key:
        fields[current_key] = " ".join(current_value).strip()
    return fields


def validate_package_path(path: Union[str, Path]) -> Path:
    """
    Check that a directory is an R package

    Args:
        path: Package directory

    Returns:
        Absolute path to the package

    Raises:
        PackageNotFoundError: If no DESCRIPTION file exists
    """
    pkg = Path(path).expanduser().resolve()
    if not (pkg / DESCRIPTOR_FILE).is_file():
        raise PackageNotFoundError(str(pkg))
    return pkg
