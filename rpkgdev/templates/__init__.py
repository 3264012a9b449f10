"""Built-in package templates for rpkgdev"""

from pathlib import Path
from typing import Dict, Optional

from ..api.exceptions import TemplateNotFoundError

# Template directory path
TEMPLATES_DIR = Path(__file__).parent


def get_template_root(root: Optional[Path] = None) -> Path:
    """
    Get the template root directory

    Args:
        root: Alternative template root (defaults to the bundled templates)

    Returns:
        Path to the template root

    Raises:
        TemplateNotFoundError: If the directory does not exist
    """
    template_root = Path(root) if root is not None else TEMPLATES_DIR

    if not template_root.is_dir():
        raise TemplateNotFoundError(str(template_root))

    return template_root


def get_template_path(category: str, name: str,
                      root: Optional[Path] = None) -> Optional[Path]:
    """
    Get path to a template file

    Args:
        category: Template category (core, project, dev, ...)
        name: Template name
        root: Alternative template root

    Returns:
        Path to template file or None if not found
    """
    template_path = (Path(root) if root is not None else TEMPLATES_DIR) / category / name

    if template_path.exists():
        return template_path

    return None


def load_template(category: str, name: str, root: Optional[Path] = None) -> str:
    """
    Load template content

    Raises:
        TemplateNotFoundError: If the template file is missing
    """
    template_path = get_template_path(category, name, root)

    if template_path is None:
        base = Path(root) if root is not None else TEMPLATES_DIR
        raise TemplateNotFoundError(str(base / category / name))

    return template_path.read_text(encoding='utf-8')


def list_templates(root: Optional[Path] = None) -> Dict[str, list]:
    """
    List all available templates

    Returns:
        Dictionary mapping categories to template file paths (relative to category)
    """
    templates = {}
    template_root = Path(root) if root is not None else TEMPLATES_DIR

    for category_dir in sorted(template_root.iterdir()):
        if category_dir.is_dir() and not category_dir.name.startswith('__'):
            templates[category_dir.name] = sorted(
                path.relative_to(category_dir).as_posix()
                for path in category_dir.rglob('*')
                if path.is_file() and not path.name.startswith('__')
            )

    return templates


DESCRIPTION_TEMPLATE = ("project", "DESCRIPTION")
NAMESPACE_TEMPLATE = ("project", "NAMESPACE")
LICENSE_TEMPLATE = ("project", "LICENSE")
RPROJ_TEMPLATE = ("project", "Rproj")

__all__ = [
    'TEMPLATES_DIR',
    'get_template_root',
    'get_template_path',
    'load_template',
    'list_templates',
    'DESCRIPTION_TEMPLATE',
    'NAMESPACE_TEMPLATE',
    'LICENSE_TEMPLATE',
    'RPROJ_TEMPLATE',
]
