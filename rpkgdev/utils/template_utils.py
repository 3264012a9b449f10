"""Template processing utilities"""

from datetime import datetime
from typing import Any, Dict

from ..constants import PLACEHOLDER_PATTERN


def render_template(template: str, variables: Dict[str, Any]) -> str:
    """
    Render ``{{ name }}`` placeholders in a template string

    Unknown placeholders are left untouched, so GitHub Actions expressions
    like ``${{ matrix.os }}`` survive.

    Args:
        template: Template string
        variables: Variables to substitute

    Returns:
        Rendered string
    """
    def replace(match):
        key = match.group(1)
        if key in variables:
            return str(variables[key])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)


def create_template_context(package_name: str, **extra: Any) -> Dict[str, Any]:
    """
    Create the substitution context shared by all template files

    Args:
        package_name: Resolved package name
        **extra: Additional variables

    Returns:
        Template context dictionary
    """
    context = {
        'package_name': package_name,
        'package': package_name,
        'year': str(datetime.now().year),
    }
    context.update(extra)
    return context
