"""Utility functions for rpkgdev"""

from .file_utils import (
    is_binary_file,
    scan_directory,
    copy_template_file,
)

from .git_utils import (
    find_git,
    init_git_repo,
)

from .template_utils import (
    render_template,
    create_template_context,
)

__all__ = [
    # File utilities
    "is_binary_file",
    "scan_directory",
    "copy_template_file",

    # Git utilities
    "find_git",
    "init_git_repo",

    # Template utilities
    "render_template",
    "create_template_context",
]
