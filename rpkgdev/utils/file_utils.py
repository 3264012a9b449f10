# rpkgdev/utils/file_utils.py
"""File operation utilities"""

import codecs
import fnmatch
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

from .template_utils import render_template


def is_binary_file(file_path: Path, sample_size: int = 512) -> bool:
    """
    Check if file is binary

    Args:
        file_path: Path to file
        sample_size: Bytes to sample

    Returns:
        True if file appears to be binary
    """
    with open(file_path, 'rb') as f:
        sample = f.read(sample_size)

    if b'\0' in sample:
        return True

    # A multi-byte character may be cut at the sample boundary
    decoder = codecs.getincrementaldecoder('utf-8')()
    try:
        decoder.decode(sample, final=False)
    except UnicodeDecodeError:
        return True

    return False


def scan_directory(directory: Path,
                   exclude_patterns: Optional[List[str]] = None,
                   recursive: bool = True) -> List[Path]:
    """
    Scan directory for files, hidden files included

    Args:
        directory: Directory to scan
        exclude_patterns: Patterns to exclude (matched against file names)
        recursive: Descend into subdirectories

    Returns:
        Sorted list of file paths
    """
    exclude_patterns = exclude_patterns or []
    files = []

    paths = directory.rglob('*') if recursive else directory.glob('*')
    for path in paths:
        if not path.is_file():
            continue
        if any(fnmatch.fnmatch(path.name, pattern) for pattern in exclude_patterns):
            continue
        files.append(path)

    return sorted(files)


def copy_template_file(src: Path, dst: Path, variables: Dict[str, Any]) -> None:
    """
    Copy one template file, rendering placeholders in text files

    Binary files are copied verbatim. Existing destination files are
    replaced. Errors propagate.

    Args:
        src: Source template file
        dst: Destination file
        variables: Placeholder values
    """
    dst.parent.mkdir(parents=True, exist_ok=True)

    if is_binary_file(src):
        shutil.copyfile(src, dst)
    else:
        content = src.read_text(encoding='utf-8')
        dst.write_text(render_template(content, variables), encoding='utf-8')

    # Copy file permissions
    shutil.copymode(src, dst)
