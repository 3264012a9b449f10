"""CLI utility functions"""

from .output import (
    console,
    format_deployment_result,
    format_table,
    print_json,
    print_error,
)

__all__ = [
    'console',
    'format_deployment_result',
    'format_table',
    'print_json',
    'print_error',
]
