"""
Offline export of event views.
"""

from .json_export import ExportDocument, build_export, load_events, export_filename

__all__ = [
    'ExportDocument',
    'build_export',
    'load_events',
    'export_filename',
]
