"""Report rendering for check results."""

from locale_audit.reports.exporters import (  # noqa: F401
    export_json,
    export_markdown,
    export_text,
)
