"""locale_audit — consistency checker for rust-i18n locale files."""

__all__ = [
    "__version__",
    "check_project",
    "collect_key_usages",
    "load_locale_table",
    "validate_instance",
]
__version__ = "0.1.0"

# Programmatic entrypoints, see locale_audit.api.
from locale_audit.api import (  # noqa: E402, F401
    check_project,
    collect_key_usages,
    load_locale_table,
    validate_instance,
)
