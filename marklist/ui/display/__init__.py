# marklist/ui/display/__init__.py
# Non-interactive result display

from .reporting import build_summary_table, print_success_line, report_summary

__all__ = ["build_summary_table", "print_success_line", "report_summary"]
