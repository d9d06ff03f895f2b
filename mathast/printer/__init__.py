"""
Text printer: package re-exports

Public API:
  TextPrinter, PrintConfig, PrinterFn, DEFAULT_PRINTER, print_node
"""

from .config import PrintConfig
from .text import TextPrinter, PrinterFn, DEFAULT_PRINTER, print_node

__all__ = ["TextPrinter", "PrintConfig", "PrinterFn", "DEFAULT_PRINTER", "print_node"]
