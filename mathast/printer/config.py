"""
Printer configuration.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class PrintConfig:
	"""
	Rendering knobs for TextPrinter. Keys derived from printed text are only
	comparable between nodes printed with the same configuration.
	"""
	mul_symbol: str = "*"
	implicit_separator: str = " "
	spaced: bool = True
