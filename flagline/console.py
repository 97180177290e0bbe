# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Flagline debug and summary output."""
from rich.console import Console

console = Console(color_system="truecolor")
