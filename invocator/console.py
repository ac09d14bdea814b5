# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Invocator output."""
from rich.console import Console

console = Console(color_system="truecolor")
