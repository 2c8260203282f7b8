# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used to print usage and help text."""
from rich.console import Console

console = Console(highlight=False)
