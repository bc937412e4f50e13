"""Console output for the crosspath command line.

Provides themed Rich output with a plain-text fallback for pipes and
terminals that should not receive escape codes.
"""

import os
import sys
import traceback
from dataclasses import dataclass
from typing import Any, List, Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

ERROR_ICON = "[x]"


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    error: str
    path: str
    true: str
    false: str
    dim: str


THEMES = {
    'manhattan': ThemeColors(
        error='red',
        path='white',
        true='bright_green',
        false='bright_red',
        dim='bright_black',
    ),
    'matrix': ThemeColors(
        error='red',
        path='green',
        true='bright_green',
        false='red',
        dim='green',
    ),
}


class ConsoleManager:
    """Console with theme support and Rich/plain fallback."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_plain: Force plain output even on a color terminal
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout
        self.use_rich = not force_plain and self._should_use_rich_terminal()

        if self.use_rich:
            self.console = Console(
                theme=self._create_rich_theme(),
                file=self.file,
                force_terminal=True,
                highlight=False
            )
        else:
            self.console = None

    def _should_use_rich_terminal(self) -> bool:
        """Terminal detection for Rich compatibility."""
        if os.environ.get('NO_COLOR'):
            return False
        if os.environ.get('FORCE_COLOR'):
            return True
        return hasattr(self.file, 'isatty') and self.file.isatty()

    def _create_rich_theme(self) -> Theme:
        colors = self.theme_colors
        return Theme({
            'error': colors.error,
            'path': colors.path,
            'true': colors.true,
            'false': colors.false,
            'dim': colors.dim,
        })

    def print_value(self, value: Any):
        """Print an operation result: a path, a boolean or a list of segments."""
        if isinstance(value, bool):
            word = "true" if value else "false"
            if self.use_rich:
                self.console.print(Text(word, style="true" if value else "false"))
            else:
                print(word, file=self.file)
        elif isinstance(value, list):
            self._print_segments(value)
        elif self.use_rich:
            # Paths may contain "[" which Rich would read as markup
            self.console.print(Text(value, style="path"))
        else:
            print(value, file=self.file)

    def _print_segments(self, segments: List[str]):
        for index, segment in enumerate(segments):
            if self.use_rich:
                line = Text()
                line.append(f"{index:>3} ", style="dim")
                line.append(segment, style="path")
                self.console.print(line)
            else:
                print(segment, file=self.file)

    def print_error(self, message: str):
        """Print an error line with icon."""
        if self.use_rich:
            error_text = Text()
            error_text.append(f"{ERROR_ICON} ", style="error")
            error_text.append(message)
            self.console.print(error_text)
        else:
            print(f"{ERROR_ICON} {message}", file=self.file)

    def print_exception(self):
        """Print exception traceback with Rich formatting if available."""
        if self.use_rich:
            self.console.print_exception()
        else:
            traceback.print_exc(file=self.file)
