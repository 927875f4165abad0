"""
Syntax highlighting service.

Renders source text as a self-contained HTML fragment with Pygments.

Dependencies: pygments, backend.configs.highlight
System role: Code display formatting
"""

import logging

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound

from backend.configs.highlight import HighlightSettings
from backend.core.exceptions import HighlightError, ValidationError

logger = logging.getLogger(__name__)


def resolve_lexer(
    lang: str | None,
    file_name: str | None = None,
    default_lang: str | None = None,
) -> Lexer:
    """
    Pick a lexer by alias, then by file name, then the default alias, then plain text.

    Args:
        lang: Lexer alias such as "python" or "js"
        file_name: File name used when the alias is unknown
        default_lang: Alias tried when neither lang nor file_name resolve and no lang was given

    Returns:
        Lexer: Pygments lexer instance
    """
    if lang:
        try:
            return get_lexer_by_name(lang, stripnl=False)
        except ClassNotFound:
            logger.debug("No lexer for alias %r", lang)
    if file_name:
        try:
            return get_lexer_for_filename(file_name, stripnl=False)
        except ClassNotFound:
            logger.debug("No lexer for file name %r", file_name)
    if default_lang and not lang:
        try:
            return get_lexer_by_name(default_lang, stripnl=False)
        except ClassNotFound:
            logger.warning("Configured default lexer %r does not exist", default_lang)
    return TextLexer(stripnl=False)


class HighlightService:
    """Service producing highlighted HTML."""

    def __init__(self, settings: HighlightSettings) -> None:
        """
        Initialize highlight service.

        Args:
            settings: Style and default language
        """
        self.settings = settings

    def highlight(self, code: str | None, lang: str | None = None, file_name: str | None = None) -> str:
        """
        Render code as HTML with inline styles.

        Args:
            code: Source text
            lang: Lexer alias
            file_name: Optional file name for lexer guessing

        Returns:
            str: HTML fragment

        Raises:
            ValidationError: Code is missing or empty
            HighlightError: Pygments failed to render
        """
        if not code:
            raise ValidationError("Code is required", field="code")

        lexer = resolve_lexer(lang, file_name, self.settings.default_lang)
        try:
            formatter = HtmlFormatter(style=self.settings.style, noclasses=True, wrapcode=True)
            return highlight(code, lexer, formatter)
        except Exception as e:
            logger.error(f"{__name__}:highlight - {type(e).__name__}: {e}")
            raise HighlightError(lang) from e
