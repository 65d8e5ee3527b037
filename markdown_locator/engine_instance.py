"""Global search engine instance to avoid circular imports."""

from .core.engine import SearchEngine
from .config import get_settings

# Global search engine instance
settings = get_settings()
search_engine = SearchEngine(
    respect_gitignore=settings.respect_gitignore,
    ignore_file=settings.ignore_file,
    extension=settings.markdown_extension,
)
