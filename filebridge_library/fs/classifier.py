"""Extension based language tagging."""

from pathlib import PurePath

DEFAULT_LANGUAGE = "text"

# Keys are lower-case extensions including the dot
LANGUAGE_BY_EXTENSION: dict[str, str] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".py": "python",
    ".java": "java",
    ".cpp": "cpp",
    ".c": "c",
    ".h": "c",
    ".css": "css",
    ".scss": "scss",
    ".sass": "sass",
    ".html": "html",
    ".xml": "xml",
    ".json": "json",
    ".md": "markdown",
    ".sql": "sql",
    ".sh": "shell",
    ".php": "php",
    ".rb": "ruby",
    ".go": "go",
    ".rs": "rust",
    ".kt": "kotlin",
    ".swift": "swift",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".dockerfile": "dockerfile",
    ".gitignore": "text",
    ".env": "text",
    ".txt": "text",
}


def classify(file_name: str) -> str:
    """Return the language tag for a file name.

    Matching is on the last extension, case-insensitively. Names without a
    known extension get the default "text" tag.

    Example:
        >>> classify("Main.PY")
        'python'
        >>> classify("Makefile")
        'text'
    """
    suffix = PurePath(file_name).suffix.lower()
    return LANGUAGE_BY_EXTENSION.get(suffix, DEFAULT_LANGUAGE)
