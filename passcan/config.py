"""
Configuration management for Passcan
"""
from dataclasses import dataclass, field
from typing import Optional

import psutil


# Directory names pruned from traversal (case-insensitive)
IGNORED_DIRS = frozenset({
    'node_modules', '.git', '.vscode', '__pycache__', 'target', 'build', '.idea'
})

# Exact file names never scanned
IGNORED_FILES = frozenset({
    'package-lock.json', 'yarn.lock', 'Cargo.lock', '.gitignore', 'README.md'
})

# Name suffixes never scanned, even if they also look like code
IGNORED_EXTENSIONS = ('.log', '.min.js', '.lock', '.html', '.json')

# Developer-authored files eligible for scanning
CODE_EXTENSIONS = (
    '.env', '.py', '.js', '.ts', '.rs', '.go', '.sh', '.java',
    '.yml', '.yaml', '.toml', '.md',
)

# (label, regex) pairs, evaluated in this order
SECRET_PATTERNS = (
    ('AWS Access Key', r'AKIA[0-9A-Z]{16}'),
    ('OpenAI Key', r'sk-[a-zA-Z0-9]{48}'),
    ('Slack Token', r'xox[baprs]-[a-zA-Z0-9-]{10,48}'),
    ('Generic Token', r'[a-zA-Z0-9_-]{32,}'),
    ('Password', r'(?i)password\s*=\s*["\']?.+?["\']?'),
)

# Catch-all rules are not reported when every one of their matches lies
# inside a match of a shadowing rule
CATCH_ALL_PATTERNS = frozenset({'Generic Token'})
SHADOWING_PATTERNS = frozenset({'AWS Access Key', 'OpenAI Key', 'Slack Token'})

BINARY_SNIFF_BYTES = 8000

# Upper bound on characters handed to the regex engine at once
MAX_LINE_LENGTH = 64 * 1024

REPORT_FORMATS = ('table', 'json', 'markdown', 'html')


def default_thread_count() -> int:
    """One worker per logical core, 4 if the core count is unknown"""
    return psutil.cpu_count(logical=True) or 4


@dataclass
class Config:
    """Runtime options for a Passcan run"""
    scan_path: str = '.'
    output_dir: Optional[str] = None
    report_format: str = 'table'
    num_threads: int = field(default_factory=default_thread_count)
    verbose: bool = False
    show_progress: bool = True

    # Compiled-in tables, shared read-only by every worker
    ignored_dirs = IGNORED_DIRS
    ignored_files = IGNORED_FILES
    ignored_extensions = IGNORED_EXTENSIONS
    code_extensions = CODE_EXTENSIONS
    secret_patterns = SECRET_PATTERNS
    max_line_length = MAX_LINE_LENGTH

    def __post_init__(self):
        if self.report_format not in REPORT_FORMATS:
            raise ValueError(f"Unsupported report format: {self.report_format}")
        if self.num_threads < 1:
            raise ValueError(f"num_threads must be at least 1, got {self.num_threads}")
