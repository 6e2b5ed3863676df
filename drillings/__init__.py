"""Terminal status lines, rust-project.json generation and worked lesson solutions."""

__version__ = "5.5.1"