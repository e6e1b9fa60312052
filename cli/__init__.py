"""CLI package namespace.

Keep package import side-effect free so submodules can be imported independently
without pulling the full handler graph (the Qt shell imports rasp directly).
"""

__all__ = []
