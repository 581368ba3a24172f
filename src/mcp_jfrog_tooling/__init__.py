"""mcp-jfrog image tooling: multi-arch build/push, local build, run/shell, cleanup.

Every shortcut delegates to docker (buildx) or npm; see ``mcp-jfrog help``.
"""

__version__ = "0.1.0"
