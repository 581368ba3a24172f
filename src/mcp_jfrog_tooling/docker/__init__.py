"""Docker shortcuts: buildx builder, multi-arch build/push, local build, run/shell, clean."""

from .build_local import run as run_build_local
from .build_multiarch import run as run_build_multiarch
from .build_multiarch import run_push
from .builder import run_clean_builder, run_setup_builder
from .clean import run as run_clean
from .container import run as run_container
from .container import run_shell

__all__ = [
    "run_build_local",
    "run_build_multiarch",
    "run_clean",
    "run_clean_builder",
    "run_container",
    "run_push",
    "run_setup_builder",
    "run_shell",
]
