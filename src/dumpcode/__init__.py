"""dumpcode — dump a project's source tree as one LLM-friendly document."""

__all__ = [
    "__version__",
    "ScanConfig",
    "assemble",
    "build_manifest",
    "classify",
    "dump_project",
    "generate_dump",
    "load_config",
    "scan",
]
__version__ = "0.1.0"

from dumpcode.api import build_manifest, dump_project, load_config  # noqa: E402, F401
from dumpcode.classifiers import classify  # noqa: E402, F401
from dumpcode.core.config import ScanConfig  # noqa: E402, F401
from dumpcode.core.discover import scan  # noqa: E402, F401
from dumpcode.core.runner import assemble, generate_dump  # noqa: E402, F401
