# =============================================================================
# tools/text_tools.py  —  MCP wrappers for the deterministic text tools
# =============================================================================
#
# The functions in core/text_ops.py are already tool-shaped: typed
# parameters, one-line docstrings, plain return values.  The only thing the
# tools layer adds is logging, so the wrappers are generated instead of
# written out one by one.
# =============================================================================

from core.text_ops import TEXT_TOOLS as _TEXT_OPS
from tools.console import logged

TEXT_TOOLS = [logged(fn) for fn in _TEXT_OPS]
