"""Auto-import builtin tool modules to trigger @register_tool decorators.

Import order is the order tools are listed to clients.
"""
from . import clock
from . import arithmetic
from . import echo
from . import fetch
