"""extstore - Extension Store panel widgets.

Author: Michael Economou
Date: 2026-02-02

GUI building blocks for the extension store panel: extension list items,
progress buttons, the description pane and a small synchronous signal/slot
primitive used to wire them together.
"""

from extstore.config import APP_NAME, APP_VERSION

__version__ = APP_VERSION

__all__ = ["APP_NAME", "__version__"]
