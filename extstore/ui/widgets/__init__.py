"""Module: __init__.py

Author: Michael Economou
Date: 2026-02-02

Widgets of the extension store panel.
"""

from extstore.ui.widgets.description_view import DescriptionView
from extstore.ui.widgets.extension_item import ExtensionItem
from extstore.ui.widgets.progress_button import ButtonState, ProgressButton
from extstore.ui.widgets.web_icon import WebIcon

__all__ = ["ButtonState", "DescriptionView", "ExtensionItem", "ProgressButton", "WebIcon"]
