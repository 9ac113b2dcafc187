"""Locale value object and Babel-backed formatting.

These collaborators sit beside the Translator; resolution never calls them.

Python 3.13+. Uses Babel for i18n.
"""

from .formatter import LocaleFormatter
from .locale import Locale

__all__ = ["Locale", "LocaleFormatter"]
