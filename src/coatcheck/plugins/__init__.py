"""Extension layer — room observers via pluggy.

Discovery: entry_points (pip-installed) in the ``coatcheck.plugins`` group.
"""

from coatcheck.plugins.manager import PluginManager

__all__ = ["PluginManager"]
