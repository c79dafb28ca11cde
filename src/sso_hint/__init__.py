"""Last-used identity provider shortcut for login pages"""

__version__ = "1.0.0"
