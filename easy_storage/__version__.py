#!/usr/bin/env python3
"""Version information for easy_storage"""

__version__ = "1.0.0"
__author__ = "easy_storage contributors"
__author_email__ = ""
__license__ = "GPL-3.0"
__url__ = ""
