"""
gametime
~~~~~~~~

Time keeping for tabletop campaigns: calendars whose years are made of named
extents of arbitrary length, plus the ordering helpers they rely on.

Logging goes through loguru and is disabled for this package by default.
Turn it on with ``logger.enable("gametime")``.
"""

from loguru import logger

logger.disable("gametime")
