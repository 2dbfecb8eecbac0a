"""Cabinetry interchange engine.

Imports manufacturer cabinet catalogs from Spreadsheet 2003 XML exports,
and exports designed kitchen jobs as assembly XML for CNC workshop
software.
"""

__version__ = "1.0.0"
