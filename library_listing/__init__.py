"""
Package marker for the library listing query core.
It groups the parameter composer, the sort cycle, and the list query controller under one import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
