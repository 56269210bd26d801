"""
Package marker for source code under `library_listing.common`.
It groups settings and logging helpers shared by the query core and the screen registry.
"""
