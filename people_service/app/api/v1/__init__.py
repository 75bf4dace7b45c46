"""
Version 1 of the API.

This subpackage bundles the REST endpoints of the people service.
Breaking changes to the wire format belong in a new version
subpackage (e.g. ``v2``).
"""
