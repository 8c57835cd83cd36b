"""
Core functionality for the YouTube summary gateway.

This package contains the URL resolver, the oEmbed metadata lookup and
the orchestrator that ties them to the processing backend.
"""
