"""
HAVEN - Panic Button Backend

This package provides the triage, safety screening and weekly
insight services behind the HAVEN self-help anxiety support app.

IMPORTANT: Crisis screening runs locally and must never depend on
network availability. Remote classification is always optional.
"""

__version__ = "0.1.0"
__author__ = "HAVEN Engineering Team"
