"""
External Integrations Package

This package contains the clients for collaborators outside the search
engine. The engine never calls them itself; callers feed their output into
the search options.

Key Components:
- intent: Intent extraction (HTTP service client and rule-based analyzer)
"""
