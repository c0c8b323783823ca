"""Web framework adapters.

Each adapter imports its framework, so import the submodule you need, e.g.
``from responders.integrations.flask import respond``.
"""
