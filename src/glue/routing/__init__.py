"""Routing — regex route table, handler resolution, and argument binding.

Routes are registered during setup and tried in descending order of
their raw pattern key on every dispatch.
"""
