"""UI adapters - bridge between toolkit input types and the domain layer.

Adapters import their toolkit lazily so the rest of the package stays
usable without it.
"""
