"""UI-facing adapters (optional PyQt5 integration)."""
