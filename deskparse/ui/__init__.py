"""Optional Qt integration. Requires the ``qt`` extra (PyQt6)."""
