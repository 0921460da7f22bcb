"""Internal implementation modules of sphaera (import via ``sphaera`` instead)."""
