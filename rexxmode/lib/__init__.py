"""Editor-independent helper modules."""
