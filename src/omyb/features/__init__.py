"""Feature packages: naming, outline projection and relocation."""
