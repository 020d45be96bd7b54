"""noteweave API package."""
