"""noteweave: Obsidian-style link resolution and embed expansion for markdown vaults."""

__version__ = "0.1.0"
