"""Shared constants for noteweave dot-directories and artefact locations."""

NOTEWEAVE_HOME_EXT = ".noteweave"  # user-level state/config directory suffix

LOG_FILE_NAME = "noteweave.log"
