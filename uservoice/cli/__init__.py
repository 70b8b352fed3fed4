"""Command line interface for the UserVoice SDK."""
