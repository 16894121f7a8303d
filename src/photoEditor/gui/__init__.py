"""Qt integration for the photo editor."""
