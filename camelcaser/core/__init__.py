"""Core — Context, engine, logging and error types."""
