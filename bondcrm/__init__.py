"""Bond Desk Intelligence - trade extraction and direction validation for chat transcripts."""

__version__ = "0.1.0"
