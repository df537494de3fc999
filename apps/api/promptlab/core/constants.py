"""Shared constants."""

# Literal prefix of the one-sentence justification line the model must emit first
JUSTIFICATION_MARKER = "**Framework-Wahl:**"

# Separator between a section letter and its content, e.g. "T – Erstelle ..." (EN DASH)
SECTION_SEPARATOR = " – "

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

# How long a copy acknowledgement stays visible
COPY_ACK_SECONDS = 2.0
