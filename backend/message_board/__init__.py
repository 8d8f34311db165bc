"""Message Board Package: post messages by form, read them back as HTML.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
