"""
Chem Companion - A pocket chemistry reference for students

A Textual TUI application providing:
- Periodic Table: tap an element to look it up
- Elements Explorer: search by name, symbol or atomic number
- Quick Notes: save observations and have them read aloud
- File Conversion Tool: export lab reports (mocked)
"""

__version__ = "1.0.0"
