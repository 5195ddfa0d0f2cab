"""
The MODEL layer contains pure data structures and editing logic.
It has NO knowledge of the GUI (Qt).
It deals with the term tree, the cursor and layout.
"""
