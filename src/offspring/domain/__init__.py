"""Domain layer: native categories, unions, enums, classes, and assertions.

Never imports from services, commands, or output. The only upward
reference is the lazy lookup of the process-wide TypeSystem when a class
statement does not name one.
"""
