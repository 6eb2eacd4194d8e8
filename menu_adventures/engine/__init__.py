"""Game engine components.

- World graph: containment forest plus location topology (`graph`)
- Possibility model: what actions can ever apply to what (`possibility`)
- Domains: where sentence arguments come from (`domains`)
- Sentences: enumeration and disambiguation (`sentences`)
- Actions: the built-in action set (`actions`)
- Turn loop: `turn`

Import directly from submodules to avoid circular imports:
    from menu_adventures.engine.universe import Universe
    from menu_adventures.engine.turn import turn
"""

# Note: No eager imports to avoid circular import issues
