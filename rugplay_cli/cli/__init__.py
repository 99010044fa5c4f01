"""
Interactive shell components: command registry, command table, REPL and entry point.
"""
