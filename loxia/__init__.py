"""
Loxia: a tree-walking interpreter for a small Lox-like scripting language.
"""
