"""
Core decoration engine.

- entries.py: tagged specification entries (Accessor, Method, TypeRef)
- specs.py: immutable named type specifications
- registry.py: type name to specification lookup
- resolver.py: key to entry resolution with the any-index fallback
- view.py: decorated views and the decorate() factory
- validations.py: optional registry consistency checks
"""
