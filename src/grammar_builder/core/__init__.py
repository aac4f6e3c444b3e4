"""
Core grammar model: rule IR, combinators, registry and serializer.
"""
