"""
Build TypeScript type declarations as objects, then print them as source text.
"""
