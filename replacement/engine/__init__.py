# replacement/engine/__init__.py

"""Engine package providing the JSON replacement traversal.

This package contains the copy-on-visit, explicit-stack implementation of
value substitution over decoded JSON documents.
"""
