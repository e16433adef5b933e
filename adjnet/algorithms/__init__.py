"""
Classification, set operations and isomorphism. The three modules only share
``adjnet.core`` and ``adjnet.io``; none imports another.
"""
