"""
Core domain logic: exceptions, identity, access gating, progress math.

Nothing in this package touches the database or HTTP layer.
"""
