"""Application Layer.

Application services that orchestrate domain logic and infrastructure:
source registration, configuration, and the fixed-point query entry points
used by the routing engine.
"""
