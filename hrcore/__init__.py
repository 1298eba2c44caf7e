"""
hrcore - Access Gating Core
===========================
Role hierarchy, plan/module gating, fine-grained permissions,
tenant lifecycle state, and the unified access decision engine.
"""
