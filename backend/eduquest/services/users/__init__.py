"""User domain services: accounts, provisioning, points, themes and inventory.

HTTP routes call into these functions and never touch the session directly.
Each mutating function loads the user, changes it in memory and commits once,
so a raised error never leaves a partial write behind.
"""
