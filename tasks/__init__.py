"""
tasks — Per-user task CRUD.

Every operation takes the ``AuthenticatedUser`` resolved by
``auth.dependencies.get_current_user`` and only touches rows it owns.
"""
