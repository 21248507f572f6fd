"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: in-memory storage, id allocation and query helpers
"""
