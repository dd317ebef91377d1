"""Classic operating-system algorithms: CPU scheduling, memory allocation, page replacement and disk scheduling."""

__version__ = "0.1.0"

__all__ = ["cli", "cpu_scheduling", "disk_scheduling", "memory_allocation", "paging"]