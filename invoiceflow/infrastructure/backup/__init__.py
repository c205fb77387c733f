"""
Backup module.
Full-store export and import.
"""

from .backup_service import BackupService, backup_filename

__all__ = ["BackupService", "backup_filename"]
