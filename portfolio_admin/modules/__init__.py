"""
Portfolio Admin Modules
=======================

Flask blueprint modules: the dashboard plus one editor per content resource.
"""

__all__ = ['dashboard', 'editor', 'projects', 'skills', 'experience']
